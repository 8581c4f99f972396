"""Dependency injection wiring.

``PROVIDERS`` lists every provider the container is built from, in order.
Config, domain and application providers are concrete. Persistence,
identity and email are components: each base has a production and a mock
subclass, and ``get_provider`` picks one.
"""

from portal.util.di.application import ProdApplicationProvider
from portal.util.di.base import Component, ProviderBase
from portal.util.di.core import ProdConfigProvider
from portal.util.di.domain import ProdDomainProvider
from portal.util.di.infrastructure import (
    EmailProvider,
    IdentityProvider,
    PersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    IdentityProvider,
    EmailProvider,
]


def get_provider(base: type[ProviderBase], use_mock: bool = False) -> type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock implementation of a component

    Returns:
        ``base`` itself for concrete providers, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {c.__is_mock__: c for c in base.__subclasses__()}
    if not implementations:
        return base
    if use_mock not in implementations:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return implementations[use_mock]


def mockable_components() -> set[Component]:
    """Names of the components that have implementations to choose from."""
    return {p.__mock_component__ for p in PROVIDERS if p.__subclasses__()}


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
