"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock implementation
Component = Literal["persistence", "identity", "email"]


class ProviderBase(Provider):
    """Base for all portal providers.

    A provider class with subclasses is a mockable component: the subclass
    flagged ``__is_mock__`` is picked in tests unless the component is
    unmocked. A provider without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is the mock implementation
        __depends_on__: Components that must also be unmocked when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
