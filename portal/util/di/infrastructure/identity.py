"""Auth platform infrastructure providers."""

from dishka import Scope, provide

from portal.adapter.identity.supabase import SupabaseIdentityClient
from portal.config import Settings
from portal.domain.service import IdentityClient
from portal.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider backed by Supabase Auth."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityClient:
        """Provide Supabase identity client.

        Raises:
            ValueError: If the Supabase project is not configured
        """
        if not settings.supabase.url:
            raise ValueError("Supabase URL must be configured")
        if not settings.supabase.anon_key:
            raise ValueError("Supabase anon key must be configured")

        return SupabaseIdentityClient(
            url=settings.supabase.url,
            anon_key=settings.supabase.anon_key,
            timeout=settings.remote.timeout_seconds,
        )
