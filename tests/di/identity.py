"""Mock auth platform providers for testing."""

from dishka import Scope, provide

from portal.adapter.identity.mock import (
    MockAuthPlatform,
    MockIdentityClient,
    profile_trigger,
)
from portal.domain.repository import InviteRepository, ProfileRepository
from portal.domain.service import IdentityClient
from portal.util.di.infrastructure.identity import IdentityProvider


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider.

    The platform store lives for the whole container; clients are built per
    request so the profile trigger writes through that request's repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_auth_platform(self) -> MockAuthPlatform:
        """Provide the in-process user store."""
        return MockAuthPlatform()

    @provide(scope=Scope.REQUEST)
    def get_identity_client(
        self,
        platform: MockAuthPlatform,
        invite_repository: InviteRepository,
        profile_repository: ProfileRepository,
    ) -> IdentityClient:
        """Provide mock identity client with the profile trigger attached."""
        return MockIdentityClient(
            platform=platform,
            on_sign_up=profile_trigger(invite_repository, profile_repository),
        )
