"""Mock persistence providers for testing."""

from dishka import Scope, provide

from portal.domain.repository import InviteRepository, ProfileRepository
from portal.persistence.repository.inmemory import (
    InMemoryInviteRepository,
    InMemoryProfileRepository,
)
from portal.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across the requests
    of one end-to-end flow. Each test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invite_repository(self) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository()

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()
