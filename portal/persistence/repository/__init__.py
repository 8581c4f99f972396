"""PostgreSQL repository implementations."""

from portal.persistence.repository.invite import PostgresInviteRepository
from portal.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresInviteRepository",
    "PostgresProfileRepository",
]
