"""In-memory repository implementations for testing."""

from .invite import InMemoryInviteRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryInviteRepository",
    "InMemoryProfileRepository",
]
