"""In-memory profile repository for testing."""

from typing import Optional

from portal.domain.model.profile import Profile
from portal.domain.repository.profile import ProfileRepository
from portal.domain.value import ProfileId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by identity ID."""
        return self._profiles.get(profile_id)

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        self._profiles[profile.id] = profile
        return profile
