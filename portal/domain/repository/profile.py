"""Profile repository interface."""

from abc import ABC, abstractmethod

from portal.domain.model.profile import Profile
from portal.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        """Find a profile by the id of its auth identity.

        Args:
            profile_id: Identity/profile ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
