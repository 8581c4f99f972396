"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from portal.domain.model.invite import Invite
from portal.domain.value import Email, InviteId, InviteToken, ProfileId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_unused_by_token(self, token: InviteToken) -> Invite | None:
        """Find an invite matching ``token`` whose ``used`` flag is still false.

        Used invites are never returned, so callers cannot tell a consumed
        token from one that was never issued.

        Args:
            token: The invite token

        Returns:
            The unused invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_usable_by_email(self, email: Email, now: datetime) -> Invite | None:
        """Find an unused, unexpired invite for an email.

        Used during issuance to reject duplicates before inserting.

        Args:
            email: Normalized email address
            now: Reference time for the expiry comparison

        Returns:
            The usable invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_unused_by_email(self, email: Email) -> Invite | None:
        """Find the newest unused, non-superseded invite for an email.

        Used when the platform creates a profile for a new identity.

        Args:
            email: Normalized email address

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to insert

        Returns:
            The inserted invite

        Raises:
            DuplicateActiveInviteError: If the store's uniqueness rule for
                active invites on this email is violated
        """
        pass

    @abstractmethod
    async def supersede_expired(self, email: Email, now: datetime) -> int:
        """Mark unused invites for ``email`` that expired before ``now`` as superseded.

        Args:
            email: Normalized email address
            now: Reference time

        Returns:
            Number of invites superseded
        """
        pass

    @abstractmethod
    async def mark_used(self, token: InviteToken, now: datetime) -> Invite | None:
        """Atomically flip ``used`` from false to true for ``token``.

        Compare-and-set: succeeds for exactly one caller per token.

        Args:
            token: The invite token
            now: Time recorded as ``used_at``

        Returns:
            The updated invite, or None if no unused invite matched
        """
        pass

    @abstractmethod
    async def find_by_inviter(
        self,
        inviter_id: ProfileId,
        active_only: bool = False,
        now: datetime | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites issued by an operator, newest first.

        Args:
            inviter_id: The issuing operator's ID
            active_only: Only return usable invites
            now: Reference time for ``active_only``
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass
