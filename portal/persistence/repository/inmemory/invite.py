"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from portal.domain.error import DuplicateActiveInviteError
from portal.domain.model.invite import Invite
from portal.domain.repository.invite import InviteRepository
from portal.domain.value import Email, InviteId, InviteToken, ProfileId


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing.

    Enforces the same uniqueness rule as the partial index: one unused,
    non-superseded invite per email.
    """

    def __init__(self) -> None:
        self._invites: list[Invite] = []

    def _is_live(self, invite: Invite) -> bool:
        return not invite.used and invite.superseded_at is None

    def _replace(self, updated: Invite) -> None:
        for i, existing in enumerate(self._invites):
            if existing.id == updated.id:
                self._invites[i] = updated
                return

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        return next((i for i in self._invites if i.id == invite_id), None)

    async def find_unused_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an unused invite by token."""
        for invite in self._invites:
            if invite.token == token and not invite.used:
                return invite
        return None

    async def find_usable_by_email(
        self, email: Email, now: datetime
    ) -> Optional[Invite]:
        """Find an unused, unexpired invite for an email."""
        for invite in self._invites:
            if invite.email == email and invite.is_usable(now):
                return invite
        return None

    async def find_unused_by_email(self, email: Email) -> Optional[Invite]:
        """Find the newest live invite for an email."""
        matches = [i for i in self._invites if i.email == email and self._is_live(i)]
        if not matches:
            return None
        return max(matches, key=lambda i: i.created_at)

    async def insert(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            DuplicateActiveInviteError: If a live invite exists for the email
        """
        for existing in self._invites:
            if existing.email == invite.email and self._is_live(existing):
                raise DuplicateActiveInviteError(invite.email.root)
        self._invites.append(invite)
        return invite

    async def supersede_expired(self, email: Email, now: datetime) -> int:
        """Mark expired live invites for an email as superseded."""
        count = 0
        for invite in list(self._invites):
            if (
                invite.email == email
                and self._is_live(invite)
                and invite.is_expired(now)
            ):
                self._replace(invite.model_copy(update={"superseded_at": now}))
                count += 1
        return count

    async def mark_used(self, token: InviteToken, now: datetime) -> Optional[Invite]:
        """Flip ``used`` for an unused invite."""
        invite = await self.find_unused_by_token(token)
        if invite is None:
            return None
        updated = invite.model_copy(update={"used": True, "used_at": now})
        self._replace(updated)
        return updated

    async def find_by_inviter(
        self,
        inviter_id: ProfileId,
        active_only: bool = False,
        now: Optional[datetime] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites issued by an operator, newest first."""
        invites = [i for i in self._invites if i.invited_by == inviter_id]
        if active_only:
            invites = [
                i
                for i in invites
                if not i.used and (now is None or not i.is_expired(now))
            ]
        invites.sort(key=lambda i: i.created_at, reverse=True)
        return invites[offset : offset + limit]
