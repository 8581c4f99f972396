"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import and_, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.error import DuplicateActiveInviteError
from portal.domain.model import Invite
from portal.domain.repository import InviteRepository
from portal.domain.value import Email, InviteId, InviteToken, ProfileId
from portal.persistence.database import constraint_name, db_errors, sqlstate
from portal.persistence.mappers import invite_to_dict, row_to_invite
from portal.persistence.tables import invites_table

UNIQUE_VIOLATION = "23505"
ACTIVE_EMAIL_INDEX = "idx_invites_unique_active_email"


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _first(self, stmt) -> Optional[Invite]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    def _live(self):
        """Unused and not superseded."""
        return and_(
            invites_table.c.used.is_(False),
            invites_table.c.superseded_at.is_(None),
        )

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        with db_errors("invites.find_by_id"):
            return await self._first(stmt)

    async def find_unused_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an unused invite by token; used invites are filtered in SQL."""
        stmt = select(invites_table).where(
            and_(
                invites_table.c.token == token.root,
                invites_table.c.used.is_(False),
            )
        )
        with db_errors("invites.find_unused_by_token"):
            return await self._first(stmt)

    async def find_usable_by_email(
        self, email: Email, now: datetime
    ) -> Optional[Invite]:
        """Find an unused, unexpired invite for an email."""
        stmt = select(invites_table).where(
            and_(
                invites_table.c.email == email.root,
                invites_table.c.used.is_(False),
                invites_table.c.expires_at > now,
            )
        )
        with db_errors("invites.find_usable_by_email"):
            return await self._first(stmt)

    async def find_unused_by_email(self, email: Email) -> Optional[Invite]:
        """Find the newest live invite for an email."""
        stmt = (
            select(invites_table)
            .where(and_(invites_table.c.email == email.root, self._live()))
            .order_by(invites_table.c.created_at.desc())
            .limit(1)
        )
        with db_errors("invites.find_unused_by_email"):
            return await self._first(stmt)

    async def insert(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            DuplicateActiveInviteError: If the partial unique index on live
                invites rejects the row
        """
        stmt = insert(invites_table).values(**invite_to_dict(invite))
        with db_errors("invites.insert"):
            try:
                # Savepoint keeps the request transaction usable after a violation
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                if (
                    sqlstate(e) == UNIQUE_VIOLATION
                    and constraint_name(e) == ACTIVE_EMAIL_INDEX
                ):
                    logfire.warn(
                        "Active invite unique index violated", email=invite.email.root
                    )
                    raise DuplicateActiveInviteError(invite.email.root)
                raise
        return invite

    async def supersede_expired(self, email: Email, now: datetime) -> int:
        """Mark live invites for an email that expired before ``now`` as superseded."""
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.email == email.root,
                    self._live(),
                    invites_table.c.expires_at <= now,
                )
            )
            .values(superseded_at=now)
        )
        with db_errors("invites.supersede_expired"):
            result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def mark_used(self, token: InviteToken, now: datetime) -> Optional[Invite]:
        """Flip ``used`` in a single conditional UPDATE; no row means someone else won."""
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.token == token.root,
                    invites_table.c.used.is_(False),
                )
            )
            .values(used=True, used_at=now)
            .returning(invites_table)
        )
        with db_errors("invites.mark_used"):
            return await self._first(stmt)

    async def find_by_inviter(
        self,
        inviter_id: ProfileId,
        active_only: bool = False,
        now: Optional[datetime] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites issued by an operator, newest first."""
        conditions = [invites_table.c.invited_by == inviter_id]
        if active_only:
            conditions.append(invites_table.c.used.is_(False))
            if now is not None:
                conditions.append(invites_table.c.expires_at > now)

        stmt = (
            select(invites_table)
            .where(and_(*conditions))
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        with db_errors("invites.find_by_inviter"):
            result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]
