"""Invite domain service."""

import secrets
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from portal.domain.error import (
    DuplicateActiveInviteError,
    ExpiredTokenError,
    InvalidOrUsedTokenError,
    MissingTokenError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationError,
)
from portal.domain.model import INVITE_TTL, Invite, utcnow
from portal.domain.repository import InviteRepository
from portal.domain.value import Email, InviteId, InviteToken, OperatorSession, Role

from .access import can_manage_users
from .base import Service


class InviteService(Service):
    """Domain service for the invite lifecycle: issue, validate, consume."""

    def __init__(self, invite_repository: InviteRepository) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
        """
        self.invite_repository = invite_repository

    @staticmethod
    def generate_token() -> InviteToken:
        """Generate an unguessable URL-safe token (256 bits)."""
        return InviteToken(root=secrets.token_urlsafe(32))

    async def create_invite(
        self,
        session: OperatorSession | None,
        email: str,
        role: Role,
        now: datetime | None = None,
    ) -> Invite:
        """Issue a new invite for an email and role.

        Args:
            session: Current operator session, None if unauthenticated
            email: Target email (free text, normalized here)
            role: Role the invitee will receive
            now: Issuance time (defaults to current UTC time)

        Returns:
            Created invite

        Raises:
            UnauthenticatedError: If there is no operator session
            UnauthorizedError: If the operator is not an active super admin
            ValidationError: If the email is malformed
            DuplicateActiveInviteError: If a usable invite already exists
        """
        if session is None:
            logfire.warn("Invite issuance without session")
            raise UnauthenticatedError()
        if not can_manage_users(session):
            logfire.warn(
                "Invite issuance by non super admin",
                operator_id=str(session.user_id),
                role=session.role.value,
            )
            raise UnauthorizedError()

        try:
            normalized = Email(email)
        except PydanticValidationError:
            raise ValidationError("A valid email address is required")

        now = now or utcnow()

        with logfire.span(
            "invite_service.create_invite",
            operator_id=str(session.user_id),
            email=normalized.root,
            role=role.value,
        ):
            # Narrows the race window; the partial unique index closes it
            existing = await self.invite_repository.find_usable_by_email(
                normalized, now
            )
            if existing:
                logfire.warn(
                    "Active invite already exists",
                    email=normalized.root,
                    invite_id=str(existing.id),
                )
                raise DuplicateActiveInviteError(normalized.root)

            superseded = await self.invite_repository.supersede_expired(
                normalized, now
            )
            if superseded:
                logfire.info(
                    "Expired invites superseded",
                    email=normalized.root,
                    count=superseded,
                )

            invite = Invite(
                id=InviteId(uuid4()),
                email=normalized,
                role=role,
                token=self.generate_token(),
                invited_by=session.user_id,
                expires_at=now + INVITE_TTL,
                used=False,
                created_at=now,
            )

            saved = await self.invite_repository.insert(invite)
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                operator_id=str(session.user_id),
                role=role.value,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def validate_token(
        self, token: str | None, now: datetime | None = None
    ) -> Invite:
        """Check whether a token can still create an account.

        Order matters: missing, then unknown-or-used, then expired.
        Has no side effects, so reloading the form never burns a token.

        Args:
            token: Token from an untrusted caller
            now: Reference time (defaults to current UTC time)

        Returns:
            The usable invite

        Raises:
            MissingTokenError: If no token was supplied
            InvalidOrUsedTokenError: If no unused invite matches
            ExpiredTokenError: If the invite exists, is unused, but expired
        """
        if token is None or not token.strip():
            logfire.info("Invite validation without token")
            raise MissingTokenError()

        try:
            invite_token = InviteToken(root=token.strip())
        except PydanticValidationError:
            raise InvalidOrUsedTokenError()

        with logfire.span(
            "invite_service.validate_token", token=invite_token.masked()
        ):
            invite = await self.invite_repository.find_unused_by_token(invite_token)
            if not invite:
                logfire.info("Invite invalid or used", token=invite_token.masked())
                raise InvalidOrUsedTokenError()

            now = now or utcnow()
            if invite.is_expired(now):
                logfire.info(
                    "Invite expired",
                    invite_id=str(invite.id),
                    expires_at=invite.expires_at.isoformat(),
                )
                raise ExpiredTokenError()

            logfire.info(
                "Invite valid", invite_id=str(invite.id), role=invite.role.value
            )
            return invite

    async def consume(self, token: InviteToken, now: datetime | None = None) -> Invite:
        """Mark an invite used. Succeeds once per token.

        Args:
            token: Invite token
            now: Consumption time (defaults to current UTC time)

        Returns:
            The consumed invite

        Raises:
            InvalidOrUsedTokenError: If the token was already consumed
        """
        with logfire.span("invite_service.consume", token=token.masked()):
            consumed = await self.invite_repository.mark_used(token, now or utcnow())
            if not consumed:
                logfire.error("Invite consumption lost race", token=token.masked())
                raise InvalidOrUsedTokenError()

            logfire.info("Invite consumed", invite_id=str(consumed.id))
            return consumed

    async def list_invites(
        self,
        session: OperatorSession,
        active_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites issued by the operator, newest first.

        Args:
            session: Current operator session
            active_only: Only include usable invites
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites

        Raises:
            UnauthorizedError: If the operator is not an active super admin
        """
        if not can_manage_users(session):
            raise UnauthorizedError()

        with logfire.span(
            "invite_service.list_invites",
            operator_id=str(session.user_id),
            active_only=active_only,
            limit=limit,
            offset=offset,
        ):
            invites = await self.invite_repository.find_by_inviter(
                session.user_id,
                active_only=active_only,
                now=utcnow(),
                limit=limit,
                offset=offset,
            )
            logfire.info(
                "Invites listed",
                operator_id=str(session.user_id),
                count=len(invites),
            )
            return invites
