"""List invites use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from portal.domain.model import utcnow
from portal.domain.service import InviteService, SessionService
from portal.domain.value import Role


class ListInvitesRequest(BaseModel):
    """List invites request."""

    access_token: str | None
    active_only: bool = False
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class InviteSummary(BaseModel):
    """Invite as shown on the super admin dashboard."""

    id: str
    email: str
    role: Role
    used: bool
    expired: bool
    created_at: datetime
    expires_at: datetime
    used_at: datetime | None


class ListInvitesResponse(BaseModel):
    """List invites response."""

    invites: list[InviteSummary]
    total: int


class ListInvitesUseCase:
    """Use case for listing the invites issued by the current operator."""

    def __init__(
        self, session_service: SessionService, invite_service: InviteService
    ) -> None:
        """Initialize list invites use case.

        Args:
            session_service: Session domain service
            invite_service: Invite domain service
        """
        self.session_service = session_service
        self.invite_service = invite_service

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """List invites, newest first.

        Raises:
            UnauthenticatedError: If the bearer token is missing or invalid
            UnauthorizedError: If the operator is not an active super admin
        """
        session = await self.session_service.resolve(request.access_token)
        invites = await self.invite_service.list_invites(
            session,
            active_only=request.active_only,
            limit=request.limit,
            offset=request.offset,
        )

        now = utcnow()
        summaries = [
            InviteSummary(
                id=str(invite.id),
                email=invite.email.root,
                role=invite.role,
                used=invite.used,
                expired=invite.is_expired(now),
                created_at=invite.created_at,
                expires_at=invite.expires_at,
                used_at=invite.used_at,
            )
            for invite in invites
        ]
        return ListInvitesResponse(invites=summaries, total=len(summaries))
