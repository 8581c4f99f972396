"""Create invite use case."""

from datetime import datetime
from urllib.parse import urlencode

import logfire
from pydantic import BaseModel

from portal.adapter.error import ProviderError, RemoteCallError
from portal.application.usecase.base import BaseUseCase
from portal.config import Settings
from portal.domain.error import UnauthorizedError
from portal.domain.service import InviteService, NotificationService, SessionService
from portal.domain.value import Role


class CreateInviteRequest(BaseModel):
    """Create invite request."""

    access_token: str | None
    email: str
    role: Role


class CreateInviteResponse(BaseModel):
    """Create invite response.

    The link is returned even when the email could not be sent, so the
    operator can share it by hand.
    """

    id: str
    email: str
    role: Role
    expires_at: datetime
    invite_link: str
    email_sent: bool
    email_error: str | None = None


class CreateInviteUseCase(BaseUseCase):
    """Use case for issuing an invite and sending the invitation email."""

    def __init__(
        self,
        session_service: SessionService,
        invite_service: InviteService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize create invite use case.

        Args:
            session_service: Session domain service
            invite_service: Invite domain service
            notification_service: Notification domain service
            settings: Application settings
        """
        self.session_service = session_service
        self.invite_service = invite_service
        self.notification_service = notification_service
        self.settings = settings

    def build_link(self, token: str) -> str:
        """Account creation link for a token."""
        query = urlencode({"token": token})
        return f"{self.settings.api.frontend_url}/create-account?{query}"

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Execute the create invite flow.

        Steps:
        1. Resolve the operator session from the bearer token
        2. Issue the invite
        3. Build the account creation link
        4. Send the invitation email; a failed send does not undo the invite

        Args:
            request: Create invite request

        Returns:
            Created invite with link and email delivery outcome

        Raises:
            UnauthenticatedError: If the bearer token is missing or invalid
            UnauthorizedError: If the operator is not an active super admin
            ValidationError: If the email is malformed
            DuplicateActiveInviteError: If a usable invite already exists
        """
        session = (
            await self.session_service.resolve(request.access_token)
            if request.access_token
            else None
        )

        with logfire.span("create_invite.execute", role=request.role.value):
            invite = await self.invite_service.create_invite(
                session, request.email, request.role
            )
            link = self.build_link(invite.token.root)

            email_sent = False
            email_error = None
            try:
                await self.notification_service.send_invite_email(
                    access_token=request.access_token,
                    email=invite.email.root,
                    role=invite.role.value,
                    invite_link=link,
                    invited_by_name=session.full_name if session else None,
                )
                email_sent = True
            except (ProviderError, RemoteCallError, UnauthorizedError) as e:
                logfire.warn(
                    "Invite created but email not sent",
                    invite_id=str(invite.id),
                    error=str(e),
                )
                email_error = str(e)

            return CreateInviteResponse(
                id=str(invite.id),
                email=invite.email.root,
                role=invite.role,
                expires_at=invite.expires_at,
                invite_link=link,
                email_sent=email_sent,
                email_error=email_error,
            )
