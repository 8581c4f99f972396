"""Send invite email use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from portal.adapter.error import AdapterError
from portal.domain.error import DomainError
from portal.domain.service import NotificationService


class SendInviteEmailRequest(BaseModel):
    """Send invite email request."""

    access_token: str | None = None
    email: str | None = None
    role: str | None = None
    invite_link: str | None = None
    invited_by_name: str | None = None


class SendInviteEmailResponse(BaseModel):
    """Send invite email response: ``{success, message?, emailId?, error?}``."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str | None = None
    email_id: str | None = Field(default=None, alias="emailId")
    error: str | None = None


class SendInviteEmailUseCase:
    """Use case behind the invitation email function."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize send invite email use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: SendInviteEmailRequest) -> SendInviteEmailResponse:
        """Send the invitation email, reporting any failure in the response.

        Args:
            request: Recipient, role, link and caller's bearer token

        Returns:
            Success with the provider message ID, or failure with an error
        """
        try:
            email_id = await self.notification_service.send_invite_email(
                access_token=request.access_token,
                email=request.email or "",
                role=request.role or "",
                invite_link=request.invite_link or "",
                invited_by_name=request.invited_by_name,
            )
        except (DomainError, AdapterError) as e:
            logfire.warn("Invite email not sent", error=str(e))
            return SendInviteEmailResponse(success=False, error=str(e))

        return SendInviteEmailResponse(
            success=True, message="Email sent successfully", email_id=email_id
        )
