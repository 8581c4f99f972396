"""Notification domain service."""

import logfire

from portal.adapter.email.templates import InviteEmailRenderer
from portal.domain.error import ValidationError
from portal.domain.value import Role

from .base import Service
from .session_service import SessionService


class EmailClient:
    """Transactional email provider interface."""

    async def send(self, to: str, subject: str, html: str) -> str:
        """Send one email.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body

        Returns:
            Provider-assigned message ID

        Raises:
            DeliveryFailedError: If the provider rejects the message
        """
        raise NotImplementedError


class NotificationService(Service):
    """Sends invitation emails on behalf of a super admin."""

    def __init__(
        self,
        session_service: SessionService,
        email_client: EmailClient,
        renderer: InviteEmailRenderer,
    ) -> None:
        """Initialize notification service.

        Args:
            session_service: Session service used for the authorization gate
            email_client: Email provider client
            renderer: Invitation email renderer
        """
        self.session_service = session_service
        self.email_client = email_client
        self.renderer = renderer

    async def send_invite_email(
        self,
        access_token: str | None,
        email: str,
        role: str,
        invite_link: str,
        invited_by_name: str | None = None,
    ) -> str:
        """Authorize the caller, render the invitation and hand it to the provider.

        The caller's bearer token is re-verified here; nothing is rendered or
        sent until it resolves to an active super admin.

        Args:
            access_token: Caller's bearer token
            email: Recipient address
            role: Role the recipient is invited as
            invite_link: Account creation link
            invited_by_name: Optional inviter display name

        Returns:
            Provider message ID

        Raises:
            UnauthorizedError: On any authorization failure
            ValidationError: If required fields are missing or the role is unknown
            DeliveryFailedError: If the provider rejects the message
        """
        operator = await self.session_service.require_super_admin(access_token)

        if not email or not role or not invite_link:
            raise ValidationError("Missing required fields")
        try:
            invited_role = Role(role)
        except ValueError:
            raise ValidationError(f"Unknown role: {role}")

        with logfire.span(
            "notification_service.send_invite_email",
            operator_id=str(operator.user_id),
            role=invited_role.value,
        ):
            inviter_name = invited_by_name or operator.full_name or "Your Administrator"
            message = self.renderer.render_invite(
                role=invited_role, invite_link=invite_link, inviter_name=inviter_name
            )

            email_id = await self.email_client.send(
                to=email, subject=message.subject, html=message.html
            )
            logfire.info(
                "Invite email sent",
                email_id=email_id,
                operator_id=str(operator.user_id),
            )
            return email_id
