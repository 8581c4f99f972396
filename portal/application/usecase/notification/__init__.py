"""Notification use cases."""

from portal.application.usecase.notification.send_invite_email import (
    SendInviteEmailRequest,
    SendInviteEmailResponse,
    SendInviteEmailUseCase,
)

__all__ = [
    "SendInviteEmailRequest",
    "SendInviteEmailResponse",
    "SendInviteEmailUseCase",
]
