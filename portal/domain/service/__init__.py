"""Domain services."""

from .base import Service
from .identity import IdentityClient
from .invite_service import InviteService
from .notification_service import EmailClient, NotificationService
from .provisioning_service import ProvisionedAccount, ProvisioningService
from .session_service import SessionService

__all__ = [
    "EmailClient",
    "IdentityClient",
    "InviteService",
    "NotificationService",
    "ProvisionedAccount",
    "ProvisioningService",
    "Service",
    "SessionService",
]
