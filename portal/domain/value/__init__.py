"""Domain value objects for the portal."""

from portal.domain.value.identifiers import InviteId, ProfileId
from portal.domain.value.types import (
    AuthIdentity,
    AuthSession,
    Email,
    InviteToken,
    OperatorSession,
    Role,
)

__all__ = [
    # Identifiers
    "InviteId",
    "ProfileId",
    # Types
    "AuthIdentity",
    "AuthSession",
    "Email",
    "InviteToken",
    "OperatorSession",
    "Role",
]
