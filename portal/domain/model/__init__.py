"""Domain model entities for the portal."""

from portal.domain.model.invite import INVITE_TTL, Invite, utcnow
from portal.domain.model.profile import Profile

__all__ = [
    "INVITE_TTL",
    "Invite",
    "Profile",
    "utcnow",
]
