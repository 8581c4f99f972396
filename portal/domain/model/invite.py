"""Invite entity.

Invites are the only way into the portal. A super admin issues an invite for
an email address and a role; the recipient redeems the token once to create
an account carrying exactly that role.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import Email, InviteId, InviteToken, ProfileId, Role

# Fixed policy, deliberately not exposed through settings.
INVITE_TTL = timedelta(days=7)


def utcnow() -> datetime:
    """Timezone-aware current time used for all invite comparisons."""
    return datetime.now(timezone.utc)


class Invite(DomainModel):
    """Invite entity - single-use offer to create an account.

    Business rules:
    - At most one usable (unused and unexpired) invite per email
    - Expires seven days after issuance
    - ``used`` flips to True exactly once, when the account is provisioned
    - Never deleted; expiry is a time comparison
    - An expired, unused invite is marked superseded when the email is
      invited again
    """

    id: InviteId
    email: Email
    role: Role
    token: InviteToken
    invited_by: ProfileId
    expires_at: datetime
    used: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    used_at: Optional[datetime] = None
    superseded_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """Whether the invite's expiry is at or before ``now``."""
        return self.expires_at <= now

    def is_usable(self, now: datetime) -> bool:
        """Whether the token can still create an account."""
        return not self.used and not self.is_expired(now)
