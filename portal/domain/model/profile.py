"""Profile entity.

The portal-facing record of an account, created by the auth platform at the
moment an identity is created and keyed by that identity's id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.model.invite import utcnow
from portal.domain.value import ProfileId, Role


class Profile(DomainModel):
    """Profile entity, 1:1 with an auth identity.

    ``is_active`` gates access independently of the role.
    """

    id: ProfileId
    email: str
    role: Role
    full_name: Optional[str] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
