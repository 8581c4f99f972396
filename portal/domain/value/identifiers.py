"""Strongly typed identifiers for portal domain entities.

Profiles share their id with the auth platform identity that owns them, so
ProfileId and the operator ids stored on invites are the same UUID space.
"""

from typing import NewType
from uuid import UUID

InviteId = NewType("InviteId", UUID)
ProfileId = NewType("ProfileId", UUID)
