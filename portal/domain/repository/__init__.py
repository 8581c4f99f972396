"""Repository interfaces for the portal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from portal.domain.repository.invite import InviteRepository
from portal.domain.repository.profile import ProfileRepository

__all__ = [
    "InviteRepository",
    "ProfileRepository",
]
