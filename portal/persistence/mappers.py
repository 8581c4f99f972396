"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from portal.domain.model import Invite, Profile
from portal.domain.value import Email, InviteId, InviteToken, ProfileId, Role


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        email=Email(row["email"]),
        role=Role(row["role"]),
        token=InviteToken(root=row["token"]),
        invited_by=ProfileId(_uuid(row["invited_by"])),
        expires_at=row["expires_at"],
        used=row["used"],
        created_at=row["created_at"],
        used_at=row.get("used_at"),
        superseded_at=row.get("superseded_at"),
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    # Email and InviteToken dump to their primitive root values
    data = invite.model_dump()
    data["role"] = invite.role.value
    return data


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        email=row["email"],
        role=Role(row["role"]),
        full_name=row.get("full_name"),
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    data = profile.model_dump()
    data["role"] = profile.role.value
    return data
