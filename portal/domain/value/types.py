"""Domain value objects for the portal.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Any

from pydantic import field_validator

from portal.domain.value.common import RootValueObject, ValueObject
from portal.domain.value.identifiers import ProfileId


class Role(str, Enum):
    """Portal roles. Closed set; invitees never choose their own."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    CLIENT = "client"

    @property
    def display_name(self) -> str:
        """Human readable role name, e.g. ``super_admin`` -> ``Super Admin``."""
        return " ".join(word.capitalize() for word in self.value.split("_"))


class InviteToken(RootValueObject[str]):
    """URL-safe invite token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def masked(self) -> str:
        """Token prefix safe for logs."""
        return self.root[:8] + "..."


class Email(RootValueObject[str]):
    """Normalized (trimmed, lowercased) email address."""

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Trim and lowercase, then check basic shape."""
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or not domain or len(v) > 255:
            raise ValueError("Email must look like name@domain")
        return v


class AuthIdentity(ValueObject):
    """Identity record as returned by the auth platform."""

    id: ProfileId
    email: str
    user_metadata: dict[str, Any] = {}


class AuthSession(ValueObject):
    """Session issued by the auth platform after sign-in."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    user_id: ProfileId


class OperatorSession(ValueObject):
    """Authenticated caller resolved from a bearer token.

    Passed explicitly into the operations that need the current operator
    instead of being read from ambient state.
    """

    user_id: ProfileId
    email: str
    role: Role
    is_active: bool
    full_name: str | None = None
    access_token: str
