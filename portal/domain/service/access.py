"""Role checks shared by every entry point.

A role only counts while the account is active.
"""

from portal.domain.model import Profile
from portal.domain.value import OperatorSession, Role

Principal = Profile | OperatorSession

DASHBOARD_PATHS: dict[Role, str] = {
    Role.SUPER_ADMIN: "/super-admin",
    Role.ADMIN: "/admin",
    Role.CLIENT: "/client",
}


def has_role(principal: Principal | None, role: Role) -> bool:
    """Check the principal holds ``role`` and is active."""
    return principal is not None and principal.role == role and principal.is_active


def is_super_admin(principal: Principal | None) -> bool:
    return has_role(principal, Role.SUPER_ADMIN)


def can_manage_users(principal: Principal | None) -> bool:
    """Only super admins issue invites and send invitation emails."""
    return is_super_admin(principal)


def dashboard_path(role: Role) -> str:
    """Landing page for a role after login or account creation."""
    return DASHBOARD_PATHS.get(role, "/")
