"""Session domain service."""

import logfire

from portal.domain.error import (
    AccountInactiveError,
    NotFoundError,
    UnauthenticatedError,
    UnauthorizedError,
)
from portal.domain.model import Profile
from portal.domain.repository import ProfileRepository
from portal.domain.value import AuthSession, OperatorSession

from .access import can_manage_users
from .base import Service
from .identity import IdentityClient


class SessionService(Service):
    """Turns platform credentials into explicit operator sessions."""

    def __init__(
        self, identity_client: IdentityClient, profile_repository: ProfileRepository
    ) -> None:
        """Initialize session service.

        Args:
            identity_client: Auth platform client
            profile_repository: Profile repository
        """
        self.identity_client = identity_client
        self.profile_repository = profile_repository

    async def resolve(self, access_token: str | None) -> OperatorSession:
        """Resolve a bearer token into the operator behind it.

        Args:
            access_token: Bearer token, None if the caller sent none

        Returns:
            Operator session

        Raises:
            UnauthenticatedError: If the token is missing, invalid, or has no profile
        """
        if not access_token:
            raise UnauthenticatedError()

        with logfire.span("session_service.resolve"):
            identity = await self.identity_client.get_user(access_token)
            if identity is None:
                logfire.info("Bearer token rejected by auth platform")
                raise UnauthenticatedError("Invalid or expired session")

            profile = await self.profile_repository.find_by_id(identity.id)
            if profile is None:
                logfire.warn("Identity has no profile", identity_id=str(identity.id))
                raise UnauthenticatedError("Invalid or expired session")

            return OperatorSession(
                user_id=profile.id,
                email=profile.email,
                role=profile.role,
                is_active=profile.is_active,
                full_name=profile.full_name,
                access_token=access_token,
            )

    async def require_super_admin(self, access_token: str | None) -> OperatorSession:
        """Resolve a bearer token and insist on an active super admin.

        Every failure raises the same error so callers cannot tell roles apart.

        Args:
            access_token: Bearer token

        Returns:
            Operator session

        Raises:
            UnauthorizedError: On any authentication or role failure
        """
        try:
            session = await self.resolve(access_token)
        except UnauthenticatedError:
            raise UnauthorizedError()

        if not can_manage_users(session):
            logfire.warn(
                "Elevated action refused",
                operator_id=str(session.user_id),
                role=session.role.value,
            )
            raise UnauthorizedError()
        return session

    async def login(self, email: str, password: str) -> tuple[AuthSession, Profile]:
        """Sign in with a password and load the matching profile.

        Args:
            email: Email address
            password: Password

        Returns:
            Tuple of (auth session, profile)

        Raises:
            InvalidCredentialsError: If the platform rejects the credentials
            NotFoundError: If the identity has no profile
            AccountInactiveError: If the profile is deactivated
        """
        with logfire.span("session_service.login", email=email.strip().lower()):
            auth_session = await self.identity_client.sign_in(
                email.strip().lower(), password
            )

            profile = await self.profile_repository.find_by_id(auth_session.user_id)
            if profile is None:
                logfire.error(
                    "Signed in identity has no profile",
                    identity_id=str(auth_session.user_id),
                )
                raise NotFoundError("Profile", str(auth_session.user_id))

            if not profile.is_active:
                logfire.warn("Inactive account login", profile_id=str(profile.id))
                raise AccountInactiveError()

            logfire.info(
                "User logged in", profile_id=str(profile.id), role=profile.role.value
            )
            return auth_session, profile
