"""Login use case."""

import logfire
from pydantic import BaseModel

from portal.domain.service import SessionService
from portal.domain.service.access import dashboard_path
from portal.domain.value import Role


class LoginRequest(BaseModel):
    """Password login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    access_token: str
    refresh_token: str | None
    expires_in: int | None
    user_id: str
    email: str
    role: Role
    full_name: str | None
    redirect_to: str


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, session_service: SessionService) -> None:
        """Initialize login use case.

        Args:
            session_service: Session domain service
        """
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute the login flow.

        Steps:
        1. Sign in with the auth platform
        2. Load the profile and check it is active
        3. Pick the dashboard for the role

        Args:
            request: Email and password

        Returns:
            Session tokens, profile details and dashboard path

        Raises:
            InvalidCredentialsError: If the credentials are rejected
            NotFoundError: If the identity has no profile
            AccountInactiveError: If the profile is deactivated
        """
        with logfire.span("login.execute"):
            session, profile = await self.session_service.login(
                request.email, request.password
            )

            return LoginResponse(
                access_token=session.access_token,
                refresh_token=session.refresh_token,
                expires_in=session.expires_in,
                user_id=str(profile.id),
                email=profile.email,
                role=profile.role,
                full_name=profile.full_name,
                redirect_to=dashboard_path(profile.role),
            )
