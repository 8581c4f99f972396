"""Get current session use case."""

from pydantic import BaseModel

from portal.domain.service import SessionService
from portal.domain.service.access import dashboard_path
from portal.domain.value import Role


class GetCurrentSessionRequest(BaseModel):
    """Get current session request."""

    access_token: str | None


class GetCurrentSessionResponse(BaseModel):
    """Get current session response."""

    user_id: str
    email: str
    role: Role
    full_name: str | None
    is_active: bool
    redirect_to: str


class GetCurrentSessionUseCase:
    """Use case for resolving the caller's bearer token into a session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(
        self, request: GetCurrentSessionRequest
    ) -> GetCurrentSessionResponse:
        """Resolve the bearer token.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
        """
        session = await self.session_service.resolve(request.access_token)
        return GetCurrentSessionResponse(
            user_id=str(session.user_id),
            email=session.email,
            role=session.role,
            full_name=session.full_name,
            is_active=session.is_active,
            redirect_to=dashboard_path(session.role),
        )
