"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from portal.adapter.error import AdapterError
from portal.application.usecase.auth import (
    GetCurrentSessionRequest,
    GetCurrentSessionResponse,
    GetCurrentSessionUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from portal.domain.error import DomainError
from portal.interface.api.bearer import bearer_token
from portal.interface.error import to_http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Sign in with email and password.

    Returns:
        Session tokens and the dashboard path for the user's role

    Raises:
        HTTPException: 401 bad credentials, 403 inactive account, 404 no profile
    """
    try:
        return await login_use_case.execute(request)
    except (DomainError, AdapterError) as e:
        logger.info(f"Login failed: {type(e).__name__}")
        raise to_http_error(e)


@router.get("/me", response_model=GetCurrentSessionResponse)
async def get_current_session(
    get_current_session_use_case: FromDishka[GetCurrentSessionUseCase],
    access_token: str | None = Depends(bearer_token),
) -> GetCurrentSessionResponse:
    """Resolve the caller's bearer token into their session."""
    try:
        return await get_current_session_use_case.execute(
            GetCurrentSessionRequest(access_token=access_token)
        )
    except (DomainError, AdapterError) as e:
        raise to_http_error(e)
