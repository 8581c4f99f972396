"""Account creation routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, model_validator

from portal.adapter.error import AdapterError
from portal.application.usecase.account import (
    MIN_PASSWORD_LENGTH,
    CreateAccountRequest,
    CreateAccountResponse,
    CreateAccountUseCase,
)
from portal.domain.error import DomainError
from portal.interface.error import to_http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


class CreateAccountAPIRequest(BaseModel):
    """Account creation form.

    The password policy is checked here, so a rejected form never reaches
    the auth platform.
    """

    token: str | None = None
    full_name: str
    password: str
    confirm_password: str

    @model_validator(mode="after")
    def check_password_policy(self) -> "CreateAccountAPIRequest":
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match.")
        return self


@router.post(
    "", response_model=CreateAccountResponse, status_code=status.HTTP_201_CREATED
)
async def create_account(
    request: CreateAccountAPIRequest,
    create_account_use_case: FromDishka[CreateAccountUseCase],
) -> CreateAccountResponse:
    """Create an account from an invite token.

    Args:
        request: Token, display name and password
        create_account_use_case: Create account use case from DI

    Returns:
        Session for the new account and the dashboard to open

    Raises:
        HTTPException: 400 token rejected, 409 email already registered,
            500 profile provisioning failed

    Example:
        POST /accounts
        {
            "token": "...",
            "full_name": "Ada Lovelace",
            "password": "correct horse",
            "confirm_password": "correct horse"
        }
    """
    try:
        return await create_account_use_case.execute(
            CreateAccountRequest(
                token=request.token,
                full_name=request.full_name,
                password=request.password,
            )
        )
    except (DomainError, AdapterError) as e:
        logger.info(f"Account not created: {type(e).__name__}")
        raise to_http_error(e)
