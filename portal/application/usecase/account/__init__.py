"""Account use cases."""

from portal.application.usecase.account.create_account import (
    MIN_PASSWORD_LENGTH,
    CreateAccountRequest,
    CreateAccountResponse,
    CreateAccountUseCase,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "CreateAccountRequest",
    "CreateAccountResponse",
    "CreateAccountUseCase",
]
