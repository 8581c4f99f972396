"""Authentication use cases."""

from portal.application.usecase.auth.get_current_session import (
    GetCurrentSessionRequest,
    GetCurrentSessionResponse,
    GetCurrentSessionUseCase,
)
from portal.application.usecase.auth.login import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)

__all__ = [
    "GetCurrentSessionRequest",
    "GetCurrentSessionResponse",
    "GetCurrentSessionUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]
