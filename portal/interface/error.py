"""Translation of domain and adapter errors into HTTP errors."""

from fastapi import HTTPException, status

from portal.adapter.error import (
    AdapterError,
    ProviderError,
    RemoteTimeoutError,
    RemoteUnavailableError,
)
from portal.domain.error import (
    AccountInactiveError,
    DomainError,
    DuplicateActiveInviteError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InviteRejectedError,
    NotFoundError,
    ProfileProvisioningFailedError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationError,
)

# First match wins, so subclasses come before their bases
STATUS_CODES: list[tuple[type[Exception], int]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AccountInactiveError, status.HTTP_403_FORBIDDEN),
    (UnauthorizedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DuplicateActiveInviteError, status.HTTP_409_CONFLICT),
    (EmailAlreadyRegisteredError, status.HTTP_409_CONFLICT),
    (InviteRejectedError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ProfileProvisioningFailedError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (RemoteTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (RemoteUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ProviderError, status.HTTP_502_BAD_GATEWAY),
]


def to_http_error(error: DomainError | AdapterError) -> HTTPException:
    """Build the HTTPException for a domain or adapter error.

    Args:
        error: Error raised below the interface layer

    Returns:
        HTTPException carrying the error's user-facing message
    """
    for error_type, status_code in STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
