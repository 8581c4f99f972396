"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthenticatedError(DomainError):
    """No authenticated operator session."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Caller is authenticated but lacks the required role.

    The message never says which check failed.
    """

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AccountInactiveError(UnauthorizedError):
    """Profile exists but has been deactivated."""

    def __init__(self) -> None:
        super().__init__("Account is inactive")


class InvalidCredentialsError(DomainError):
    """Email/password pair rejected by the auth platform."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class DuplicateActiveInviteError(DomainError):
    """An unused, unexpired invite already exists for the email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("An active invite already exists for this email.")


class InviteRejectedError(DomainError):
    """Base for token validation outcomes that block account creation."""

    reason: str = "rejected"

    def __init__(self, message: str):
        super().__init__(message)


class MissingTokenError(InviteRejectedError):
    """No token supplied."""

    reason = "missing_token"

    def __init__(self) -> None:
        super().__init__("Invalid or missing invite link.")


class InvalidOrUsedTokenError(InviteRejectedError):
    """Token unknown or already consumed; the two cases are indistinguishable."""

    reason = "invalid_or_used_token"

    def __init__(self) -> None:
        super().__init__("This invite link is invalid or has already been used.")


class ExpiredTokenError(InviteRejectedError):
    """Token exists and is unused, but past its expiry."""

    reason = "expired_token"

    def __init__(self) -> None:
        super().__init__("This invite link has expired.")


class EmailAlreadyRegisteredError(DomainError):
    """The auth platform already has an identity for this email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("This email is already registered. Please use the login page.")


class ProfileProvisioningFailedError(DomainError):
    """Identity was created but no matching profile appeared. Not retryable."""

    def __init__(self, identity_id: str):
        self.identity_id = identity_id
        super().__init__("Profile creation failed. Please contact support.")
