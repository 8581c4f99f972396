"""Create account use case."""

import logfire
from pydantic import BaseModel

from portal.domain.service import ProvisioningService
from portal.domain.service.access import dashboard_path
from portal.domain.value import Role

MIN_PASSWORD_LENGTH = 8


class CreateAccountRequest(BaseModel):
    """Create account request.

    The password policy has already been checked at the form boundary.
    """

    token: str | None
    full_name: str
    password: str


class CreateAccountResponse(BaseModel):
    """Create account response."""

    user_id: str
    email: str
    role: Role
    full_name: str | None
    access_token: str
    refresh_token: str | None
    expires_in: int | None
    redirect_to: str


class CreateAccountUseCase:
    """Use case for redeeming an invite into an account."""

    def __init__(self, provisioning_service: ProvisioningService) -> None:
        """Initialize create account use case.

        Args:
            provisioning_service: Provisioning domain service
        """
        self.provisioning_service = provisioning_service

    async def execute(self, request: CreateAccountRequest) -> CreateAccountResponse:
        """Create the account an invite promises and sign the user in.

        Args:
            request: Token, display name and password

        Returns:
            Session for the new account and the dashboard to open

        Raises:
            InviteRejectedError: If the token is missing, unknown, used or expired
            EmailAlreadyRegisteredError: If the email already has an identity
            ProfileProvisioningFailedError: If no matching profile appeared
        """
        with logfire.span("create_account.execute"):
            account = await self.provisioning_service.provision(
                token=request.token,
                full_name=request.full_name.strip(),
                password=request.password,
            )

            return CreateAccountResponse(
                user_id=str(account.profile.id),
                email=account.profile.email,
                role=account.profile.role,
                full_name=account.profile.full_name,
                access_token=account.session.access_token,
                refresh_token=account.session.refresh_token,
                expires_in=account.session.expires_in,
                redirect_to=dashboard_path(account.profile.role),
            )
