"""Application layer DI providers."""

from dishka import Scope, provide

from portal.application.usecase.account import CreateAccountUseCase
from portal.application.usecase.auth import GetCurrentSessionUseCase, LoginUseCase
from portal.application.usecase.invite import (
    CreateInviteUseCase,
    ListInvitesUseCase,
    ValidateInviteUseCase,
)
from portal.application.usecase.notification import SendInviteEmailUseCase
from portal.config import Settings
from portal.domain.service import (
    InviteService,
    NotificationService,
    ProvisioningService,
    SessionService,
)
from portal.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self,
        session_service: SessionService,
        invite_service: InviteService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            session_service=session_service,
            invite_service=invite_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_validate_invite_use_case(
        self, invite_service: InviteService
    ) -> ValidateInviteUseCase:
        """Provide validate invite use case."""
        return ValidateInviteUseCase(invite_service=invite_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invites_use_case(
        self, session_service: SessionService, invite_service: InviteService
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(
            session_service=session_service, invite_service=invite_service
        )

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_create_account_use_case(
        self, provisioning_service: ProvisioningService
    ) -> CreateAccountUseCase:
        """Provide create account use case."""
        return CreateAccountUseCase(provisioning_service=provisioning_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, session_service: SessionService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(session_service=session_service)

    @provide(scope=Scope.REQUEST)
    def get_current_session_use_case(
        self, session_service: SessionService
    ) -> GetCurrentSessionUseCase:
        """Provide get current session use case."""
        return GetCurrentSessionUseCase(session_service=session_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_send_invite_email_use_case(
        self, notification_service: NotificationService
    ) -> SendInviteEmailUseCase:
        """Provide send invite email use case."""
        return SendInviteEmailUseCase(notification_service=notification_service)
