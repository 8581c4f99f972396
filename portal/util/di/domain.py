"""Domain layer DI providers."""

from dishka import Scope, provide

from portal.adapter.email.templates import InviteEmailRenderer
from portal.config import ProvisioningSettings, Settings
from portal.domain.model import INVITE_TTL
from portal.domain.repository import InviteRepository, ProfileRepository
from portal.domain.service import (
    EmailClient,
    IdentityClient,
    InviteService,
    NotificationService,
    ProvisioningService,
    SessionService,
)
from portal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_invite_email_renderer(self, settings: Settings) -> InviteEmailRenderer:
        """Provide invitation email renderer."""
        return InviteEmailRenderer(
            product_name=settings.email.product_name,
            logo_url=settings.email.logo_url,
            expiry_days=INVITE_TTL.days,
        )

    @provide
    def get_invite_service(self, invite_repository: InviteRepository) -> InviteService:
        """Provide invite domain service."""
        return InviteService(invite_repository=invite_repository)

    @provide
    def get_session_service(
        self, identity_client: IdentityClient, profile_repository: ProfileRepository
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            identity_client=identity_client, profile_repository=profile_repository
        )

    @provide
    def get_provisioning_service(
        self,
        invite_service: InviteService,
        identity_client: IdentityClient,
        profile_repository: ProfileRepository,
        settings: ProvisioningSettings,
    ) -> ProvisioningService:
        """Provide account provisioning domain service."""
        return ProvisioningService(
            invite_service=invite_service,
            identity_client=identity_client,
            profile_repository=profile_repository,
            settings=settings,
        )

    @provide
    def get_notification_service(
        self,
        session_service: SessionService,
        email_client: EmailClient,
        renderer: InviteEmailRenderer,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            session_service=session_service,
            email_client=email_client,
            renderer=renderer,
        )
