"""Email infrastructure providers."""

from dishka import Scope, provide

from portal.adapter.email.resend import ResendEmailClient
from portal.config import Settings
from portal.domain.service import EmailClient
from portal.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider backed by Resend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: Settings) -> EmailClient:
        """Provide Resend email client.

        A missing API key is reported per send, so the API still starts and
        invites can be shared by link.
        """
        return ResendEmailClient(
            api_key=settings.email.resend_api_key,
            from_address=settings.email.from_address,
            api_url=settings.email.api_url,
            timeout=settings.remote.timeout_seconds,
        )
