"""Mock email providers for testing."""

from dishka import Scope, provide

from portal.adapter.email.mock import MockEmailClient
from portal.domain.service import EmailClient
from portal.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording sent messages."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_email_client(self) -> MockEmailClient:
        """Provide the recording client, for assertions."""
        return MockEmailClient()

    @provide(scope=Scope.APP)
    def get_email_client(self, client: MockEmailClient) -> EmailClient:
        """Expose the recording client as the email client."""
        return client
