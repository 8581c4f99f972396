"""Mock email client for testing."""

from dataclasses import dataclass
from uuid import uuid4

from portal.adapter.error import DeliveryFailedError
from portal.domain.service.notification_service import EmailClient


@dataclass
class SentEmail:
    """Message captured by the mock client."""

    id: str
    to: str
    subject: str
    html: str


class MockEmailClient(EmailClient):
    """Records messages instead of delivering them.

    Set ``fail_with_status`` to make every send fail like a provider rejection.
    """

    def __init__(self, fail_with_status: int | None = None) -> None:
        self.sent: list[SentEmail] = []
        self.fail_with_status = fail_with_status

    async def send(self, to: str, subject: str, html: str) -> str:
        if self.fail_with_status is not None:
            raise DeliveryFailedError(
                f"Resend error ({self.fail_with_status}): mock failure",
                status_code=self.fail_with_status,
            )
        message = SentEmail(id=str(uuid4()), to=to, subject=subject, html=html)
        self.sent.append(message)
        return message.id
