"""Resend transactional email client."""

import httpx
import logfire

from portal.adapter.error import (
    DeliveryFailedError,
    ProviderError,
    RemoteTimeoutError,
    RemoteUnavailableError,
)
from portal.domain.service.notification_service import EmailClient


class ResendEmailClient(EmailClient):
    """Sends email through the Resend REST API."""

    def __init__(
        self,
        api_key: str | None,
        from_address: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 15.0,
    ) -> None:
        """Initialize Resend client.

        Args:
            api_key: Resend API key; checked on every send
            from_address: Sender, e.g. ``Agency Portal <onboarding@resend.dev>``
            api_url: Send endpoint
            timeout: Per-request bound in seconds
        """
        self.api_key = api_key
        self.from_address = from_address
        self.api_url = api_url
        self.timeout = timeout

    async def send(self, to: str, subject: str, html: str) -> str:
        """Send one email and return Resend's message ID.

        Raises:
            ProviderError: If no API key is configured
            DeliveryFailedError: On a non-2xx answer
            RemoteTimeoutError: If Resend does not answer in time
            RemoteUnavailableError: On transport failure
        """
        if not self.api_key:
            logfire.error("Resend API key missing")
            raise ProviderError("Server misconfiguration: missing RESEND_API_KEY")

        payload = {
            "from": self.from_address,
            "to": [to],
            "subject": subject,
            "html": html,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": f"Bearer {self.api_key}",
                    },
                )
        except httpx.TimeoutException as e:
            logfire.error("Resend request timed out", error=str(e))
            raise RemoteTimeoutError("Email provider timed out")
        except httpx.HTTPError as e:
            logfire.error("Resend HTTP error", error=str(e))
            raise RemoteUnavailableError(f"Email provider unavailable: {e}")

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.is_success:
            detail = data.get("message") if isinstance(data, dict) else None
            logfire.error(
                "Resend API error",
                status_code=response.status_code,
                error=detail or response.text,
            )
            raise DeliveryFailedError(
                f"Resend error ({response.status_code}): {detail or response.text}",
                status_code=response.status_code,
            )

        message_id = data.get("id") if isinstance(data, dict) else None
        if not message_id:
            logfire.error("Resend response missing message id", body=response.text)
            raise DeliveryFailedError(
                "Resend accepted the request but returned no message id",
                status_code=response.status_code,
            )
        return message_id
