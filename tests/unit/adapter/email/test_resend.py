"""Tests for the Resend email client."""

import json

import httpx
import pytest

from portal.adapter.email.resend import ResendEmailClient
from portal.adapter.error import (
    DeliveryFailedError,
    ProviderError,
    RemoteTimeoutError,
    RemoteUnavailableError,
)
from tests.factories import patch_http

FROM = "Agency Portal <onboarding@resend.dev>"


@pytest.fixture
def client():
    return ResendEmailClient(api_key="re_test", from_address=FROM, timeout=1.0)


class TestResendEmailClient:
    @pytest.mark.asyncio
    async def test_send_posts_message(self, client):
        """The message is posted with the bearer key and the id comes back."""
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "email_123"})

        with patch_http(handler):
            email_id = await client.send("a@x.com", "Hello", "<p>Hi</p>")

        assert email_id == "email_123"
        request = captured[0]
        assert str(request.url) == "https://api.resend.com/emails"
        assert request.headers["Authorization"] == "Bearer re_test"
        assert json.loads(request.content) == {
            "from": FROM,
            "to": ["a@x.com"],
            "subject": "Hello",
            "html": "<p>Hi</p>",
        }

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        client = ResendEmailClient(api_key=None, from_address=FROM)

        with patch_http(lambda request: pytest.fail("no request expected")):
            with pytest.raises(ProviderError, match="missing RESEND_API_KEY"):
                await client.send("a@x.com", "Hello", "<p>Hi</p>")

    @pytest.mark.asyncio
    async def test_rejection_carries_status(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"message": "Invalid `to` field"})

        with patch_http(handler):
            with pytest.raises(DeliveryFailedError) as exc_info:
                await client.send("bad", "Hello", "<p>Hi</p>")

        assert exc_info.value.status_code == 422
        assert str(exc_info.value) == "Resend error (422): Invalid `to` field"

    @pytest.mark.asyncio
    async def test_success_without_message_id(self, client):
        with patch_http(lambda request: httpx.Response(200, json={})):
            with pytest.raises(DeliveryFailedError) as exc_info:
                await client.send("a@x.com", "Hello", "<p>Hi</p>")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_timeout(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with patch_http(handler):
            with pytest.raises(RemoteTimeoutError):
                await client.send("a@x.com", "Hello", "<p>Hi</p>")

    @pytest.mark.asyncio
    async def test_connection_failure(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with patch_http(handler):
            with pytest.raises(RemoteUnavailableError):
                await client.send("a@x.com", "Hello", "<p>Hi</p>")
