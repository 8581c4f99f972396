"""Tests for the Supabase Auth client."""

import json
from uuid import uuid4

import httpx
import pytest

from portal.adapter.error import ProviderError, RemoteTimeoutError
from portal.adapter.identity.supabase import SupabaseIdentityClient
from portal.domain.error import EmailAlreadyRegisteredError, InvalidCredentialsError
from tests.factories import patch_http

USER_ID = str(uuid4())
USER = {"id": USER_ID, "email": "a@x.com", "user_metadata": {"full_name": "Ada"}}


@pytest.fixture
def client():
    return SupabaseIdentityClient(
        url="https://project.supabase.co/", anon_key="anon", timeout=1.0
    )


class TestSignUp:
    @pytest.mark.asyncio
    async def test_sign_up_sends_metadata(self, client):
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"access_token": "t", "user": USER})

        with patch_http(handler):
            identity = await client.sign_up("a@x.com", "correct-horse", "Ada")

        assert str(identity.id) == USER_ID
        assert identity.user_metadata == {"full_name": "Ada"}
        request = captured[0]
        assert str(request.url) == "https://project.supabase.co/auth/v1/signup"
        assert request.headers["apikey"] == "anon"
        assert json.loads(request.content) == {
            "email": "a@x.com",
            "password": "correct-horse",
            "data": {"full_name": "Ada"},
        }

    @pytest.mark.asyncio
    async def test_sign_up_bare_user_response(self, client):
        with patch_http(lambda request: httpx.Response(200, json=USER)):
            identity = await client.sign_up("a@x.com", "correct-horse")

        assert identity.email == "a@x.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["user_already_exists", "email_exists"])
    async def test_email_taken(self, client, code):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"error_code": code, "msg": "taken"})

        with patch_http(handler):
            with pytest.raises(EmailAlreadyRegisteredError):
                await client.sign_up("a@x.com", "correct-horse")

    @pytest.mark.asyncio
    async def test_other_rejection(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"error_code": "weak_password"})

        with patch_http(handler):
            with pytest.raises(ProviderError):
                await client.sign_up("a@x.com", "x")

    @pytest.mark.asyncio
    async def test_obfuscated_existing_user(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"id": str(uuid4()), "email": "a@x.com", "identities": []}
            )

        with patch_http(handler):
            with pytest.raises(EmailAlreadyRegisteredError):
                await client.sign_up("a@x.com", "correct-horse")

    @pytest.mark.asyncio
    async def test_new_user_with_identities(self, client):
        user = {**USER, "identities": [{"provider": "email"}]}

        with patch_http(lambda request: httpx.Response(200, json=user)):
            identity = await client.sign_up("a@x.com", "correct-horse")

        assert str(identity.id) == USER_ID


class TestSignIn:
    @pytest.mark.asyncio
    async def test_password_grant(self, client):
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200,
                json={
                    "access_token": "access",
                    "refresh_token": "refresh",
                    "expires_in": 3600,
                    "user": USER,
                },
            )

        with patch_http(handler):
            session = await client.sign_in("a@x.com", "correct-horse")

        assert session.access_token == "access"
        assert session.refresh_token == "refresh"
        assert str(session.user_id) == USER_ID
        assert captured[0].url.params["grant_type"] == "password"

    @pytest.mark.asyncio
    async def test_bad_credentials(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "invalid_grant"})

        with patch_http(handler):
            with pytest.raises(InvalidCredentialsError):
                await client.sign_in("a@x.com", "wrong")

    @pytest.mark.asyncio
    async def test_email_not_confirmed(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400, json={"error_code": "email_not_confirmed", "msg": "confirm"}
            )

        with patch_http(handler):
            with pytest.raises(ProviderError, match="not confirmed"):
                await client.sign_in("a@x.com", "correct-horse")


class TestGetUser:
    @pytest.mark.asyncio
    async def test_valid_token(self, client):
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=USER)

        with patch_http(handler):
            identity = await client.get_user("access")

        assert identity.email == "a@x.com"
        assert captured[0].headers["Authorization"] == "Bearer access"

    @pytest.mark.asyncio
    async def test_rejected_token(self, client):
        with patch_http(lambda request: httpx.Response(401, json={})):
            assert await client.get_user("expired") is None

    @pytest.mark.asyncio
    async def test_timeout(self, client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("slow", request=request)

        with patch_http(handler):
            with pytest.raises(RemoteTimeoutError):
                await client.get_user("access")
