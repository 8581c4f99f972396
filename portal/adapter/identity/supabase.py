"""Supabase Auth (GoTrue) client.

Talks to the hosted auth platform over its REST API. The platform owns
login identities; profiles are created from the identity by a database
trigger on the platform side.
"""

from typing import Any
from uuid import UUID

import httpx
import logfire

from portal.adapter.error import (
    ProviderError,
    RemoteTimeoutError,
    RemoteUnavailableError,
)
from portal.domain.error import EmailAlreadyRegisteredError, InvalidCredentialsError
from portal.domain.service.identity import IdentityClient
from portal.domain.value import AuthIdentity, AuthSession, ProfileId

# Error codes the platform uses when the email already has an identity
ALREADY_REGISTERED_CODES = frozenset({"user_already_exists", "email_exists"})
EMAIL_NOT_CONFIRMED = "email_not_confirmed"


class SupabaseIdentityClient(IdentityClient):
    """Identity client backed by the Supabase Auth REST API."""

    def __init__(self, url: str, anon_key: str, timeout: float = 15.0) -> None:
        """Initialize Supabase client.

        Args:
            url: Project URL
            anon_key: Public anon key
            timeout: Per-request bound in seconds
        """
        self.auth_url = f"{url.rstrip('/')}/auth/v1"
        self.anon_key = anon_key
        self.timeout = timeout

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        headers = {"apikey": self.anon_key, "Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        access_token: str | None = None,
    ) -> httpx.Response:
        """Send one request, mapping transport failures to remote errors."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.request(
                    method,
                    f"{self.auth_url}{path}",
                    json=json,
                    params=params,
                    headers=self._headers(access_token),
                )
        except httpx.TimeoutException as e:
            logfire.error("Auth platform request timed out", path=path, error=str(e))
            raise RemoteTimeoutError(f"Auth platform timed out: {path}")
        except httpx.HTTPError as e:
            logfire.error("Auth platform HTTP error", path=path, error=str(e))
            raise RemoteUnavailableError(f"Auth platform unavailable: {e}")

    @staticmethod
    def _error_code(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        return body.get("error_code") or body.get("error")

    @staticmethod
    def _to_identity(user: dict[str, Any]) -> AuthIdentity:
        return AuthIdentity(
            id=ProfileId(UUID(user["id"])),
            email=user.get("email") or "",
            user_metadata=user.get("user_metadata") or {},
        )

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> AuthIdentity:
        """Create a new identity.

        Raises:
            EmailAlreadyRegisteredError: If the platform reports the email as taken
            ProviderError: On any other rejection
        """
        payload: dict[str, Any] = {"email": email, "password": password}
        if full_name:
            payload["data"] = {"full_name": full_name}

        response = await self._request("POST", "/signup", json=payload)

        if response.status_code >= 400:
            code = self._error_code(response)
            if code in ALREADY_REGISTERED_CODES:
                logfire.warn("Sign-up rejected, email already registered")
                raise EmailAlreadyRegisteredError(email)
            logfire.error(
                "Sign-up failed",
                status_code=response.status_code,
                error_code=code,
            )
            raise ProviderError(f"Sign-up failed: {response.status_code}")

        body = response.json()
        # With auto-confirm the platform answers with a session wrapping the user
        user = body.get("user") or body
        if not user.get("id"):
            raise ProviderError("Sign-up response did not include a user")
        # With email confirmation on, a taken address comes back as an
        # obfuscated user with no identities instead of an error
        if user.get("identities") == []:
            logfire.warn("Sign-up returned an obfuscated existing user")
            raise EmailAlreadyRegisteredError(email)
        return self._to_identity(user)

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with the password grant.

        Raises:
            InvalidCredentialsError: If the platform rejects the credentials
            ProviderError: If the email is unconfirmed, or on any other rejection
        """
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )

        if response.status_code in (400, 401):
            code = self._error_code(response)
            if code == EMAIL_NOT_CONFIRMED:
                logfire.warn("Sign-in rejected, email not confirmed")
                raise ProviderError(
                    "Email address not confirmed; check your inbox for the "
                    "confirmation link"
                )
            logfire.warn(
                "Sign-in rejected",
                status_code=response.status_code,
                error_code=code,
            )
            raise InvalidCredentialsError()
        if response.status_code >= 400:
            logfire.error("Sign-in failed", status_code=response.status_code)
            raise ProviderError(f"Sign-in failed: {response.status_code}")

        body = response.json()
        return AuthSession(
            access_token=body["access_token"],
            refresh_token=body.get("refresh_token"),
            expires_in=body.get("expires_in"),
            user_id=ProfileId(UUID(body["user"]["id"])),
        )

    async def get_user(self, access_token: str) -> AuthIdentity | None:
        """Resolve a bearer token; None if the platform rejects it."""
        response = await self._request("GET", "/user", access_token=access_token)

        if response.status_code in (401, 403):
            return None
        if response.status_code >= 400:
            logfire.error("User lookup failed", status_code=response.status_code)
            raise ProviderError(f"User lookup failed: {response.status_code}")

        return self._to_identity(response.json())
