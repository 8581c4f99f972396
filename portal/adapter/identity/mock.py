"""In-process auth platform for tests and local development."""

import secrets
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from uuid import uuid4

from portal.domain.error import EmailAlreadyRegisteredError, InvalidCredentialsError
from portal.domain.model import Profile
from portal.domain.repository import InviteRepository, ProfileRepository
from portal.domain.service.identity import IdentityClient
from portal.domain.value import AuthIdentity, AuthSession, Email, ProfileId

SignUpHook = Callable[[AuthIdentity], Awaitable[None]]


@dataclass
class MockUser:
    """Identity record held by the mock platform."""

    id: ProfileId
    email: str
    password: str
    user_metadata: dict = field(default_factory=dict)

    def to_identity(self) -> AuthIdentity:
        return AuthIdentity(
            id=self.id, email=self.email, user_metadata=self.user_metadata
        )


class MockAuthPlatform:
    """User and session store shared by every mock client in a container."""

    def __init__(self) -> None:
        self.users: dict[str, MockUser] = {}
        self.sessions: dict[str, ProfileId] = {}
        self.sign_up_calls: int = 0

    def find_by_id(self, user_id: ProfileId) -> MockUser | None:
        return next((u for u in self.users.values() if u.id == user_id), None)


class MockIdentityClient(IdentityClient):
    """Mock identity client backed by a ``MockAuthPlatform``.

    ``on_sign_up`` runs after every successful sign-up, standing in for the
    platform's profile trigger.
    """

    def __init__(
        self,
        platform: MockAuthPlatform | None = None,
        on_sign_up: SignUpHook | None = None,
    ) -> None:
        self.platform = platform or MockAuthPlatform()
        self.on_sign_up = on_sign_up

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> AuthIdentity:
        key = email.strip().lower()
        if key in self.platform.users:
            raise EmailAlreadyRegisteredError(key)

        user = MockUser(
            id=ProfileId(uuid4()),
            email=key,
            password=password,
            user_metadata={"full_name": full_name} if full_name else {},
        )
        self.platform.users[key] = user
        self.platform.sign_up_calls += 1

        identity = user.to_identity()
        if self.on_sign_up:
            await self.on_sign_up(identity)
        return identity

    async def sign_in(self, email: str, password: str) -> AuthSession:
        user = self.platform.users.get(email.strip().lower())
        if user is None or user.password != password:
            raise InvalidCredentialsError()

        access_token = secrets.token_urlsafe(24)
        self.platform.sessions[access_token] = user.id
        return AuthSession(
            access_token=access_token,
            refresh_token=secrets.token_urlsafe(24),
            expires_in=3600,
            user_id=user.id,
        )

    async def get_user(self, access_token: str) -> AuthIdentity | None:
        user_id = self.platform.sessions.get(access_token)
        if user_id is None:
            return None
        user = self.platform.find_by_id(user_id)
        return user.to_identity() if user else None


def profile_trigger(
    invite_repository: InviteRepository, profile_repository: ProfileRepository
) -> SignUpHook:
    """Build a sign-up hook that mirrors the ``handle_new_user`` trigger.

    Creates the profile with the role of the newest unused invite for the
    identity's email. Identities without an invite get no profile.
    """

    async def _create_profile(identity: AuthIdentity) -> None:
        invite = await invite_repository.find_unused_by_email(Email(identity.email))
        if invite is None:
            return
        await profile_repository.save(
            Profile(
                id=identity.id,
                email=identity.email,
                role=invite.role,
                full_name=identity.user_metadata.get("full_name"),
            )
        )

    return _create_profile
