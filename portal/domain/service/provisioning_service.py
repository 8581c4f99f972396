"""Account provisioning domain service."""

import asyncio
from dataclasses import dataclass

import logfire

from portal.config import ProvisioningSettings
from portal.domain.error import ProfileProvisioningFailedError
from portal.domain.model import Invite, Profile
from portal.domain.repository import ProfileRepository
from portal.domain.value import AuthSession, ProfileId

from .base import Service
from .identity import IdentityClient
from .invite_service import InviteService


@dataclass
class ProvisionedAccount:
    """Result of redeeming an invite."""

    profile: Profile
    session: AuthSession
    invite: Invite


class ProvisioningService(Service):
    """Redeems an invite into an identity, a session and a profile.

    Order: validate, sign up, sign in, confirm profile, consume invite. The
    profile confirmation and the consumption share the request transaction;
    a crash after sign-up but before commit leaves an identity whose invite
    still reads unused.
    """

    def __init__(
        self,
        invite_service: InviteService,
        identity_client: IdentityClient,
        profile_repository: ProfileRepository,
        settings: ProvisioningSettings,
    ) -> None:
        """Initialize provisioning service.

        Args:
            invite_service: Invite domain service
            identity_client: Auth platform client
            profile_repository: Profile repository
            settings: Profile polling settings
        """
        self.invite_service = invite_service
        self.identity_client = identity_client
        self.profile_repository = profile_repository
        self.settings = settings

    async def provision(
        self, token: str | None, full_name: str, password: str
    ) -> ProvisionedAccount:
        """Create the account an invite promises.

        The password policy is enforced by the caller before this runs.

        Args:
            token: Invite token
            full_name: Display name stored on the identity
            password: Account password

        Returns:
            Provisioned account with profile and session

        Raises:
            MissingTokenError, InvalidOrUsedTokenError, ExpiredTokenError:
                If the token is no longer usable
            EmailAlreadyRegisteredError: If the email already has an identity
            ProfileProvisioningFailedError: If no matching profile appears
        """
        invite = await self.invite_service.validate_token(token)

        with logfire.span(
            "provisioning_service.provision",
            invite_id=str(invite.id),
            role=invite.role.value,
        ):
            identity = await self.identity_client.sign_up(
                invite.email.root, password, full_name
            )
            logfire.info(
                "Identity created",
                identity_id=str(identity.id),
                invite_id=str(invite.id),
            )

            session = await self.identity_client.sign_in(invite.email.root, password)

            profile = await self._await_profile(identity.id)
            if profile is None:
                logfire.error(
                    "Profile missing after identity creation",
                    identity_id=str(identity.id),
                    attempts=self.settings.profile_poll_attempts,
                )
                raise ProfileProvisioningFailedError(str(identity.id))

            if profile.role != invite.role:
                logfire.error(
                    "Profile role does not match invite",
                    identity_id=str(identity.id),
                    profile_role=profile.role.value,
                    invite_role=invite.role.value,
                )
                raise ProfileProvisioningFailedError(str(identity.id))

            consumed = await self.invite_service.consume(invite.token)

            logfire.info(
                "Account provisioned",
                profile_id=str(profile.id),
                role=profile.role.value,
            )
            return ProvisionedAccount(profile=profile, session=session, invite=consumed)

    async def _await_profile(self, identity_id: ProfileId) -> Profile | None:
        """Poll for the platform-created profile with exponential backoff.

        Args:
            identity_id: Identity whose profile is expected

        Returns:
            The profile, or None once all attempts are spent
        """
        delay = self.settings.profile_poll_initial_delay
        for attempt in range(1, self.settings.profile_poll_attempts + 1):
            profile = await self.profile_repository.find_by_id(identity_id)
            if profile is not None:
                return profile
            if attempt == self.settings.profile_poll_attempts:
                break
            logfire.debug(
                "Profile not yet visible",
                identity_id=str(identity_id),
                attempt=attempt,
                delay=delay,
            )
            await asyncio.sleep(delay)
            delay *= self.settings.profile_poll_backoff
        return None
