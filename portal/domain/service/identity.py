"""Auth platform client interface."""

from portal.domain.value import AuthIdentity, AuthSession


class IdentityClient:
    """Client for the hosted auth platform that owns login identities.

    Implementations raise ``EmailAlreadyRegisteredError`` and
    ``InvalidCredentialsError`` for the corresponding platform answers and
    ``RemoteTimeoutError``/``RemoteUnavailableError`` for transport failures.
    """

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> AuthIdentity:
        """Create a new identity.

        Args:
            email: Normalized email address
            password: Plain password, already checked against the policy
            full_name: Stored as identity metadata

        Returns:
            The created identity
        """
        raise NotImplementedError

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password.

        Args:
            email: Email address
            password: Password

        Returns:
            A fresh session for the identity
        """
        raise NotImplementedError

    async def get_user(self, access_token: str) -> AuthIdentity | None:
        """Resolve an access token into its identity.

        Args:
            access_token: Bearer token issued by the platform

        Returns:
            The identity, or None if the token is invalid or expired
        """
        raise NotImplementedError
