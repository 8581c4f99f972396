"""Bearer token extraction."""

from fastapi import Header


def bearer_token(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> str | None:
    """Access token from ``Authorization: Bearer <token>``, None if absent or malformed."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
