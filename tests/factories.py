"""Builders for seeding repositories and faking HTTP in tests."""

from collections.abc import Callable
from datetime import datetime, timedelta
from unittest.mock import patch
from uuid import uuid4

import httpx

from portal.domain.model import INVITE_TTL, Invite, utcnow
from portal.domain.value import Email, InviteId, InviteToken, ProfileId, Role


def make_invite(
    email: str = "a@x.com",
    role: Role = Role.CLIENT,
    token: str | None = None,
    invited_by: ProfileId | None = None,
    created_at: datetime | None = None,
    expires_at: datetime | None = None,
    used: bool = False,
) -> Invite:
    """Build an invite.

    Args:
        email: Invitee email
        role: Invited role
        token: Token value (random when omitted)
        invited_by: Issuing operator (random when omitted)
        created_at: Issuance time (now when omitted)
        expires_at: Expiry (seven days after issuance when omitted)
        used: Whether the invite is already consumed

    Returns:
        Invite domain model
    """
    created_at = created_at or utcnow()
    return Invite(
        id=InviteId(uuid4()),
        email=Email(email),
        role=role,
        token=InviteToken(root=token or uuid4().hex),
        invited_by=invited_by or ProfileId(uuid4()),
        expires_at=expires_at or created_at + INVITE_TTL,
        used=used,
        created_at=created_at,
    )


def expired_invite(email: str = "a@x.com", role: Role = Role.CLIENT, **kwargs) -> Invite:
    """Invite issued eight days ago, so expired one day ago."""
    return make_invite(
        email=email,
        role=role,
        created_at=utcnow() - INVITE_TTL - timedelta(days=1),
        **kwargs,
    )


_AsyncClient = httpx.AsyncClient


def patch_http(handler: Callable[[httpx.Request], httpx.Response]):
    """Route every ``httpx.AsyncClient`` created in the block through ``handler``.

    Usage:
        with patch_http(lambda request: httpx.Response(200, json={"id": "1"})):
            await client.send(...)
    """

    def _client(**kwargs) -> httpx.AsyncClient:
        return _AsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    return patch.object(httpx, "AsyncClient", side_effect=_client)
