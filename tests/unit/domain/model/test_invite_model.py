"""Tests for the invite entity and its value objects."""

from datetime import timedelta

import pytest
from pydantic import ValidationError as PydanticValidationError

from portal.domain.model import INVITE_TTL
from portal.domain.value import Email, InviteToken, Role
from tests.factories import make_invite


class TestInvite:
    def test_usable_until_expiry(self):
        invite = make_invite()

        assert invite.is_usable(invite.expires_at - timedelta(seconds=1))
        assert not invite.is_usable(invite.expires_at)
        assert invite.expires_at - invite.created_at == INVITE_TTL

    def test_used_invite_is_not_usable(self):
        invite = make_invite(used=True)

        assert not invite.is_usable(invite.created_at)

    def test_frozen(self):
        invite = make_invite()

        with pytest.raises(PydanticValidationError):
            invite.used = True


class TestEmail:
    def test_normalized(self):
        assert Email("  Alice@Example.COM ").root == "alice@example.com"

    @pytest.mark.parametrize("value", ["", "alice", "@example.com", "alice@"])
    def test_rejects_malformed(self, value):
        with pytest.raises(PydanticValidationError):
            Email(value)


class TestRoleAndToken:
    def test_display_name(self):
        assert Role.SUPER_ADMIN.display_name == "Super Admin"
        assert Role("client") is Role.CLIENT

    def test_masked_token(self):
        assert InviteToken(root="abcdefghijkl").masked() == "abcdefgh..."
