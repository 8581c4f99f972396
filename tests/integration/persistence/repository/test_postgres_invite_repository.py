"""Integration tests for PostgresInviteRepository.

These tests need PostgreSQL at DATABASE__URL with migrations applied. Emails
are randomized because rows outlive the test.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from portal.domain.error import DuplicateActiveInviteError
from portal.domain.model import Profile, utcnow
from portal.domain.repository import InviteRepository, ProfileRepository
from portal.domain.value import Email, ProfileId, Role
from tests.factories import expired_invite, make_invite
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_email() -> str:
    return f"invitee-{uuid4().hex[:12]}@x.com"


class TestInviteRepositoryIntegration:
    """Integration tests for PostgresInviteRepository."""

    @pytest.mark.asyncio
    async def test_insert_and_find_by_token(self, integration_env):
        """Value objects survive the round trip through the row mapper."""
        # Arrange
        invite_repo = await integration_env.get(InviteRepository)
        invite = make_invite(email=unique_email(), role=Role.ADMIN)

        # Act
        await invite_repo.insert(invite)
        found = await invite_repo.find_unused_by_token(invite.token)

        # Assert
        assert found is not None
        assert found.id == invite.id
        assert found.email == invite.email
        assert found.role == Role.ADMIN
        assert found.expires_at == invite.expires_at

    @pytest.mark.asyncio
    async def test_unique_index_rejects_second_live_invite(self, integration_env):
        """The partial unique index backs the duplicate check."""
        invite_repo = await integration_env.get(InviteRepository)
        email = unique_email()
        first = await invite_repo.insert(make_invite(email=email))

        with pytest.raises(DuplicateActiveInviteError):
            await invite_repo.insert(make_invite(email=email))

        # The savepoint keeps the outer transaction usable
        assert await invite_repo.find_by_id(first.id) is not None

    @pytest.mark.asyncio
    async def test_token_collision_is_not_a_duplicate_invite(self, integration_env):
        """Only the live-email index maps to a duplicate invite."""
        invite_repo = await integration_env.get(InviteRepository)
        first = await invite_repo.insert(make_invite(email=unique_email()))

        with pytest.raises(IntegrityError):
            await invite_repo.insert(
                make_invite(email=unique_email(), token=first.token.root)
            )

    @pytest.mark.asyncio
    async def test_supersede_then_reinvite(self, integration_env):
        invite_repo = await integration_env.get(InviteRepository)
        email = unique_email()
        old = await invite_repo.insert(expired_invite(email=email))

        superseded = await invite_repo.supersede_expired(Email(email), utcnow())
        new = await invite_repo.insert(make_invite(email=email))

        assert superseded == 1
        assert (await invite_repo.find_by_id(old.id)).superseded_at is not None
        assert (await invite_repo.find_unused_by_email(Email(email))).id == new.id

    @pytest.mark.asyncio
    async def test_mark_used_once(self, integration_env):
        invite_repo = await integration_env.get(InviteRepository)
        invite = await invite_repo.insert(make_invite(email=unique_email()))
        now = utcnow()

        first = await invite_repo.mark_used(invite.token, now)
        second = await invite_repo.mark_used(invite.token, now)

        assert first is not None and first.used is True
        assert second is None

    @pytest.mark.asyncio
    async def test_find_by_inviter_active_only(self, integration_env):
        invite_repo = await integration_env.get(InviteRepository)
        inviter = ProfileId(uuid4())
        live = await invite_repo.insert(
            make_invite(email=unique_email(), invited_by=inviter)
        )
        await invite_repo.insert(expired_invite(email=unique_email(), invited_by=inviter))

        invites = await invite_repo.find_by_inviter(
            inviter, active_only=True, now=utcnow()
        )

        assert [i.id for i in invites] == [live.id]


class TestProfileRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_save_is_an_upsert(self, integration_env):
        profile_repo = await integration_env.get(ProfileRepository)
        profile = Profile(id=ProfileId(uuid4()), email=unique_email(), role=Role.CLIENT)

        await profile_repo.save(profile)
        await profile_repo.save(profile.model_copy(update={"is_active": False}))

        found = await profile_repo.find_by_id(profile.id)
        assert found.is_active is False
        assert found.role == Role.CLIENT
