"""Tests for list invites use case."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from portal.application.usecase.invite import ListInvitesRequest, ListInvitesUseCase
from portal.domain.error import UnauthenticatedError, UnauthorizedError
from portal.domain.repository import InviteRepository
from portal.domain.value import Role
from tests.factories import expired_invite, make_invite
from tests.harness import create_env_fixture, create_operator

unit_env = create_env_fixture()


class TestListInvitesUseCase:
    """Tests for ListInvitesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_with_status_flags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListInvitesUseCase)
        invite_repo = await unit_env.get(InviteRepository)
        operator = await create_operator(unit_env)
        await invite_repo.insert(
            make_invite(email="live@x.com", invited_by=operator.user_id)
        )
        await invite_repo.insert(
            expired_invite(email="late@x.com", invited_by=operator.user_id)
        )

        # Act
        response = await use_case.execute(
            ListInvitesRequest(access_token=operator.access_token)
        )

        # Assert
        assert response.total == 2
        by_email = {i.email: i for i in response.invites}
        assert by_email["live@x.com"].expired is False
        assert by_email["late@x.com"].expired is True
        assert by_email["late@x.com"].used is False

    @pytest.mark.asyncio
    async def test_active_only(self, unit_env):
        use_case = await unit_env.get(ListInvitesUseCase)
        invite_repo = await unit_env.get(InviteRepository)
        operator = await create_operator(unit_env)
        await invite_repo.insert(
            make_invite(email="live@x.com", invited_by=operator.user_id)
        )
        await invite_repo.insert(
            make_invite(email="used@x.com", invited_by=operator.user_id, used=True)
        )

        response = await use_case.execute(
            ListInvitesRequest(access_token=operator.access_token, active_only=True)
        )

        assert [i.email for i in response.invites] == ["live@x.com"]

    @pytest.mark.asyncio
    async def test_requires_session(self, unit_env):
        use_case = await unit_env.get(ListInvitesUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(ListInvitesRequest(access_token=None))

    @pytest.mark.asyncio
    async def test_client_cannot_list(self, unit_env):
        use_case = await unit_env.get(ListInvitesUseCase)
        operator = await create_operator(unit_env, role=Role.CLIENT)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(ListInvitesRequest(access_token=operator.access_token))

    def test_limit_bounds(self):
        with pytest.raises(PydanticValidationError):
            ListInvitesRequest(access_token="t", limit=0)
        with pytest.raises(PydanticValidationError):
            ListInvitesRequest(access_token="t", limit=101)
