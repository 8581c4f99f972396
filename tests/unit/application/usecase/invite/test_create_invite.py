"""Tests for create invite use case."""

from urllib.parse import parse_qs, urlparse

import pytest

from portal.adapter.email.mock import MockEmailClient
from portal.application.usecase.invite import CreateInviteRequest, CreateInviteUseCase
from portal.domain.error import (
    DuplicateActiveInviteError,
    UnauthenticatedError,
    UnauthorizedError,
)
from portal.domain.repository import InviteRepository
from portal.domain.value import Email, Role
from tests.harness import create_env_fixture, create_operator

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateInviteUseCase:
    """Tests for CreateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_create_invite_sends_email(self, unit_env):
        """Issuing an invite returns the link and emails it to the invitee."""
        # Arrange
        use_case = await unit_env.get(CreateInviteUseCase)
        outbox = await unit_env.get(MockEmailClient)
        invite_repo = await unit_env.get(InviteRepository)
        operator = await create_operator(unit_env)

        # Act
        response = await use_case.execute(
            CreateInviteRequest(
                access_token=operator.access_token,
                email="A@x.com",
                role=Role.CLIENT,
            )
        )

        # Assert
        assert response.email == "a@x.com"
        assert response.role == Role.CLIENT
        assert response.email_sent is True
        assert response.email_error is None

        link = urlparse(response.invite_link)
        assert f"{link.scheme}://{link.netloc}" == "http://localhost:5173"
        assert link.path == "/create-account"
        token = parse_qs(link.query)["token"][0]

        invite = await invite_repo.find_unused_by_email(Email("a@x.com"))
        assert invite.token.root == token
        assert str(invite.id) == response.id

        assert len(outbox.sent) == 1
        assert outbox.sent[0].to == "a@x.com"
        assert response.invite_link.replace("&", "&amp;") in outbox.sent[0].html

    @pytest.mark.asyncio
    async def test_email_failure_keeps_invite(self, unit_env):
        """A provider rejection is reported but the invite stands."""
        # Arrange
        use_case = await unit_env.get(CreateInviteUseCase)
        outbox = await unit_env.get(MockEmailClient)
        outbox.fail_with_status = 500
        invite_repo = await unit_env.get(InviteRepository)
        operator = await create_operator(unit_env)

        # Act
        response = await use_case.execute(
            CreateInviteRequest(
                access_token=operator.access_token, email="b@x.com", role=Role.ADMIN
            )
        )

        # Assert
        assert response.email_sent is False
        assert "Resend error (500)" in response.email_error
        assert response.invite_link
        assert await invite_repo.find_unused_by_email(Email("b@x.com")) is not None

    @pytest.mark.asyncio
    async def test_duplicate_invite(self, unit_env):
        use_case = await unit_env.get(CreateInviteUseCase)
        operator = await create_operator(unit_env)
        request = CreateInviteRequest(
            access_token=operator.access_token, email="b@x.com", role=Role.ADMIN
        )
        await use_case.execute(request)

        with pytest.raises(DuplicateActiveInviteError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_without_token(self, unit_env):
        use_case = await unit_env.get(CreateInviteUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                CreateInviteRequest(access_token=None, email="a@x.com", role=Role.CLIENT)
            )

    @pytest.mark.asyncio
    async def test_admin_cannot_invite(self, unit_env):
        use_case = await unit_env.get(CreateInviteUseCase)
        outbox = await unit_env.get(MockEmailClient)
        operator = await create_operator(unit_env, role=Role.ADMIN)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                CreateInviteRequest(
                    access_token=operator.access_token,
                    email="a@x.com",
                    role=Role.CLIENT,
                )
            )

        assert outbox.sent == []
