"""Tests for send invite email use case."""

import pytest

from portal.adapter.email.mock import MockEmailClient
from portal.application.usecase.notification import (
    SendInviteEmailRequest,
    SendInviteEmailUseCase,
)
from portal.domain.value import Role
from tests.harness import create_env_fixture, create_operator

unit_env = create_env_fixture()

LINK = "http://localhost:5173/create-account?token=abc"


class TestSendInviteEmailUseCase:
    """Tests for SendInviteEmailUseCase."""

    @pytest.mark.asyncio
    async def test_success(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SendInviteEmailUseCase)
        outbox = await unit_env.get(MockEmailClient)
        operator = await create_operator(unit_env)

        # Act
        response = await use_case.execute(
            SendInviteEmailRequest(
                access_token=operator.access_token,
                email="a@x.com",
                role="client",
                invite_link=LINK,
            )
        )

        # Assert
        assert response.success is True
        assert response.message == "Email sent successfully"
        assert response.email_id == outbox.sent[0].id
        assert response.model_dump(by_alias=True, exclude_none=True) == {
            "success": True,
            "message": "Email sent successfully",
            "emailId": outbox.sent[0].id,
        }

    @pytest.mark.asyncio
    async def test_unauthorized_caller(self, unit_env):
        """A non super admin gets a failure response and nothing is sent."""
        use_case = await unit_env.get(SendInviteEmailUseCase)
        outbox = await unit_env.get(MockEmailClient)
        operator = await create_operator(unit_env, role=Role.CLIENT)

        response = await use_case.execute(
            SendInviteEmailRequest(
                access_token=operator.access_token,
                email="a@x.com",
                role="client",
                invite_link=LINK,
            )
        )

        assert response.success is False
        assert response.error == "Unauthorized"
        assert outbox.sent == []

    @pytest.mark.asyncio
    async def test_missing_fields(self, unit_env):
        use_case = await unit_env.get(SendInviteEmailUseCase)
        operator = await create_operator(unit_env)

        response = await use_case.execute(
            SendInviteEmailRequest(access_token=operator.access_token, email="a@x.com")
        )

        assert response.success is False
        assert response.error == "Missing required fields"

    @pytest.mark.asyncio
    async def test_provider_failure(self, unit_env):
        use_case = await unit_env.get(SendInviteEmailUseCase)
        outbox = await unit_env.get(MockEmailClient)
        outbox.fail_with_status = 403
        operator = await create_operator(unit_env)

        response = await use_case.execute(
            SendInviteEmailRequest(
                access_token=operator.access_token,
                email="a@x.com",
                role="admin",
                invite_link=LINK,
            )
        )

        assert response.success is False
        assert response.error.startswith("Resend error (403)")
