"""Validate invite use case."""

from typing import Literal

import logfire
from pydantic import BaseModel

from portal.domain.error import InviteRejectedError
from portal.domain.service import InviteService
from portal.domain.value import Role

RejectReason = Literal["missing_token", "invalid_or_used_token", "expired_token"]


class ValidateInviteRequest(BaseModel):
    """Validate invite request."""

    token: str | None = None


class ValidateInviteResponse(BaseModel):
    """Validate invite response."""

    valid: bool
    email: str | None = None
    role: Role | None = None
    reason: RejectReason | None = None
    message: str | None = None


class ValidateInviteUseCase:
    """Use case for validating an invite token.

    Lets the account creation page decide whether to show the form. Never
    changes the invite.
    """

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize validate invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: ValidateInviteRequest) -> ValidateInviteResponse:
        """Validate an invite token.

        Args:
            request: Validation request with token

        Returns:
            Validation response with invite details or rejection reason
        """
        try:
            invite = await self.invite_service.validate_token(request.token)
        except InviteRejectedError as e:
            return ValidateInviteResponse(valid=False, reason=e.reason, message=str(e))

        logfire.info("Invite validated", invite_id=str(invite.id))
        return ValidateInviteResponse(
            valid=True,
            email=invite.email.root,
            role=invite.role,
            message="Valid invite",
        )
