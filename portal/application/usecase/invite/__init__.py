"""Invite use cases."""

from portal.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from portal.application.usecase.invite.list_invites import (
    InviteSummary,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from portal.application.usecase.invite.validate_invite import (
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)

__all__ = [
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "InviteSummary",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "ValidateInviteRequest",
    "ValidateInviteResponse",
    "ValidateInviteUseCase",
]
