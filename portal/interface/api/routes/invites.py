"""Invite routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from portal.adapter.error import AdapterError
from portal.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)
from portal.domain.error import DomainError
from portal.domain.value import Role
from portal.interface.api.bearer import bearer_token
from portal.interface.error import to_http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for issuing an invite."""

    email: str
    role: Role


@router.post(
    "", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    access_token: str | None = Depends(bearer_token),
) -> CreateInviteResponse:
    """Issue an invite and email the account creation link.

    Args:
        request: Email and role to invite
        create_invite_use_case: Create invite use case from DI
        access_token: Caller's bearer token

    Returns:
        Created invite, link and email delivery outcome

    Raises:
        HTTPException: 401 unauthenticated, 403 not a super admin, 409 active
            invite exists, 422 bad email, 503/504 backing service unavailable

    Example:
        POST /invites
        Authorization: Bearer <token>
        {"email": "a@x.com", "role": "client"}
    """
    try:
        return await create_invite_use_case.execute(
            CreateInviteRequest(
                access_token=access_token, email=request.email, role=request.role
            )
        )
    except (DomainError, AdapterError) as e:
        logger.info(f"Invite not created: {type(e).__name__}")
        raise to_http_error(e)


@router.get("", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    access_token: str | None = Depends(bearer_token),
    active_only: bool = Query(default=False),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListInvitesResponse:
    """List invites issued by the caller, newest first.

    Args:
        list_invites_use_case: List invites use case from DI
        access_token: Caller's bearer token
        active_only: Only include usable invites
        limit: Maximum number of results (1-100)
        offset: Number of results to skip

    Returns:
        Invites issued by the caller
    """
    try:
        return await list_invites_use_case.execute(
            ListInvitesRequest(
                access_token=access_token,
                active_only=active_only,
                limit=limit,
                offset=offset,
            )
        )
    except (DomainError, AdapterError) as e:
        raise to_http_error(e)


@router.get("/validate", response_model=ValidateInviteResponse)
async def validate_invite(
    validate_invite_use_case: FromDishka[ValidateInviteUseCase],
    token: str | None = Query(default=None),
) -> ValidateInviteResponse:
    """Check whether an invite token can still create an account.

    Public endpoint used by the account creation page. Rejections are
    reported in the body with ``valid=false`` and a reason code.

    Args:
        validate_invite_use_case: Validate invite use case from DI
        token: Invite token from the link

    Returns:
        Validation outcome, with email and role when valid
    """
    try:
        return await validate_invite_use_case.execute(
            ValidateInviteRequest(token=token)
        )
    except AdapterError as e:
        raise to_http_error(e)
