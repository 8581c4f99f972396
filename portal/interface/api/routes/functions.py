"""Function endpoints called directly by the frontend."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from portal.application.usecase.notification import (
    SendInviteEmailRequest,
    SendInviteEmailUseCase,
)
from portal.interface.api.bearer import bearer_token

router = APIRouter(prefix="/functions", tags=["functions"], route_class=DishkaRoute)


class SendInviteEmailAPIRequest(BaseModel):
    """Body of the invitation email function.

    Every field is optional here; missing fields are reported in the
    response body rather than as a request validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    role: str | None = None
    invite_link: str | None = Field(default=None, alias="inviteLink")
    invited_by_name: str | None = Field(default=None, alias="invitedByName")


@router.post("/send-invite-email")
async def send_invite_email(
    request: SendInviteEmailAPIRequest,
    send_invite_email_use_case: FromDishka[SendInviteEmailUseCase],
    access_token: str | None = Depends(bearer_token),
) -> JSONResponse:
    """Send an invitation email on behalf of a super admin.

    Answers 200 with ``{"success": true, "emailId": ...}`` or 400 with
    ``{"success": false, "error": ...}``. Authorization failures are 400 too
    and never say which check failed.

    Example:
        POST /functions/send-invite-email
        Authorization: Bearer <token>
        {
            "email": "a@x.com",
            "role": "client",
            "inviteLink": "https://portal.example.com/create-account?token=...",
            "invitedByName": "Grace"
        }
    """
    response = await send_invite_email_use_case.execute(
        SendInviteEmailRequest(
            access_token=access_token,
            email=request.email,
            role=request.role,
            invite_link=request.invite_link,
            invited_by_name=request.invited_by_name,
        )
    )
    return JSONResponse(
        content=response.model_dump(by_alias=True, exclude_none=True),
        status_code=status.HTTP_200_OK
        if response.success
        else status.HTTP_400_BAD_REQUEST,
    )
