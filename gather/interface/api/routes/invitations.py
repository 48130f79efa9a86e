"""Invitation routes."""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from gather.application.usecase.auth import GetCurrentUserUseCase
from gather.application.usecase.invitation import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    UpdateRsvpRequest,
    UpdateRsvpResponse,
    UpdateRsvpUseCase,
)
from gather.domain.value import RsvpStatus
from gather.interface.api.auth import require_viewer

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class UpdateRsvpAPIRequest(BaseModel):
    """API request for answering an invitation."""

    rsvp_status: Literal["attending", "maybe", "declined"]


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    request: Request,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> ListInvitationsResponse:
    """Invitations addressed to the caller, ordered by event start."""
    viewer = await require_viewer(request, get_current_user_use_case)
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(viewer=viewer)
    )


@router.post("/{invitation_id}/rsvp", response_model=UpdateRsvpResponse)
async def update_rsvp(
    invitation_id: str,
    body: UpdateRsvpAPIRequest,
    request: Request,
    update_rsvp_use_case: FromDishka[UpdateRsvpUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UpdateRsvpResponse:
    """Set the caller's response to an invitation.

    Args:
        invitation_id: Invitation being answered
        body: New RSVP status
        request: Incoming request carrying the identity token
        update_rsvp_use_case: Update RSVP use case from DI
        get_current_user_use_case: Get current user use case from DI

    Returns:
        Updated invitation

    Raises:
        HTTPException: 401 if not authenticated, 403 if the caller is not the
            invitee, 404 if the invitation does not exist
    """
    viewer = await require_viewer(request, get_current_user_use_case)
    return await update_rsvp_use_case.execute(
        UpdateRsvpRequest(
            viewer=viewer,
            invitation_id=invitation_id,
            rsvp_status=RsvpStatus(body.rsvp_status),
        )
    )
