"""Update RSVP use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext
from gather.domain.service import InvitationService
from gather.domain.value import InvitationId, RsvpStatus


class UpdateRsvpRequest(BaseModel):
    """Update RSVP request."""

    viewer: UserContext
    invitation_id: str
    rsvp_status: RsvpStatus


class UpdateRsvpResponse(BaseModel):
    """Update RSVP response."""

    invitation: Invitation


class UpdateRsvpUseCase(BaseUseCase[UpdateRsvpRequest, UpdateRsvpResponse]):
    """Use case for answering an invitation."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize update RSVP use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: UpdateRsvpRequest) -> UpdateRsvpResponse:
        """Record the caller's RSVP.

        Args:
            request: Caller, invitation ID and new status

        Returns:
            Updated invitation

        Raises:
            ValidationError: If the status is ``invited``
            NotFoundError: If the invitation does not exist
            ForbiddenError: If the caller is not the invitee
        """
        invitation = await self.invitation_service.update_rsvp(
            request.viewer, InvitationId(request.invitation_id), request.rsvp_status
        )
        return UpdateRsvpResponse(invitation=invitation)
