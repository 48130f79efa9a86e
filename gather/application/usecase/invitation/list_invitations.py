"""List invitations use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext
from gather.domain.service import InvitationService


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    viewer: UserContext


class ListInvitationsResponse(BaseModel):
    """Invitations received by the caller, ordered by event start."""

    invitations: list[Invitation]


class ListInvitationsUseCase(
    BaseUseCase[ListInvitationsRequest, ListInvitationsResponse]
):
    """Use case for listing invitations addressed to the caller."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        invitations = await self.invitation_service.list_for_invitee(request.viewer)
        return ListInvitationsResponse(invitations=invitations)
