"""Create invitations use case."""

import logfire
from pydantic import BaseModel, Field

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext
from gather.domain.service import InvitationService
from gather.domain.value import EventId


class CreateInvitationsRequest(BaseModel):
    """Request to invite email addresses to an event."""

    viewer: UserContext
    event_id: str
    emails: list[str] = Field(min_length=1, max_length=30)


class CreateInvitationsResponse(BaseModel):
    """Invitations issued by the request.

    Addresses that were already invited are not repeated here.
    """

    invitations: list[Invitation]
    created_count: int


class CreateInvitationsUseCase(
    BaseUseCase[CreateInvitationsRequest, CreateInvitationsResponse]
):
    """Use case for issuing a batch of invitations."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(
        self, request: CreateInvitationsRequest
    ) -> CreateInvitationsResponse:
        """Execute create invitations use case.

        Args:
            request: Caller, event and invitee emails

        Returns:
            Newly created invitations

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If no usable email is given
        """
        with logfire.span(
            "create_invitations",
            event_id=request.event_id,
            email_count=len(request.emails),
        ):
            created = await self.invitation_service.create_invitations(
                request.viewer, EventId(request.event_id), request.emails
            )
            return CreateInvitationsResponse(
                invitations=created, created_count=len(created)
            )
