"""Get event use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.activity import ActivityLogEntry
from gather.domain.model.event import Event
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext
from gather.domain.service import EventService
from gather.domain.value import EventId


class GetEventRequest(BaseModel):
    """Get event request."""

    viewer: UserContext
    event_id: str


class GetEventResponse(BaseModel):
    """Event detail response.

    ``invitations`` is empty unless the caller organizes the event.
    """

    event: Event
    is_organizer: bool
    viewer_invitation: Invitation | None
    invitations: list[Invitation]
    activity: list[ActivityLogEntry]


class GetEventUseCase(BaseUseCase[GetEventRequest, GetEventResponse]):
    """Use case for loading an event's detail page."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize get event use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: GetEventRequest) -> GetEventResponse:
        """Load the event for its organizer or an invitee.

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is neither organizer nor invitee
        """
        detail = await self.event_service.get_event_detail(
            request.viewer, EventId(request.event_id)
        )
        return GetEventResponse(
            event=detail.event,
            is_organizer=detail.is_organizer,
            viewer_invitation=detail.viewer_invitation,
            invitations=detail.invitations,
            activity=detail.activity,
        )
