"""Update event use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.event import Event, EventDetails
from gather.domain.model.user import UserContext
from gather.domain.service import EventService
from gather.domain.value import EventId


class UpdateEventRequest(BaseModel):
    """Update event request."""

    viewer: UserContext
    event_id: str
    details: EventDetails


class UpdateEventResponse(BaseModel):
    """Update event response."""

    event: Event


class UpdateEventUseCase(BaseUseCase[UpdateEventRequest, UpdateEventResponse]):
    """Use case for editing an event."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize update event use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: UpdateEventRequest) -> UpdateEventResponse:
        """Replace the event's editable fields.

        Args:
            request: Caller, event ID and new field values

        Returns:
            Updated event

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the event ends before it starts
        """
        event = await self.event_service.update_event(
            request.viewer, EventId(request.event_id), request.details
        )
        return UpdateEventResponse(event=event)
