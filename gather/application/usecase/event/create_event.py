"""Create event use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.event import Event, EventDetails
from gather.domain.model.user import UserContext
from gather.domain.service import EventService


class CreateEventRequest(BaseModel):
    """Create event request."""

    viewer: UserContext
    details: EventDetails


class CreateEventResponse(BaseModel):
    """Create event response."""

    event: Event


class CreateEventUseCase(BaseUseCase[CreateEventRequest, CreateEventResponse]):
    """Use case for creating an event owned by the caller."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize create event use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: CreateEventRequest) -> CreateEventResponse:
        """Create the event and record a ``created`` activity entry.

        Raises:
            ValidationError: If the event ends before it starts
        """
        event = await self.event_service.create_event(request.viewer, request.details)
        return CreateEventResponse(event=event)
