"""Delete event use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.user import UserContext
from gather.domain.service import EventService
from gather.domain.value import EventId


class DeleteEventRequest(BaseModel):
    """Delete event request."""

    viewer: UserContext
    event_id: str


class DeleteEventResponse(BaseModel):
    """Delete event response."""

    event_id: str
    deleted: bool = True


class DeleteEventUseCase(BaseUseCase[DeleteEventRequest, DeleteEventResponse]):
    """Use case for deleting an event with its invitations."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize delete event use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: DeleteEventRequest) -> DeleteEventResponse:
        """Delete the event.

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the organizer
        """
        await self.event_service.delete_event(request.viewer, EventId(request.event_id))
        return DeleteEventResponse(event_id=request.event_id)
