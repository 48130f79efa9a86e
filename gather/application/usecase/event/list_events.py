"""List events use case."""

from datetime import date

import logfire
from pydantic import BaseModel, Field

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.event import VisibleEvent
from gather.domain.model.user import UserContext
from gather.domain.service import EventListFilters, EventService
from gather.domain.value import EventScope, EventStatusFilter


class ListEventsRequest(BaseModel):
    """List events request."""

    viewer: UserContext
    q: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    scope: EventScope = EventScope.ALL
    status: EventStatusFilter | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=12, ge=1, le=50)


class ListEventsResponse(BaseModel):
    """List events response."""

    events: list[VisibleEvent]
    page: int
    limit: int
    total: int
    total_pages: int


class ListEventsUseCase(BaseUseCase[ListEventsRequest, ListEventsResponse]):
    """Use case for listing events the caller organizes or is invited to."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize list events use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: ListEventsRequest) -> ListEventsResponse:
        """Execute list events flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of visible events in start order
        """
        with logfire.span(
            "list_events.execute",
            viewer_id=request.viewer.uid,
            scope=request.scope.value,
            page=request.page,
        ):
            result = await self.event_service.search_visible_events(
                request.viewer,
                EventListFilters(
                    q=request.q,
                    location=request.location,
                    start_date=request.start_date,
                    end_date=request.end_date,
                    scope=request.scope,
                    status=request.status,
                    page=request.page,
                    limit=request.limit,
                ),
            )
            return ListEventsResponse(
                events=result.items,
                page=result.page,
                limit=result.limit,
                total=result.total,
                total_pages=result.total_pages,
            )
