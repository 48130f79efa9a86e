"""Event routes."""

from datetime import date
from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import AwareDatetime, BaseModel, Field, model_validator

from gather.application.usecase.auth import GetCurrentUserUseCase
from gather.application.usecase.event import (
    CreateEventRequest,
    CreateEventResponse,
    CreateEventUseCase,
    DeleteEventRequest,
    DeleteEventResponse,
    DeleteEventUseCase,
    GetEventRequest,
    GetEventResponse,
    GetEventUseCase,
    ListEventsRequest,
    ListEventsResponse,
    ListEventsUseCase,
    UpdateEventRequest,
    UpdateEventResponse,
    UpdateEventUseCase,
)
from gather.application.usecase.invitation import (
    CreateInvitationsRequest,
    CreateInvitationsResponse,
    CreateInvitationsUseCase,
)
from gather.domain.model.event import EventDetails
from gather.domain.value import EmailAddress, EventScope, EventStatusFilter
from gather.interface.api.auth import require_viewer

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)

AgendaItem = Annotated[str, Field(min_length=1, max_length=140)]


class EventAPIRequest(BaseModel):
    """API request for creating or replacing an event."""

    title: str = Field(min_length=3, max_length=120)
    description: str = Field(min_length=10, max_length=2000)
    location: str = Field(min_length=2, max_length=160)
    starts_at: AwareDatetime
    ends_at: AwareDatetime
    timezone: str = Field(min_length=2, max_length=80)
    ai_summary: str | None = Field(default=None, max_length=400)
    ai_agenda_bullets: list[AgendaItem] | None = Field(default=None, max_length=6)

    @model_validator(mode="after")
    def check_time_range(self) -> "EventAPIRequest":
        if self.ends_at <= self.starts_at:
            raise ValueError("Event end time must be after the start time")
        return self

    def to_details(self) -> EventDetails:
        return EventDetails(
            title=self.title.strip(),
            description=self.description.strip(),
            location=self.location.strip(),
            starts_at=self.starts_at,
            ends_at=self.ends_at,
            timezone=self.timezone.strip(),
            ai_summary=self.ai_summary,
            ai_agenda_bullets=self.ai_agenda_bullets,
        )


class CreateInvitationsAPIRequest(BaseModel):
    """API request for inviting email addresses."""

    emails: list[EmailAddress] = Field(min_length=1, max_length=30)


@router.get("", response_model=ListEventsResponse)
async def list_events(
    request: Request,
    list_events_use_case: FromDishka[ListEventsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    q: str | None = Query(default=None, max_length=200),
    location: str | None = Query(default=None, max_length=160),
    start_date: date | None = None,
    end_date: date | None = None,
    scope: EventScope = EventScope.ALL,
    status_filter: EventStatusFilter | None = Query(default=None, alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1, le=50),
) -> ListEventsResponse:
    """List events the caller organizes or is invited to.

    Args:
        request: Incoming request carrying the identity token
        list_events_use_case: List events use case from DI
        get_current_user_use_case: Get current user use case from DI
        q: Free-text search over title, description, location and timezone
        location: Case-insensitive location substring
        start_date: Earliest start day (UTC), inclusive
        end_date: Latest start day (UTC), inclusive
        scope: owned, invited or all
        status_filter: upcoming, attending, maybe or declined
        page: 1-based page number
        limit: Page size, at most 50

    Returns:
        One page of events in start order
    """
    viewer = await require_viewer(request, get_current_user_use_case)
    return await list_events_use_case.execute(
        ListEventsRequest(
            viewer=viewer,
            q=q,
            location=location,
            start_date=start_date,
            end_date=end_date,
            scope=scope,
            status=status_filter,
            page=page,
            limit=limit,
        )
    )


@router.post(
    "", response_model=CreateEventResponse, status_code=status.HTTP_201_CREATED
)
async def create_event(
    body: EventAPIRequest,
    request: Request,
    create_event_use_case: FromDishka[CreateEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> CreateEventResponse:
    """Create an event organized by the caller.

    Raises:
        HTTPException: 401 if not authenticated; 400 if the times are invalid
    """
    viewer = await require_viewer(request, get_current_user_use_case)
    return await create_event_use_case.execute(
        CreateEventRequest(viewer=viewer, details=body.to_details())
    )


@router.get("/{event_id}", response_model=GetEventResponse)
async def get_event(
    event_id: str,
    request: Request,
    get_event_use_case: FromDishka[GetEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetEventResponse:
    """Event detail for its organizer or an invitee."""
    viewer = await require_viewer(request, get_current_user_use_case)
    return await get_event_use_case.execute(
        GetEventRequest(viewer=viewer, event_id=event_id)
    )


@router.put("/{event_id}", response_model=UpdateEventResponse)
async def update_event(
    event_id: str,
    body: EventAPIRequest,
    request: Request,
    update_event_use_case: FromDishka[UpdateEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UpdateEventResponse:
    """Replace an event's fields. Organizer only."""
    viewer = await require_viewer(request, get_current_user_use_case)
    return await update_event_use_case.execute(
        UpdateEventRequest(viewer=viewer, event_id=event_id, details=body.to_details())
    )


@router.delete("/{event_id}", response_model=DeleteEventResponse)
async def delete_event(
    event_id: str,
    request: Request,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> DeleteEventResponse:
    """Delete an event and its invitations. Organizer only."""
    viewer = await require_viewer(request, get_current_user_use_case)
    return await delete_event_use_case.execute(
        DeleteEventRequest(viewer=viewer, event_id=event_id)
    )


@router.post(
    "/{event_id}/invitations",
    response_model=CreateInvitationsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invitations(
    event_id: str,
    body: CreateInvitationsAPIRequest,
    request: Request,
    create_invitations_use_case: FromDishka[CreateInvitationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> CreateInvitationsResponse:
    """Invite up to 30 email addresses. Organizer only.

    Already-invited addresses are skipped.
    """
    viewer = await require_viewer(request, get_current_user_use_case)
    return await create_invitations_use_case.execute(
        CreateInvitationsRequest(
            viewer=viewer,
            event_id=event_id,
            emails=[email.root for email in body.emails],
        )
    )
