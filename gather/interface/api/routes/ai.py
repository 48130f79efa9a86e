"""AI insight routes.

Each route answers with a deterministic fallback when generation is
unavailable or its output fails validation; ``source`` tells which.
"""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import AwareDatetime, BaseModel, Field, model_validator

from gather.application.usecase.auth import GetCurrentUserUseCase
from gather.application.usecase.insight import (
    DashboardInsightRequest,
    DashboardInsightUseCase,
    EventRecommendationRequest,
    EventRecommendationUseCase,
    SchedulingAssistantRequest,
    SchedulingAssistantUseCase,
)
from gather.domain.model.insight import (
    DashboardInsight,
    RecommendationInsight,
    SchedulingDraft,
    SchedulingInsight,
)
from gather.domain.value import EmailAddress, EventId
from gather.interface.api.auth import require_viewer

router = APIRouter(prefix="/ai", tags=["ai"], route_class=DishkaRoute)


class SchedulingAssistantAPIRequest(BaseModel):
    """Draft event submitted to the scheduling assistant."""

    title: str = Field(min_length=3, max_length=120)
    description: str | None = Field(default=None, max_length=2000)
    location: str = Field(min_length=2, max_length=160)
    starts_at: AwareDatetime
    ends_at: AwareDatetime
    timezone: str = Field(min_length=2, max_length=80)
    invitee_emails: list[EmailAddress] = Field(default_factory=list, max_length=30)
    event_id: Annotated[str, Field(min_length=1)] | None = None

    @model_validator(mode="after")
    def check_time_range(self) -> "SchedulingAssistantAPIRequest":
        if self.ends_at <= self.starts_at:
            raise ValueError("Event end time must be after the start time")
        return self

    def to_draft(self) -> SchedulingDraft:
        return SchedulingDraft(
            title=self.title,
            description=self.description,
            location=self.location,
            starts_at=self.starts_at,
            ends_at=self.ends_at,
            timezone=self.timezone,
            invitee_emails=[email.root for email in self.invitee_emails],
            event_id=EventId(self.event_id) if self.event_id else None,
        )


@router.post("/scheduling-assistant", response_model=SchedulingInsight)
async def scheduling_assistant(
    body: SchedulingAssistantAPIRequest,
    request: Request,
    scheduling_assistant_use_case: FromDishka[SchedulingAssistantUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> SchedulingInsight:
    """Check a draft event against the caller's schedule.

    Raises:
        HTTPException: 401 if not authenticated; 400 if the draft ends
            before it starts
    """
    viewer = await require_viewer(request, get_current_user_use_case)
    response = await scheduling_assistant_use_case.execute(
        SchedulingAssistantRequest(viewer=viewer, draft=body.to_draft())
    )
    return response.insight


@router.get("/dashboard-insight", response_model=DashboardInsight)
async def dashboard_insight(
    request: Request,
    dashboard_insight_use_case: FromDishka[DashboardInsightUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> DashboardInsight:
    """Business health summary of the caller's event program."""
    viewer = await require_viewer(request, get_current_user_use_case)
    response = await dashboard_insight_use_case.execute(
        DashboardInsightRequest(viewer=viewer)
    )
    return response.insight


@router.get("/event-recommendation", response_model=RecommendationInsight)
async def event_recommendation(
    request: Request,
    event_recommendation_use_case: FromDishka[EventRecommendationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> RecommendationInsight:
    """The one upcoming event the caller should act on next."""
    viewer = await require_viewer(request, get_current_user_use_case)
    response = await event_recommendation_use_case.execute(
        EventRecommendationRequest(viewer=viewer)
    )
    return response.insight
