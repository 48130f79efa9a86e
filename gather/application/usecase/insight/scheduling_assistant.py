"""Scheduling assistant use case."""

import logfire
from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.config import AnalyticsSettings
from gather.domain.model.insight import SchedulingDraft, SchedulingInsight
from gather.domain.model.user import UserContext
from gather.domain.service import EventService, InsightService


class SchedulingAssistantRequest(BaseModel):
    """Draft event to get scheduling advice for."""

    viewer: UserContext
    draft: SchedulingDraft


class SchedulingAssistantResponse(BaseModel):
    """Scheduling advice, generated or fallback."""

    insight: SchedulingInsight


class SchedulingAssistantUseCase(
    BaseUseCase[SchedulingAssistantRequest, SchedulingAssistantResponse]
):
    """Use case for checking a draft event against the caller's schedule."""

    def __init__(
        self,
        event_service: EventService,
        insight_service: InsightService,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize scheduling assistant use case.

        Args:
            event_service: Loads the caller's visible events
            insight_service: Insight orchestration
            analytics_settings: Visible event window
        """
        self.event_service = event_service
        self.insight_service = insight_service
        self.settings = analytics_settings

    async def execute(
        self, request: SchedulingAssistantRequest
    ) -> SchedulingAssistantResponse:
        """Execute scheduling assistant flow.

        Args:
            request: Caller and draft event

        Returns:
            Scheduling insight; never fails because of the generator
        """
        with logfire.span("scheduling_assistant.execute", viewer_id=request.viewer.uid):
            visible_events = await self.event_service.list_visible_events(
                request.viewer, limit=self.settings.visible_event_limit
            )
            insight = await self.insight_service.generate_scheduling_insight(
                request.draft, visible_events
            )
            return SchedulingAssistantResponse(insight=insight)
