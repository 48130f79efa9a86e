"""Event recommendation use case."""

import logfire
from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.config import AnalyticsSettings
from gather.domain.model.insight import RecommendationInsight
from gather.domain.model.user import UserContext
from gather.domain.service import EventService, InsightService


class EventRecommendationRequest(BaseModel):
    """Event recommendation request."""

    viewer: UserContext


class EventRecommendationResponse(BaseModel):
    """Event recommendation response."""

    insight: RecommendationInsight


class EventRecommendationUseCase(
    BaseUseCase[EventRecommendationRequest, EventRecommendationResponse]
):
    """Use case for recommending the caller's next event."""

    def __init__(
        self,
        event_service: EventService,
        insight_service: InsightService,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize event recommendation use case.

        Args:
            event_service: Loads the caller's visible events
            insight_service: Insight orchestration
            analytics_settings: Visible event window
        """
        self.event_service = event_service
        self.insight_service = insight_service
        self.settings = analytics_settings

    async def execute(
        self, request: EventRecommendationRequest
    ) -> EventRecommendationResponse:
        """Execute event recommendation flow.

        Args:
            request: Caller

        Returns:
            Recommendation insight; a ``review`` insight without an event when
            nothing qualifies
        """
        with logfire.span("event_recommendation.execute", viewer_id=request.viewer.uid):
            visible_events = await self.event_service.list_visible_events(
                request.viewer, limit=self.settings.visible_event_limit
            )
            insight = await self.insight_service.generate_recommendation_insight(
                request.viewer, visible_events
            )
            return EventRecommendationResponse(insight=insight)
