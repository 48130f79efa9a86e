"""Dashboard insight use case."""

import logfire
from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.insight import DashboardInsight
from gather.domain.model.user import UserContext
from gather.domain.service import AnalyticsService, InsightService


class DashboardInsightRequest(BaseModel):
    """Dashboard insight request."""

    viewer: UserContext


class DashboardInsightResponse(BaseModel):
    """Dashboard insight response."""

    insight: DashboardInsight


class DashboardInsightUseCase(
    BaseUseCase[DashboardInsightRequest, DashboardInsightResponse]
):
    """Use case for the business health summary on the dashboard."""

    def __init__(
        self, analytics_service: AnalyticsService, insight_service: InsightService
    ) -> None:
        """Initialize dashboard insight use case.

        Args:
            analytics_service: Builds the caller's analytics overview
            insight_service: Insight orchestration
        """
        self.analytics_service = analytics_service
        self.insight_service = insight_service

    async def execute(self, request: DashboardInsightRequest) -> DashboardInsightResponse:
        with logfire.span("dashboard_insight.execute", viewer_id=request.viewer.uid):
            overview = await self.analytics_service.get_overview(request.viewer)
            insight = await self.insight_service.generate_dashboard_insight(overview)
            return DashboardInsightResponse(insight=insight)
