"""Analytics overview use case."""

from pydantic import BaseModel

from gather.application.usecase.base import BaseUseCase
from gather.domain.model.analytics import AnalyticsOverview
from gather.domain.model.user import UserContext
from gather.domain.service import AnalyticsService


class GetOverviewRequest(BaseModel):
    """Analytics overview request."""

    viewer: UserContext


class GetOverviewResponse(BaseModel):
    """Analytics overview response."""

    overview: AnalyticsOverview


class GetOverviewUseCase(BaseUseCase[GetOverviewRequest, GetOverviewResponse]):
    """Use case for the caller's dashboard analytics."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        """Initialize get overview use case.

        Args:
            analytics_service: Analytics domain service
        """
        self.analytics_service = analytics_service

    async def execute(self, request: GetOverviewRequest) -> GetOverviewResponse:
        overview = await self.analytics_service.get_overview(request.viewer)
        return GetOverviewResponse(overview=overview)
