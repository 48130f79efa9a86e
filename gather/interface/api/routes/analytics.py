"""Analytics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from gather.application.usecase.analytics import GetOverviewRequest, GetOverviewUseCase
from gather.application.usecase.auth import GetCurrentUserUseCase
from gather.domain.model.analytics import AnalyticsOverview
from gather.interface.api.auth import require_viewer

router = APIRouter(prefix="/analytics", tags=["analytics"], route_class=DishkaRoute)


@router.get("/overview", response_model=AnalyticsOverview)
async def get_overview(
    request: Request,
    get_overview_use_case: FromDishka[GetOverviewUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> AnalyticsOverview:
    """Dashboard analytics for the caller.

    Recomputed on every request from current event and invitation state.
    """
    viewer = await require_viewer(request, get_current_user_use_case)
    response = await get_overview_use_case.execute(GetOverviewRequest(viewer=viewer))
    return response.overview
