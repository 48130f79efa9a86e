"""Analytics use cases."""

from .get_overview import GetOverviewRequest, GetOverviewResponse, GetOverviewUseCase

__all__ = [
    "GetOverviewRequest",
    "GetOverviewResponse",
    "GetOverviewUseCase",
]
