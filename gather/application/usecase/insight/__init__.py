"""Insight use cases."""

from .dashboard_insight import (
    DashboardInsightRequest,
    DashboardInsightResponse,
    DashboardInsightUseCase,
)
from .event_recommendation import (
    EventRecommendationRequest,
    EventRecommendationResponse,
    EventRecommendationUseCase,
)
from .scheduling_assistant import (
    SchedulingAssistantRequest,
    SchedulingAssistantResponse,
    SchedulingAssistantUseCase,
)

__all__ = [
    "DashboardInsightRequest",
    "DashboardInsightResponse",
    "DashboardInsightUseCase",
    "EventRecommendationRequest",
    "EventRecommendationResponse",
    "EventRecommendationUseCase",
    "SchedulingAssistantRequest",
    "SchedulingAssistantResponse",
    "SchedulingAssistantUseCase",
]
