"""Domain services."""

from .analytics_service import AnalyticsService
from .base import Service
from .conflict_service import ConflictService
from .event_service import EventDetail, EventListFilters, EventPage, EventService
from .insight_service import InsightService, TextGenerator
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .overlap import has_overlap, sort_by_start
from .recommendation_service import (
    NoRecommendation,
    Recommendation,
    RecommendationCandidate,
    RecommendationService,
    top_signals,
)
from .user_service import UserService

__all__ = [
    "AnalyticsService",
    "ConflictService",
    "EventDetail",
    "EventListFilters",
    "EventPage",
    "EventService",
    "InsightService",
    "InvitationService",
    "JWTService",
    "NoRecommendation",
    "Recommendation",
    "RecommendationCandidate",
    "RecommendationService",
    "Service",
    "TextGenerator",
    "UserService",
    "has_overlap",
    "sort_by_start",
    "top_signals",
]
