"""Domain model entities for Gather."""

from gather.domain.model.activity import ActivityLogEntry
from gather.domain.model.analytics import (
    AnalyticsOverview,
    ConflictSummary,
    DensityBucket,
    ResponseBucket,
    RiskEntry,
)
from gather.domain.model.event import Event, EventDetails, VisibleEvent
from gather.domain.model.insight import (
    DashboardInsight,
    GeneratedDashboardInsight,
    GeneratedRecommendationInsight,
    GeneratedSchedulingInsight,
    GeneratedTimeWindow,
    RecommendationInsight,
    RiskyInvitee,
    SchedulingDraft,
    SchedulingInsight,
    SuggestedTimeWindow,
)
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext, UserProfile

__all__ = [
    "ActivityLogEntry",
    "AnalyticsOverview",
    "ConflictSummary",
    "DashboardInsight",
    "DensityBucket",
    "Event",
    "EventDetails",
    "GeneratedDashboardInsight",
    "GeneratedRecommendationInsight",
    "GeneratedSchedulingInsight",
    "GeneratedTimeWindow",
    "Invitation",
    "RecommendationInsight",
    "ResponseBucket",
    "RiskEntry",
    "RiskyInvitee",
    "SchedulingDraft",
    "SchedulingInsight",
    "SuggestedTimeWindow",
    "UserContext",
    "UserProfile",
    "VisibleEvent",
]
