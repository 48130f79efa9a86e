"""Analytics read models.

These are recomputed per request from event and invitation state and never
stored.
"""

from datetime import datetime
from typing import Literal

from gather.domain.model.activity import ActivityLogEntry
from gather.domain.model.common import DomainModel
from gather.domain.value import EventId, RiskLabel

ResponseBucketStatus = Literal["pending", "attending", "maybe", "declined"]


class ResponseBucket(DomainModel):
    """Invitation count for one RSVP state (``invited`` shown as ``pending``)."""

    status: ResponseBucketStatus
    count: int


class DensityBucket(DomainModel):
    """Number of upcoming events on one calendar day."""

    label: str
    count: int


class RiskEntry(DomainModel):
    """Upcoming event that overlaps at least one other upcoming event."""

    id: EventId
    title: str
    starts_at: datetime
    location: str
    risk_label: RiskLabel


class ConflictSummary(DomainModel):
    """Result of the pairwise overlap scan.

    ``conflict_count`` counts each overlapping pair twice, once from each
    side; the dashboard's overlap pressure divides by ``upcoming_count * 2``.
    """

    conflict_count: int = 0
    high_risk_events: list[RiskEntry] = []


class AnalyticsOverview(DomainModel):
    """Dashboard snapshot for one viewer."""

    upcoming_count: int
    owned_count: int
    invited_count: int
    conflict_count: int
    response_distribution: list[ResponseBucket]
    schedule_density: list[DensityBucket]
    high_risk_events: list[RiskEntry]
    recent_activity: list[ActivityLogEntry]

    def response_count(self, status: ResponseBucketStatus) -> int:
        """Count for one bucket of the response distribution."""
        for bucket in self.response_distribution:
            if bucket.status == status:
                return bucket.count
        return 0
