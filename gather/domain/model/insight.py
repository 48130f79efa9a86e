"""Insight models.

Each insight has a response model (tagged with its source) and a
``Generated*`` schema that untrusted model output must satisfy before it is
used. Generated schemas are validated strictly: wrong types are rejected,
not coerced.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AwareDatetime, Field, model_validator

from gather.domain.model.common import DomainModel
from gather.domain.value import (
    ConflictLevel,
    EventId,
    InsightSource,
    ProgramHealth,
    RecommendedAction,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

AgendaBullet = Annotated[str, Field(min_length=3, max_length=140)]
InsightBullet = Annotated[str, Field(min_length=1, max_length=400)]


class SchedulingDraft(DomainModel):
    """Draft event submitted to the scheduling assistant."""

    title: str
    description: Optional[str] = None
    location: str
    starts_at: datetime
    ends_at: datetime
    timezone: str
    invitee_emails: list[Annotated[str, Field(pattern=EMAIL_PATTERN)]] = []
    event_id: Optional[EventId] = None

    @model_validator(mode="after")
    def check_time_range(self) -> "SchedulingDraft":
        if self.ends_at <= self.starts_at:
            raise ValueError("Event end time must be after the start time")
        return self


class RiskyInvitee(DomainModel):
    """Invitee whose attendance is at risk."""

    email: str = Field(pattern=EMAIL_PATTERN)
    reason: str = Field(min_length=3, max_length=220)


class SuggestedTimeWindow(DomainModel):
    """Alternative slot for a draft event."""

    starts_at: datetime
    ends_at: datetime
    reason: str = Field(min_length=3, max_length=220)


class GeneratedTimeWindow(DomainModel):
    """Generated slot; timestamps must carry an offset and run forwards."""

    starts_at: AwareDatetime
    ends_at: AwareDatetime
    reason: str = Field(min_length=3, max_length=220)

    @model_validator(mode="after")
    def check_time_range(self) -> "GeneratedTimeWindow":
        if self.ends_at <= self.starts_at:
            raise ValueError("Suggested window must end after it starts")
        return self


class SchedulingInsight(DomainModel):
    """Scheduling assistant result for a draft event."""

    summary: str
    conflict_level: ConflictLevel
    conflict_count: int
    risky_invitees: list[RiskyInvitee]
    suggested_time_windows: list[SuggestedTimeWindow]
    suggested_summary: Optional[str] = None
    agenda_bullets: Optional[list[str]] = None
    source: InsightSource = InsightSource.FALLBACK


class GeneratedSchedulingInsight(DomainModel):
    """Schema for generated scheduling insights."""

    summary: str = Field(min_length=10, max_length=900)
    conflict_level: ConflictLevel
    conflict_count: int = Field(ge=0)
    risky_invitees: list[RiskyInvitee]
    suggested_time_windows: list[GeneratedTimeWindow]
    suggested_summary: Optional[str] = Field(default=None, max_length=400)
    agenda_bullets: Optional[list[AgendaBullet]] = Field(default=None, max_length=6)


class DashboardInsight(DomainModel):
    """Business health summary of the viewer's event program."""

    headline: str
    summary: str
    health: ProgramHealth
    strengths: list[str]
    risks: list[str]
    recommendations: list[str]
    source: InsightSource = InsightSource.FALLBACK


class GeneratedDashboardInsight(DomainModel):
    """Schema for generated dashboard insights."""

    headline: str = Field(min_length=1, max_length=140)
    summary: str = Field(min_length=1, max_length=900)
    health: ProgramHealth
    strengths: list[InsightBullet] = Field(min_length=1, max_length=4)
    risks: list[InsightBullet] = Field(min_length=1, max_length=4)
    recommendations: list[InsightBullet] = Field(min_length=2, max_length=4)


class RecommendationInsight(DomainModel):
    """What the viewer should do next."""

    headline: str
    reason: str
    why_now: str
    recommended_action: RecommendedAction
    event_id: Optional[EventId] = None
    event_title: Optional[str] = None
    starts_at: Optional[datetime] = None
    location: Optional[str] = None
    source: InsightSource = InsightSource.FALLBACK


class GeneratedRecommendationInsight(DomainModel):
    """Schema for generated recommendations.

    ``event_id`` must also be one of the offered candidates; that check needs
    the candidate list and is done by the insight service.
    """

    headline: str = Field(min_length=1, max_length=140)
    reason: str = Field(min_length=1, max_length=500)
    why_now: str = Field(min_length=1, max_length=320)
    recommended_action: RecommendedAction
    event_id: str = Field(min_length=1)
    event_title: Optional[str] = None
    starts_at: Optional[str] = None
    location: Optional[str] = None
