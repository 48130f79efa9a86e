"""Domain value objects for Gather."""

from gather.domain.value.identifiers import (
    ActivityId,
    EventId,
    InvitationId,
    UserId,
)
from gather.domain.value.types import (
    ActivityAction,
    ConflictLevel,
    EmailAddress,
    EventScope,
    EventStatusFilter,
    InsightSource,
    InvitationCounts,
    ProgramHealth,
    RecommendedAction,
    RiskLabel,
    RsvpStatus,
    normalize_email,
)

__all__ = [
    # Identifiers
    "ActivityId",
    "EventId",
    "InvitationId",
    "UserId",
    # Types
    "ActivityAction",
    "ConflictLevel",
    "EmailAddress",
    "EventScope",
    "EventStatusFilter",
    "InsightSource",
    "InvitationCounts",
    "ProgramHealth",
    "RecommendedAction",
    "RiskLabel",
    "RsvpStatus",
    "normalize_email",
]
