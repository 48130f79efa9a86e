"""Domain value objects for Gather.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from gather.domain.value.common import RootValueObject, ValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RsvpStatus(str, Enum):
    """Invitee response state."""

    INVITED = "invited"
    ATTENDING = "attending"
    MAYBE = "maybe"
    DECLINED = "declined"


class ActivityAction(str, Enum):
    """Kind of action recorded in the event activity log."""

    CREATED = "created"
    UPDATED = "updated"
    INVITED = "invited"
    RSVP_UPDATED = "rsvp_updated"
    DELETED = "deleted"


class EventScope(str, Enum):
    """Which side of the viewer's relationship to list events from."""

    OWNED = "owned"
    INVITED = "invited"
    ALL = "all"


class EventStatusFilter(str, Enum):
    """Status filter for event listings."""

    UPCOMING = "upcoming"
    ATTENDING = "attending"
    MAYBE = "maybe"
    DECLINED = "declined"


class RiskLabel(str, Enum):
    """Risk label for an upcoming event that overlaps others."""

    SINGLE_OVERLAP = "Single overlap"
    MULTI_OVERLAP = "Multi-overlap"


class RecommendedAction(str, Enum):
    """Next action suggested for a recommended event."""

    RESPOND = "respond"
    ATTEND = "attend"
    PREPARE = "prepare"
    HOST = "host"
    REVIEW = "review"


class InsightSource(str, Enum):
    """Where an insight came from."""

    GEMINI = "gemini"
    FALLBACK = "fallback"


class ProgramHealth(str, Enum):
    """Overall health of the viewer's event program."""

    STRONG = "strong"
    STEADY = "steady"
    WATCH = "watch"


class ConflictLevel(str, Enum):
    """Severity of overlap for a draft event."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def normalize_email(email: str) -> str:
    """Trim and lowercase an email address for matching."""
    return email.strip().lower()


class EmailAddress(RootValueObject[str]):
    """Email address as entered, trimmed."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the address has a plausible shape."""
        v = v.strip()
        if not _EMAIL_PATTERN.match(v) or len(v) > 320:
            raise ValueError(f"Invalid email address: {v!r}")
        return v

    @property
    def normalized(self) -> str:
        """Lowercased form used for matching invitations to accounts."""
        return normalize_email(self.root)


class InvitationCounts(ValueObject):
    """Per-event invitation counts by RSVP status.

    The sum equals the number of invitations issued for the event. Counts are
    only changed through ``apply_delta``.
    """

    invited: int = Field(default=0, ge=0)
    attending: int = Field(default=0, ge=0)
    maybe: int = Field(default=0, ge=0)
    declined: int = Field(default=0, ge=0)

    def apply_delta(
        self, from_status: RsvpStatus | None, to_status: RsvpStatus
    ) -> "InvitationCounts":
        """Move one invitation from ``from_status`` to ``to_status``.

        ``from_status=None`` means a newly issued invitation. The decremented
        bucket is floored at zero so replayed or out-of-order transitions
        never produce negative counts.

        Args:
            from_status: Previous status, or None for a new invitation
            to_status: New status

        Returns:
            Updated counts
        """
        values = self.model_dump()

        if from_status is not None:
            values[from_status.value] = max(0, values[from_status.value] - 1)

        values[to_status.value] += 1
        return InvitationCounts(**values)

    @property
    def total(self) -> int:
        """Total invitations issued."""
        return self.invited + self.attending + self.maybe + self.declined
