"""Event entity.

Events are owned by their organizer, who alone may change them. Invitees
can read an event and set their own RSVP.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from gather.domain.model.common import DomainModel
from gather.domain.value import EventId, InvitationCounts, RsvpStatus, UserId


def build_search_blob(
    title: str,
    description: str | None = None,
    location: str | None = None,
    timezone: str | None = None,
) -> str:
    """Lowercased text used for free-text event search."""
    parts = [title, description, location, timezone]
    return " ".join(
        part.strip().lower() for part in parts if part and part.strip()
    )


def build_invitation_slug(normalized_email: str) -> str:
    """Email reduced to ``[a-z0-9-]`` for use inside invitation ids."""
    return re.sub(r"[^a-z0-9]+", "-", normalized_email)


class Event(DomainModel):
    """Time-bounded event.

    Business rules:
    - ends_at must be strictly after starts_at
    - invitation_counts only change through InvitationCounts.apply_delta
    """

    id: EventId
    title: str
    description: str
    location: str
    starts_at: datetime
    ends_at: datetime
    timezone: str
    organizer_id: UserId
    organizer_name: str
    search_blob: str = ""
    ai_summary: Optional[str] = None
    ai_agenda_bullets: Optional[list[str]] = None
    invitation_counts: InvitationCounts = Field(default_factory=InvitationCounts)
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def check_time_range(self) -> "Event":
        if self.ends_at <= self.starts_at:
            raise ValueError("Event end time must be after the start time")
        return self

    def is_upcoming(self, now: datetime) -> bool:
        """Whether the event starts strictly after ``now``."""
        return self.starts_at > now


class VisibleEvent(Event):
    """Event as seen by one viewer (organizer or invitee)."""

    viewer_rsvp_status: Optional[RsvpStatus] = None
    is_organizer: bool = False

    @classmethod
    def for_viewer(
        cls,
        event: Event,
        viewer_id: UserId,
        viewer_rsvp_status: RsvpStatus | None,
    ) -> "VisibleEvent":
        """Attach the viewer's relationship to an event."""
        return cls(
            **event.model_dump(),
            viewer_rsvp_status=viewer_rsvp_status,
            is_organizer=event.organizer_id == viewer_id,
        )

    def to_event(self) -> Event:
        """Drop the viewer-specific fields."""
        return Event(
            **self.model_dump(exclude={"viewer_rsvp_status", "is_organizer"})
        )


class EventDetails(DomainModel):
    """Organizer-editable fields of an event."""

    title: str
    description: str
    location: str
    starts_at: datetime
    ends_at: datetime
    timezone: str
    ai_summary: Optional[str] = None
    ai_agenda_bullets: Optional[list[str]] = None
