"""Test configuration and shared builders."""

from datetime import datetime, timedelta, timezone

import logfire

from gather.domain.model.event import Event, VisibleEvent, build_search_blob
from gather.domain.model.user import UserContext
from gather.domain.value import (
    EventId,
    InvitationCounts,
    RsvpStatus,
    UserId,
    normalize_email,
)

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def make_viewer(
    uid: str = "user-1", email: str = "alice@example.com", name: str = "Alice"
) -> UserContext:
    """Build a caller context."""
    return UserContext(
        uid=UserId(uid),
        email=email,
        normalized_email=normalize_email(email),
        display_name=name,
    )


def make_event(
    event_id: str,
    starts_in_hours: float,
    duration_hours: float = 1,
    *,
    title: str | None = None,
    location: str = "Dublin",
    organizer_id: str = "organizer-1",
    organizer_name: str = "Olive",
    counts: InvitationCounts | None = None,
    now: datetime = NOW,
) -> Event:
    """Build an event starting ``starts_in_hours`` after ``now``."""
    starts_at = now + timedelta(hours=starts_in_hours)
    title = title or f"Event {event_id}"
    return Event(
        id=EventId(event_id),
        title=title,
        description=f"Description of {title}",
        location=location,
        starts_at=starts_at,
        ends_at=starts_at + timedelta(hours=duration_hours),
        timezone="Europe/Dublin",
        organizer_id=UserId(organizer_id),
        organizer_name=organizer_name,
        search_blob=build_search_blob(title, None, location, "Europe/Dublin"),
        invitation_counts=counts or InvitationCounts(),
        created_at=now - timedelta(days=1),
        updated_at=now - timedelta(days=1),
    )


def make_visible_event(
    event_id: str,
    starts_in_hours: float,
    duration_hours: float = 1,
    *,
    viewer_id: str = "user-1",
    rsvp: RsvpStatus | None = None,
    **kwargs,
) -> VisibleEvent:
    """Build an event as seen by ``viewer_id``."""
    event = make_event(event_id, starts_in_hours, duration_hours, **kwargs)
    return VisibleEvent.for_viewer(event, UserId(viewer_id), rsvp)
