"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from gather.domain.model import ActivityLogEntry, Event, Invitation, UserProfile
from gather.domain.value import (
    ActivityAction,
    ActivityId,
    EventId,
    InvitationCounts,
    InvitationId,
    RsvpStatus,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model.

    Args:
        row: Database row as dict

    Returns:
        UserProfile domain model
    """
    return UserProfile(
        id=UserId(row["id"]),
        email=row["email"],
        normalized_email=row["normalized_email"],
        display_name=row["display_name"],
        photo_url=row.get("photo_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_login_at=row["last_login_at"],
    )


def user_to_dict(profile: UserProfile) -> Dict[str, Any]:
    """Convert UserProfile domain model to database dict."""
    return profile.model_dump()


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model.

    Args:
        row: Database row as dict

    Returns:
        Event domain model
    """
    return Event(
        id=EventId(row["id"]),
        title=row["title"],
        description=row["description"],
        location=row["location"],
        starts_at=row["starts_at"],
        ends_at=row["ends_at"],
        timezone=row["timezone"],
        organizer_id=UserId(row["organizer_id"]),
        organizer_name=row["organizer_name"],
        search_blob=row["search_blob"],
        ai_summary=row.get("ai_summary"),
        ai_agenda_bullets=row.get("ai_agenda_bullets"),
        invitation_counts=InvitationCounts(
            invited=row["invited_count"],
            attending=row["attending_count"],
            maybe=row["maybe_count"],
            declined=row["declined_count"],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict.

    Invitation counts are flattened into one column per status.
    """
    data = event.model_dump(exclude={"invitation_counts"})
    counts = event.invitation_counts
    data.update(
        invited_count=counts.invited,
        attending_count=counts.attending,
        maybe_count=counts.maybe,
        declined_count=counts.declined,
    )
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    return Invitation(
        id=InvitationId(row["id"]),
        event_id=EventId(row["event_id"]),
        event_title=row["event_title"],
        event_starts_at=row["event_starts_at"],
        event_ends_at=row["event_ends_at"],
        timezone=row["timezone"],
        invitee_id=UserId(row["invitee_id"]) if row.get("invitee_id") else None,
        invitee_email=row["invitee_email"],
        normalized_invitee_email=row["normalized_invitee_email"],
        invitee_name=row.get("invitee_name"),
        organizer_id=UserId(row["organizer_id"]),
        organizer_name=row["organizer_name"],
        rsvp_status=RsvpStatus(row["rsvp_status"]),
        linked_at=row.get("linked_at"),
        responded_at=row.get("responded_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    data = invitation.model_dump()
    data["rsvp_status"] = invitation.rsvp_status.value
    return data


def row_to_activity(row: Dict[str, Any]) -> ActivityLogEntry:
    """Convert database row to ActivityLogEntry domain model."""
    return ActivityLogEntry(
        id=ActivityId(row["id"]),
        event_id=EventId(row["event_id"]),
        actor_id=UserId(row["actor_id"]),
        actor_name=row["actor_name"],
        action=ActivityAction(row["action"]),
        metadata=row.get("metadata") or {},
        created_at=row["created_at"],
    )


def activity_to_dict(entry: ActivityLogEntry) -> Dict[str, Any]:
    """Convert ActivityLogEntry domain model to database dict."""
    data = entry.model_dump(mode="json", exclude={"created_at"})
    data["created_at"] = entry.created_at
    return data
