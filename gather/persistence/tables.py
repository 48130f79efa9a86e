"""SQLAlchemy table definitions for Gather.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (keyed by the identity provider's uid)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(128), primary_key=True),
    Column("email", String(320), nullable=False, server_default=""),
    Column("normalized_email", String(320), nullable=False, server_default=""),
    Column("display_name", String(255), nullable=False),
    Column("photo_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_login_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_users_normalized_email", users_table.c.normalized_email)

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("title", String(120), nullable=False),
    Column("description", Text, nullable=False),
    Column("location", String(160), nullable=False),
    Column("starts_at", TIMESTAMP(timezone=True), nullable=False),
    Column("ends_at", TIMESTAMP(timezone=True), nullable=False),
    Column("timezone", String(80), nullable=False),
    Column("organizer_id", String(128), nullable=False),
    Column("organizer_name", String(255), nullable=False),
    Column("search_blob", Text, nullable=False, server_default=""),
    Column("ai_summary", Text, nullable=True),
    Column("ai_agenda_bullets", JSONB, nullable=True),
    # Invitation counts, only changed through InvitationCounts.apply_delta
    Column("invited_count", Integer, nullable=False, server_default="0"),
    Column("attending_count", Integer, nullable=False, server_default="0"),
    Column("maybe_count", Integer, nullable=False, server_default="0"),
    Column("declined_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("ends_at > starts_at", name="check_event_time_range"),
    CheckConstraint(
        "invited_count >= 0 AND attending_count >= 0 "
        "AND maybe_count >= 0 AND declined_count >= 0",
        name="check_invitation_counts_non_negative",
    ),
)

Index("idx_events_organizer_id", events_table.c.organizer_id)
Index("idx_events_starts_at", events_table.c.starts_at)

# ============================================================================
# EVENT INVITATIONS TABLE
# ============================================================================
event_invitations_table = Table(
    "event_invitations",
    metadata,
    Column("id", String(512), primary_key=True),
    Column(
        "event_id",
        String(64),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("event_title", String(120), nullable=False),
    Column("event_starts_at", TIMESTAMP(timezone=True), nullable=False),
    Column("event_ends_at", TIMESTAMP(timezone=True), nullable=False),
    Column("timezone", String(80), nullable=False),
    Column("invitee_id", String(128), nullable=True),
    Column("invitee_email", String(320), nullable=False),
    Column("normalized_invitee_email", String(320), nullable=False),
    Column("invitee_name", String(255), nullable=True),
    Column("organizer_id", String(128), nullable=False),
    Column("organizer_name", String(255), nullable=False),
    Column("rsvp_status", String(20), nullable=False, server_default="invited"),
    Column("linked_at", TIMESTAMP(timezone=True), nullable=True),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "rsvp_status IN ('invited', 'attending', 'maybe', 'declined')",
        name="check_rsvp_status",
    ),
)

Index("idx_event_invitations_event_id", event_invitations_table.c.event_id)
Index("idx_event_invitations_invitee_id", event_invitations_table.c.invitee_id)
Index(
    "idx_event_invitations_normalized_email",
    event_invitations_table.c.normalized_invitee_email,
)

# ============================================================================
# EVENT ACTIVITY LOGS TABLE (append-only; outlives deleted events)
# ============================================================================
event_activity_logs_table = Table(
    "event_activity_logs",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("event_id", String(64), nullable=False),
    Column("actor_id", String(128), nullable=False),
    Column("actor_name", String(255), nullable=False),
    Column("action", String(20), nullable=False),
    Column("metadata", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "action IN ('created', 'updated', 'invited', 'rsvp_updated', 'deleted')",
        name="check_activity_action",
    ),
)

Index("idx_event_activity_logs_event_id", event_activity_logs_table.c.event_id)
Index("idx_event_activity_logs_actor_id", event_activity_logs_table.c.actor_id)
Index("idx_event_activity_logs_created_at", event_activity_logs_table.c.created_at)
