"""initial_schema

Create the Gather schema:
- Users (keyed by the identity provider's uid)
- Events (organizer-owned, with denormalized invitation counts)
- Event invitations (one per event and normalized email)
- Event activity logs (append-only, kept after an event is deleted)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(320), nullable=False, server_default=""),
        sa.Column(
            "normalized_email", sa.String(320), nullable=False, server_default=""
        ),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "last_login_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_normalized_email", "users", ["normalized_email"])

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("location", sa.String(160), nullable=False),
        sa.Column("starts_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("ends_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("timezone", sa.String(80), nullable=False),
        sa.Column("organizer_id", sa.String(128), nullable=False),
        sa.Column("organizer_name", sa.String(255), nullable=False),
        sa.Column("search_blob", sa.Text(), nullable=False, server_default=""),
        sa.Column("ai_summary", sa.Text(), nullable=True),
        sa.Column("ai_agenda_bullets", postgresql.JSONB(), nullable=True),
        sa.Column("invited_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "attending_count", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("maybe_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("declined_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("ends_at > starts_at", name="check_event_time_range"),
        sa.CheckConstraint(
            "invited_count >= 0 AND attending_count >= 0 "
            "AND maybe_count >= 0 AND declined_count >= 0",
            name="check_invitation_counts_non_negative",
        ),
    )
    op.create_index("idx_events_organizer_id", "events", ["organizer_id"])
    op.create_index("idx_events_starts_at", "events", ["starts_at"])

    # ========================================================================
    # EVENT_INVITATIONS table
    # ========================================================================
    op.create_table(
        "event_invitations",
        sa.Column("id", sa.String(512), nullable=False),
        sa.Column("event_id", sa.String(64), nullable=False),
        sa.Column("event_title", sa.String(120), nullable=False),
        sa.Column("event_starts_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("event_ends_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("timezone", sa.String(80), nullable=False),
        sa.Column("invitee_id", sa.String(128), nullable=True),
        sa.Column("invitee_email", sa.String(320), nullable=False),
        sa.Column("normalized_invitee_email", sa.String(320), nullable=False),
        sa.Column("invitee_name", sa.String(255), nullable=True),
        sa.Column("organizer_id", sa.String(128), nullable=False),
        sa.Column("organizer_name", sa.String(255), nullable=False),
        sa.Column(
            "rsvp_status", sa.String(20), nullable=False, server_default="invited"
        ),
        sa.Column("linked_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("responded_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "rsvp_status IN ('invited', 'attending', 'maybe', 'declined')",
            name="check_rsvp_status",
        ),
    )
    op.create_index(
        "idx_event_invitations_event_id", "event_invitations", ["event_id"]
    )
    op.create_index(
        "idx_event_invitations_invitee_id", "event_invitations", ["invitee_id"]
    )
    op.create_index(
        "idx_event_invitations_normalized_email",
        "event_invitations",
        ["normalized_invitee_email"],
    )

    # ========================================================================
    # EVENT_ACTIVITY_LOGS table (no FK: entries outlive their event)
    # ========================================================================
    op.create_table(
        "event_activity_logs",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("event_id", sa.String(64), nullable=False),
        sa.Column("actor_id", sa.String(128), nullable=False),
        sa.Column("actor_name", sa.String(255), nullable=False),
        sa.Column("action", sa.String(20), nullable=False),
        sa.Column(
            "metadata",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "action IN ('created', 'updated', 'invited', 'rsvp_updated', 'deleted')",
            name="check_activity_action",
        ),
    )
    op.create_index(
        "idx_event_activity_logs_event_id", "event_activity_logs", ["event_id"]
    )
    op.create_index(
        "idx_event_activity_logs_actor_id", "event_activity_logs", ["actor_id"]
    )
    op.create_index(
        "idx_event_activity_logs_created_at", "event_activity_logs", ["created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("event_activity_logs")
    op.drop_table("event_invitations")
    op.drop_table("events")
    op.drop_table("users")
