"""Unit tests for row <-> domain model mappers."""

from gather.domain.value import ActivityAction, InvitationCounts
from gather.persistence.mappers import (
    event_to_dict,
    row_to_activity,
    row_to_event,
)
from gather.persistence.tables import events_table
from tests.conftest import NOW, make_event


class TestEventMapping:
    def test_counts_are_flattened_into_columns(self):
        event = make_event(
            "evt-1", 24, counts=InvitationCounts(invited=2, attending=1, declined=3)
        )

        row = event_to_dict(event)

        assert "invitation_counts" not in row
        assert row["invited_count"] == 2
        assert row["attending_count"] == 1
        assert row["maybe_count"] == 0
        assert row["declined_count"] == 3
        assert row_to_event(row) == event

    def test_dict_keys_match_table_columns(self):
        """Every mapped key is a column of the events table."""
        row = event_to_dict(make_event("evt-1", 24))

        assert set(row) == {column.name for column in events_table.columns}


class TestActivityMapping:
    def test_missing_metadata_becomes_empty(self):
        entry = row_to_activity(
            {
                "id": "act-1",
                "event_id": "evt-1",
                "actor_id": "user-1",
                "actor_name": "Alice",
                "action": "rsvp_updated",
                "metadata": None,
                "created_at": NOW,
            }
        )

        assert entry.action == ActivityAction.RSVP_UPDATED
        assert entry.metadata == {}
