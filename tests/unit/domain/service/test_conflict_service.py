"""Unit tests for ConflictService."""

from gather.domain.model.analytics import ConflictSummary
from gather.domain.service import ConflictService
from gather.domain.value import RiskLabel
from tests.conftest import make_event


class TestComputeConflicts:
    """Tests for compute_conflicts."""

    def test_no_events(self):
        assert ConflictService().compute_conflicts([]) == ConflictSummary(
            conflict_count=0, high_risk_events=[]
        )

    def test_each_overlapping_pair_counts_twice(self):
        """A 10:00-11:00, B 10:30-11:30, C 12:00-13:00."""
        a = make_event("a", 1, 1)
        b = make_event("b", 1.5, 1)
        c = make_event("c", 3.5, 1)

        summary = ConflictService().compute_conflicts([c, b, a])

        assert summary.conflict_count == 2
        assert [entry.id for entry in summary.high_risk_events] == ["a", "b"]
        assert all(
            entry.risk_label == RiskLabel.SINGLE_OVERLAP
            for entry in summary.high_risk_events
        )

    def test_multi_overlap_label(self):
        a = make_event("a", 1, 3)
        b = make_event("b", 1.5, 1)
        c = make_event("c", 3, 1)

        summary = ConflictService().compute_conflicts([a, b, c])

        labels = {entry.id: entry.risk_label for entry in summary.high_risk_events}
        assert labels["a"] == RiskLabel.MULTI_OVERLAP
        assert labels["b"] == RiskLabel.SINGLE_OVERLAP
        assert summary.conflict_count == 4

    def test_high_risk_keeps_first_events_in_start_order(self):
        events = [make_event(f"e{i}", 1 + i * 0.1, 2) for i in range(6)]

        summary = ConflictService().compute_conflicts(
            list(reversed(events)), high_risk_limit=4
        )

        assert [entry.id for entry in summary.high_risk_events] == [
            "e0",
            "e1",
            "e2",
            "e3",
        ]
        # Every event overlaps the 5 others
        assert summary.conflict_count == 30


class TestOverlapCounts:
    """Tests for overlap_counts."""

    def test_event_does_not_overlap_itself(self):
        counts = ConflictService().overlap_counts([make_event("solo", 1)])
        assert counts == {"solo": 0}
