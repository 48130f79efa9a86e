"""Unit tests for the interval overlap predicate."""

from datetime import datetime, timedelta, timezone
from itertools import product

from gather.domain.service import has_overlap, sort_by_start
from tests.conftest import make_event


class TestHasOverlap:
    """Tests for has_overlap."""

    def test_partial_overlap(self):
        a = make_event("a", 1, 1)
        b = make_event("b", 1.5, 1)
        assert has_overlap(a, b)

    def test_disjoint_events_do_not_overlap(self):
        a = make_event("a", 1, 1)
        c = make_event("c", 3, 1)
        assert not has_overlap(a, c)

    def test_touching_endpoints_overlap(self):
        """An event ending at 11:00 conflicts with one starting at 11:00."""
        a = make_event("a", 1, 1)
        b = make_event("b", 2, 1)
        assert has_overlap(a, b)

    def test_contained_event_overlaps(self):
        outer = make_event("outer", 1, 4)
        inner = make_event("inner", 2, 1)
        assert has_overlap(outer, inner)
        assert has_overlap(inner, outer)

    def test_symmetric_and_reflexive(self):
        events = [
            make_event("a", 0, 1),
            make_event("b", 0.5, 1),
            make_event("c", 1, 0.5),
            make_event("d", 5, 2),
        ]
        for a, b in product(events, repeat=2):
            assert has_overlap(a, b) == has_overlap(b, a)
        for event in events:
            assert has_overlap(event, event)


class TestSortByStart:
    """Tests for sort_by_start."""

    def test_equal_starts_keep_input_order(self):
        first = make_event("first", 2)
        second = make_event("second", 2)
        earliest = make_event("earliest", 1)

        ordered = sort_by_start([first, second, earliest])

        assert [event.id for event in ordered] == ["earliest", "first", "second"]

    def test_compares_instants_across_offsets(self):
        utc = make_event("utc", 2)
        shifted = utc.model_copy(
            update={
                "id": "shifted",
                "starts_at": datetime(2026, 3, 2, 9, 30, tzinfo=timezone(timedelta(hours=1))),
            }
        )
        # 09:30+01:00 is 08:30 UTC, before 11:00 UTC
        assert [e.id for e in sort_by_start([utc, shifted])] == ["shifted", "utc"]
