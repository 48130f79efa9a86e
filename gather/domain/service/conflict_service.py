"""Conflict aggregation over upcoming events."""

from typing import Sequence

import logfire

from gather.domain.model.analytics import ConflictSummary, RiskEntry
from gather.domain.model.event import Event
from gather.domain.value import EventId, RiskLabel

from .base import Service
from .overlap import has_overlap, sort_by_start


class ConflictService(Service):
    """Pairwise overlap scan over a bounded set of events."""

    def overlap_counts(self, events: Sequence[Event]) -> dict[EventId, int]:
        """Number of other events each event overlaps.

        Args:
            events: Events to compare against each other

        Returns:
            Overlap count keyed by event id
        """
        return {
            event.id: sum(
                1
                for other in events
                if other.id != event.id and has_overlap(event, other)
            )
            for event in events
        }

    def compute_conflicts(
        self, upcoming_events: Sequence[Event], high_risk_limit: int = 4
    ) -> ConflictSummary:
        """Count overlaps and pick the high-risk events.

        Each overlapping pair is counted once from each side, so two events
        that overlap contribute 2 to ``conflict_count``. High-risk events are
        the first ``high_risk_limit`` events in start order that overlap at
        least one other; they are not ranked by severity.

        Args:
            upcoming_events: Upcoming events visible to the viewer
            high_risk_limit: Maximum number of high-risk entries returned

        Returns:
            Conflict count and high-risk entries
        """
        with logfire.span(
            "conflict_service.compute_conflicts", event_count=len(upcoming_events)
        ):
            ordered = sort_by_start(upcoming_events)
            counts = self.overlap_counts(ordered)

            conflict_count = 0
            high_risk: list[RiskEntry] = []
            for event in ordered:
                overlaps = counts[event.id]
                conflict_count += overlaps
                if overlaps == 0 or len(high_risk) >= high_risk_limit:
                    continue
                high_risk.append(
                    RiskEntry(
                        id=event.id,
                        title=event.title,
                        starts_at=event.starts_at,
                        location=event.location,
                        risk_label=(
                            RiskLabel.MULTI_OVERLAP
                            if overlaps > 1
                            else RiskLabel.SINGLE_OVERLAP
                        ),
                    )
                )

            return ConflictSummary(
                conflict_count=conflict_count, high_risk_events=high_risk
            )
