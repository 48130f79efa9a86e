"""Interval overlap predicate."""

from datetime import datetime
from typing import Iterable, Protocol, TypeVar


class TimeRange(Protocol):
    starts_at: datetime
    ends_at: datetime


T = TypeVar("T", bound=TimeRange)


def has_overlap(target: TimeRange, candidate: TimeRange) -> bool:
    """Whether two time ranges intersect.

    Ranges are closed, so an event ending at 11:00 overlaps one starting at
    11:00. Back-to-back events are reported as a conflict risk.
    """
    return (
        target.starts_at <= candidate.ends_at
        and target.ends_at >= candidate.starts_at
    )


def sort_by_start(items: Iterable[T]) -> list[T]:
    """Stable sort by start time; equal starts keep their input order."""
    return sorted(items, key=lambda item: item.starts_at)
