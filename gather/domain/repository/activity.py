"""Activity log repository interface."""

from abc import ABC, abstractmethod

from gather.domain.model.activity import ActivityLogEntry
from gather.domain.value import EventId, UserId


class ActivityRepository(ABC):
    """Append-only store for activity log entries."""

    @abstractmethod
    async def append(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        """Append an entry.

        Args:
            entry: The entry to store

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_event(self, event_id: EventId) -> list[ActivityLogEntry]:
        """Find entries recorded against one event."""
        pass

    @abstractmethod
    async def find_by_events(self, event_ids: list[EventId]) -> list[ActivityLogEntry]:
        """Find entries recorded against any of ``event_ids``."""
        pass

    @abstractmethod
    async def find_by_actor(self, actor_id: UserId) -> list[ActivityLogEntry]:
        """Find entries written by one user."""
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: EventId) -> int:
        """Delete the log of a deleted event.

        Returns:
            Number of deleted entries
        """
        pass
