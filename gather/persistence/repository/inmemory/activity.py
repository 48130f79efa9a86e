"""In-memory activity repository for testing."""

from gather.domain.model import ActivityLogEntry
from gather.domain.repository import ActivityRepository
from gather.domain.value import EventId, UserId

from .store import InMemoryStore


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def append(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        """Append an activity entry."""
        self.store.activity.append(entry)
        return entry

    async def find_by_event(self, event_id: EventId) -> list[ActivityLogEntry]:
        """Find entries recorded against one event."""
        return [entry for entry in self.store.activity if entry.event_id == event_id]

    async def find_by_events(self, event_ids: list[EventId]) -> list[ActivityLogEntry]:
        """Find entries recorded against any of the given events."""
        wanted = set(event_ids)
        return [entry for entry in self.store.activity if entry.event_id in wanted]

    async def find_by_actor(self, actor_id: UserId) -> list[ActivityLogEntry]:
        """Find entries written by one user."""
        return [entry for entry in self.store.activity if entry.actor_id == actor_id]

    async def delete_by_event(self, event_id: EventId) -> int:
        """Delete the log of a deleted event."""
        kept = [entry for entry in self.store.activity if entry.event_id != event_id]
        deleted = len(self.store.activity) - len(kept)
        self.store.activity[:] = kept
        return deleted
