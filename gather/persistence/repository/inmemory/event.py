"""In-memory event repository for testing."""

from typing import Optional

from gather.domain.model import Event
from gather.domain.repository import EventRepository
from gather.domain.value import EventId, UserId

from .store import InMemoryStore


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(
        self, event_id: EventId, for_update: bool = False
    ) -> Optional[Event]:
        """Find an event by ID; row locks are covered by the store lock."""
        return self.store.events.get(event_id)

    async def find_by_ids(self, event_ids: list[EventId]) -> list[Event]:
        """Find the events that exist among the given IDs."""
        return [
            self.store.events[event_id]
            for event_id in dict.fromkeys(event_ids)
            if event_id in self.store.events
        ]

    async def find_by_organizer(self, organizer_id: UserId) -> list[Event]:
        """Find all events organized by a user."""
        return [
            event
            for event in self.store.events.values()
            if event.organizer_id == organizer_id
        ]

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        self.store.events[event.id] = event
        return event

    async def delete(self, event_id: EventId) -> None:
        """Delete an event."""
        self.store.events.pop(event_id, None)
