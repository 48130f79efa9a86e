"""Event repository interface."""

from abc import ABC, abstractmethod

from gather.domain.model.event import Event
from gather.domain.value import EventId, UserId


class EventRepository(ABC):
    """Repository for Event entity.

    Only point lookups and equality filters are required; callers sort.
    """

    @abstractmethod
    async def find_by_id(
        self, event_id: EventId, for_update: bool = False
    ) -> Event | None:
        """Find an event by ID.

        Args:
            event_id: The event's identifier
            for_update: Lock the row for the rest of the current transaction

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, event_ids: list[EventId]) -> list[Event]:
        """Find the events that exist among ``event_ids``.

        Args:
            event_ids: Event identifiers, possibly with duplicates

        Returns:
            Found events, each at most once
        """
        pass

    @abstractmethod
    async def find_by_organizer(self, organizer_id: UserId) -> list[Event]:
        """Find all events organized by a user.

        Args:
            organizer_id: The organizer's ID

        Returns:
            Events owned by the organizer
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update).

        Args:
            event: The event to save

        Returns:
            The saved event
        """
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> None:
        """Delete an event.

        Args:
            event_id: The event's identifier
        """
        pass
