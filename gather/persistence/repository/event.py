"""PostgreSQL implementation of Event repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.model import Event
from gather.domain.repository import EventRepository
from gather.domain.value import EventId, UserId
from gather.persistence.mappers import event_to_dict, row_to_event
from gather.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, event_id: EventId, for_update: bool = False
    ) -> Optional[Event]:
        """Find an event by ID, optionally locking the row."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def find_by_ids(self, event_ids: list[EventId]) -> list[Event]:
        """Find the events that exist among the given IDs."""
        unique_ids = list(dict.fromkeys(event_ids))
        if not unique_ids:
            return []
        stmt = select(events_table).where(events_table.c.id.in_(unique_ids))
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings()]

    async def find_by_organizer(self, organizer_id: UserId) -> list[Event]:
        """Find all events organized by a user."""
        stmt = select(events_table).where(events_table.c.organizer_id == organizer_id)
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings()]

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        event_dict = event_to_dict(event)

        existing = await self.session.execute(
            select(events_table.c.id).where(events_table.c.id == event.id)
        )
        if existing.first():
            stmt = (
                update(events_table)
                .where(events_table.c.id == event.id)
                .values(**event_dict)
            )
        else:
            stmt = insert(events_table).values(**event_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return event

    async def delete(self, event_id: EventId) -> None:
        """Delete an event."""
        await self.session.execute(
            delete(events_table).where(events_table.c.id == event_id)
        )
        await self.session.flush()
