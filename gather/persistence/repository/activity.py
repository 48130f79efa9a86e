"""PostgreSQL implementation of Activity repository."""

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.model import ActivityLogEntry
from gather.domain.repository import ActivityRepository
from gather.domain.value import EventId, UserId
from gather.persistence.mappers import activity_to_dict, row_to_activity
from gather.persistence.tables import event_activity_logs_table


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        """Append an activity entry."""
        await self.session.execute(
            insert(event_activity_logs_table).values(**activity_to_dict(entry))
        )
        await self.session.flush()
        return entry

    async def _find_where(self, *criteria) -> list[ActivityLogEntry]:
        stmt = select(event_activity_logs_table).where(*criteria)
        result = await self.session.execute(stmt)
        return [row_to_activity(dict(row)) for row in result.mappings()]

    async def find_by_event(self, event_id: EventId) -> list[ActivityLogEntry]:
        """Find entries recorded against one event."""
        return await self._find_where(event_activity_logs_table.c.event_id == event_id)

    async def find_by_events(self, event_ids: list[EventId]) -> list[ActivityLogEntry]:
        """Find entries recorded against any of the given events."""
        if not event_ids:
            return []
        return await self._find_where(
            event_activity_logs_table.c.event_id.in_(list(dict.fromkeys(event_ids)))
        )

    async def find_by_actor(self, actor_id: UserId) -> list[ActivityLogEntry]:
        """Find entries written by one user."""
        return await self._find_where(event_activity_logs_table.c.actor_id == actor_id)

    async def delete_by_event(self, event_id: EventId) -> int:
        """Delete the log of a deleted event."""
        result = await self.session.execute(
            delete(event_activity_logs_table).where(
                event_activity_logs_table.c.event_id == event_id
            )
        )
        await self.session.flush()
        return result.rowcount
