"""PostgreSQL user profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.model import UserProfile
from gather.domain.repository import UserRepository
from gather.domain.value import UserId
from gather.persistence.mappers import row_to_user, user_to_dict
from gather.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt) -> Optional[UserProfile]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._first(stmt)

    async def find_by_normalized_email(
        self, normalized_email: str
    ) -> Optional[UserProfile]:
        """Oldest profile registered under the email, if several share it."""
        return await self._first(
            select(users_table)
            .where(users_table.c.normalized_email == normalized_email)
            .order_by(users_table.c.created_at)
            .limit(1)
        )

    async def save(self, profile: UserProfile) -> UserProfile:
        """Upsert keyed on account id.

        Two first requests from the same account can race to create the
        profile; the later write wins but ``created_at`` keeps the first value.
        """
        values = user_to_dict(profile)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile
