"""PostgreSQL transaction manager."""

from typing import Awaitable, Callable, TypeVar

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.repository import TransactionManager

T = TypeVar("T")


class PostgresTransactionManager(TransactionManager):
    """Runs callables inside a SAVEPOINT on the request session.

    The request-scoped session commits at the end of the request; the
    savepoint makes the callable's writes all-or-nothing within it. Row locks
    taken with ``SELECT ... FOR UPDATE`` are held until that commit.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def run(self, fn: Callable[[], Awaitable[T]]) -> T:
        async with self.session.begin_nested():
            result = await fn()
        logfire.debug("Savepoint released")
        return result
