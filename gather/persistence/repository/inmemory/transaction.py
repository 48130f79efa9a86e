"""In-memory transaction manager for testing."""

from typing import Awaitable, Callable, TypeVar

from gather.domain.repository import TransactionManager

from .store import InMemoryStore

T = TypeVar("T")


class InMemoryTransactionManager(TransactionManager):
    """Serializes callables on the store lock and undoes failed ones."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def run(self, fn: Callable[[], Awaitable[T]]) -> T:
        async with self.store.lock:
            snapshot = self.store.snapshot()
            try:
                return await fn()
            except Exception:
                self.store.restore(snapshot)
                raise
