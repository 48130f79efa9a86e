"""Transaction manager interface."""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")


class TransactionManager(ABC):
    """Runs a read-modify-write callable atomically.

    Everything the callable reads and writes through repositories sharing
    this transaction is committed together or not at all. Rows read with
    ``for_update=True`` stay locked until the callable returns, so two
    concurrent RSVP updates on one event cannot lose an increment.
    """

    @abstractmethod
    async def run(self, fn: Callable[[], Awaitable[T]]) -> T:
        """Execute ``fn`` inside a transaction.

        Args:
            fn: Async callable performing the reads and writes

        Returns:
            Whatever ``fn`` returns

        Raises:
            Exception: Anything ``fn`` raises, after rolling back its writes
        """
        pass
