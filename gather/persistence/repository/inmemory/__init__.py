"""In-memory repository implementations for testing."""

from .activity import InMemoryActivityRepository
from .event import InMemoryEventRepository
from .invitation import InMemoryInvitationRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryEventRepository",
    "InMemoryInvitationRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
