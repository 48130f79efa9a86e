"""Repository interfaces for the Gather domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gather.domain.repository.activity import ActivityRepository
from gather.domain.repository.event import EventRepository
from gather.domain.repository.invitation import InvitationRepository
from gather.domain.repository.transaction import TransactionManager
from gather.domain.repository.user import UserRepository

__all__ = [
    "ActivityRepository",
    "EventRepository",
    "InvitationRepository",
    "TransactionManager",
    "UserRepository",
]
