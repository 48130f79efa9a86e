"""PostgreSQL repository implementations."""

from gather.persistence.repository.activity import PostgresActivityRepository
from gather.persistence.repository.event import PostgresEventRepository
from gather.persistence.repository.invitation import PostgresInvitationRepository
from gather.persistence.repository.transaction import PostgresTransactionManager
from gather.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresActivityRepository",
    "PostgresEventRepository",
    "PostgresInvitationRepository",
    "PostgresTransactionManager",
    "PostgresUserRepository",
]
