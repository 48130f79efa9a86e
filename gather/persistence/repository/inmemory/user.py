"""In-memory user repository for testing."""

from typing import Optional

from gather.domain.model import UserProfile
from gather.domain.repository import UserRepository
from gather.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by account ID."""
        return self.store.users.get(user_id)

    async def find_by_normalized_email(
        self, normalized_email: str
    ) -> Optional[UserProfile]:
        """Find a profile by normalized email."""
        for profile in self.store.users.values():
            if profile.normalized_email == normalized_email:
                return profile
        return None

    async def save(self, profile: UserProfile) -> UserProfile:
        """Save a profile (create or update)."""
        self.store.users[profile.id] = profile
        return profile
