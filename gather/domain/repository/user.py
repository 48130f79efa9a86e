"""User profile repository interface."""

from abc import ABC, abstractmethod

from gather.domain.model.user import UserProfile
from gather.domain.value import UserId


class UserRepository(ABC):
    """Profiles keyed by the identity provider's account id."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> UserProfile | None: ...

    @abstractmethod
    async def find_by_normalized_email(self, normalized_email: str) -> UserProfile | None:
        """Look up an account by email so new invitations can be linked to it.

        Args:
            normalized_email: Trimmed, lowercased email
        """

    @abstractmethod
    async def save(self, profile: UserProfile) -> UserProfile:
        """Create or replace a profile and return it."""
