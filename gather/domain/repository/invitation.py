"""Invitation repository interface."""

from abc import ABC, abstractmethod

from gather.domain.model.invitation import Invitation
from gather.domain.value import EventId, InvitationId, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity."""

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations issued for an event.

        Args:
            event_id: The event's identifier

        Returns:
            Invitations for the event
        """
        pass

    @abstractmethod
    async def find_by_invitee(self, invitee_id: UserId) -> list[Invitation]:
        """Find invitations linked to an account.

        Args:
            invitee_id: The invitee's account ID

        Returns:
            Invitations linked to the account
        """
        pass

    @abstractmethod
    async def find_by_normalized_email(self, normalized_email: str) -> list[Invitation]:
        """Find invitations addressed to an email, linked or not.

        Args:
            normalized_email: Trimmed, lowercased email

        Returns:
            Invitations addressed to the email
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: EventId) -> int:
        """Delete every invitation for an event.

        Args:
            event_id: The event's identifier

        Returns:
            Number of deleted invitations
        """
        pass
