"""In-memory invitation repository for testing."""

from typing import Optional

from gather.domain.model import Invitation
from gather.domain.repository import InvitationRepository
from gather.domain.value import EventId, InvitationId, UserId

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self.store.invitations.get(invitation_id)

    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations for an event."""
        return [
            inv for inv in self.store.invitations.values() if inv.event_id == event_id
        ]

    async def find_by_invitee(self, invitee_id: UserId) -> list[Invitation]:
        """Find invitations linked to an account."""
        return [
            inv
            for inv in self.store.invitations.values()
            if inv.invitee_id == invitee_id
        ]

    async def find_by_normalized_email(self, normalized_email: str) -> list[Invitation]:
        """Find invitations addressed to an email."""
        return [
            inv
            for inv in self.store.invitations.values()
            if inv.normalized_invitee_email == normalized_email
        ]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        self.store.invitations[invitation.id] = invitation
        return invitation

    async def delete_by_event(self, event_id: EventId) -> int:
        """Delete every invitation for an event."""
        doomed = [
            inv.id
            for inv in self.store.invitations.values()
            if inv.event_id == event_id
        ]
        for invitation_id in doomed:
            del self.store.invitations[invitation_id]
        return len(doomed)
