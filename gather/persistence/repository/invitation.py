"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gather.domain.model import Invitation
from gather.domain.repository import InvitationRepository
from gather.domain.value import EventId, InvitationId, UserId
from gather.persistence.mappers import invitation_to_dict, row_to_invitation
from gather.persistence.tables import event_invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_where(self, *criteria) -> list[Invitation]:
        stmt = (
            select(event_invitations_table)
            .where(*criteria)
            .order_by(event_invitations_table.c.created_at, event_invitations_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        found = await self._find_where(event_invitations_table.c.id == invitation_id)
        return found[0] if found else None

    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations for an event."""
        return await self._find_where(event_invitations_table.c.event_id == event_id)

    async def find_by_invitee(self, invitee_id: UserId) -> list[Invitation]:
        """Find invitations linked to an account."""
        return await self._find_where(
            event_invitations_table.c.invitee_id == invitee_id
        )

    async def find_by_normalized_email(self, normalized_email: str) -> list[Invitation]:
        """Find invitations addressed to an email."""
        return await self._find_where(
            event_invitations_table.c.normalized_invitee_email == normalized_email
        )

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.session.execute(
            select(event_invitations_table.c.id).where(
                event_invitations_table.c.id == invitation.id
            )
        )
        if existing.first():
            stmt = (
                update(event_invitations_table)
                .where(event_invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(event_invitations_table).values(**invitation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invitation

    async def delete_by_event(self, event_id: EventId) -> int:
        """Delete every invitation for an event."""
        result = await self.session.execute(
            delete(event_invitations_table).where(
                event_invitations_table.c.event_id == event_id
            )
        )
        await self.session.flush()
        return result.rowcount
