"""Invitation entity.

An invitation grants one email address visibility into one event and the
right to set its own RSVP.
"""

from datetime import datetime
from typing import Optional

from gather.domain.model.common import DomainModel
from gather.domain.model.event import build_invitation_slug
from gather.domain.value import EventId, InvitationId, RsvpStatus, UserId


def build_invitation_id(event_id: EventId, normalized_email: str) -> InvitationId:
    """Deterministic invitation id for an event and invitee email."""
    return InvitationId(f"{event_id}-{build_invitation_slug(normalized_email)}")


class Invitation(DomainModel):
    """Invitation to an event.

    Business rules:
    - One invitation per (event, normalized email)
    - Created with status invited; only the invitee changes it afterwards
    - Never moves back to invited
    - invitee_id is filled in once the invitee signs in
    """

    id: InvitationId
    event_id: EventId
    event_title: str
    event_starts_at: datetime
    event_ends_at: datetime
    timezone: str
    invitee_id: Optional[UserId] = None
    invitee_email: str
    normalized_invitee_email: str
    invitee_name: Optional[str] = None
    organizer_id: UserId
    organizer_name: str
    rsvp_status: RsvpStatus = RsvpStatus.INVITED
    linked_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    def is_addressed_to(self, user_id: UserId, normalized_email: str) -> bool:
        """Whether the account may see and answer this invitation.

        A linked invitation belongs to its account alone; an unlinked one
        belongs to whoever signs in with the invited email.
        """
        if self.invitee_id is not None:
            return self.invitee_id == user_id
        return self.normalized_invitee_email == normalized_email
