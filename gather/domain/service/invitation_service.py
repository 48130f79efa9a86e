"""Invitation domain service."""

from datetime import datetime, timezone

import logfire

from gather.domain.error import ForbiddenError, NotFoundError, ValidationError
from gather.domain.model.event import Event
from gather.domain.model.invitation import Invitation, build_invitation_id
from gather.domain.model.user import UserContext, UserProfile
from gather.domain.repository import (
    EventRepository,
    InvitationRepository,
    TransactionManager,
    UserRepository,
)
from gather.domain.value import (
    ActivityAction,
    EventId,
    InvitationId,
    RsvpStatus,
    normalize_email,
)

from .base import Service
from .event_service import EventService


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InvitationService(Service):
    """Domain service for issuing invitations and recording RSVPs."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        event_repository: EventRepository,
        user_repository: UserRepository,
        event_service: EventService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            event_repository: Event repository, read with row locks
            user_repository: Used to link invitees who already have accounts
            event_service: Organizer checks and activity logging
            transaction_manager: Serializes count updates per event
        """
        self.invitation_repository = invitation_repository
        self.event_repository = event_repository
        self.user_repository = user_repository
        self.event_service = event_service
        self.transaction_manager = transaction_manager

    async def create_invitations(
        self, organizer: UserContext, event_id: EventId, emails: list[str]
    ) -> list[Invitation]:
        """Invite a batch of email addresses to an event.

        Emails are normalized and de-duplicated; addresses that already hold
        an invitation for the event are skipped. Invitations and the event's
        counts are written in one transaction.

        Args:
            organizer: Caller issuing the invitations
            event_id: Event to invite to
            emails: Raw invitee emails

        Returns:
            Newly created invitations, possibly empty

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If no usable email is given
        """
        with logfire.span(
            "invitation_service.create_invitations",
            event_id=event_id,
            organizer_id=organizer.uid,
            requested=len(emails),
        ):
            cleaned = list(
                dict.fromkeys(
                    normalize_email(email) for email in emails if email.strip()
                )
            )
            if not cleaned:
                raise ValidationError("At least one valid email is required.")

            async def issue() -> list[Invitation]:
                event = await self._locked_event(event_id)
                self.event_service.ensure_organizer(organizer, event)

                existing = {
                    invitation.normalized_invitee_email
                    for invitation in await self.invitation_repository.find_by_event(
                        event_id
                    )
                }

                created: list[Invitation] = []
                counts = event.invitation_counts
                for email in cleaned:
                    if email in existing:
                        continue
                    linked = await self.user_repository.find_by_normalized_email(email)
                    invitation = self._build_invitation(event, organizer, email, linked)
                    created.append(await self.invitation_repository.save(invitation))
                    counts = counts.apply_delta(None, RsvpStatus.INVITED)

                if created:
                    await self.event_repository.save(
                        event.model_copy(
                            update={"invitation_counts": counts, "updated_at": _utcnow()}
                        )
                    )
                return created

            created = await self.transaction_manager.run(issue)

            if created:
                await self.event_service.record_activity(
                    organizer,
                    event_id,
                    ActivityAction.INVITED,
                    {
                        "emails": [inv.invitee_email for inv in created],
                        "count": len(created),
                    },
                )
            logfire.info(
                "Invitations created",
                event_id=event_id,
                created=len(created),
                skipped=len(cleaned) - len(created),
            )
            return created

    async def list_for_invitee(self, viewer: UserContext) -> list[Invitation]:
        """Invitations received by the viewer, ordered by event start."""
        with logfire.span("invitation_service.list_for_invitee", viewer_id=viewer.uid):
            invitations = await self.event_service.viewer_invitations(viewer)
            return sorted(invitations, key=lambda inv: inv.event_starts_at)

    async def update_rsvp(
        self,
        viewer: UserContext,
        invitation_id: InvitationId,
        rsvp_status: RsvpStatus,
    ) -> Invitation:
        """Record the invitee's response to an invitation.

        The event row is locked before the invitation is re-read, so the
        previous status used for the count delta is always current.

        Args:
            viewer: Caller responding
            invitation_id: Invitation being answered
            rsvp_status: attending, maybe or declined

        Returns:
            Updated invitation

        Raises:
            ValidationError: If rsvp_status is invited
            NotFoundError: If the invitation or its event does not exist
            ForbiddenError: If the caller is not the invitee
        """
        with logfire.span(
            "invitation_service.update_rsvp",
            invitation_id=invitation_id,
            viewer_id=viewer.uid,
            rsvp_status=rsvp_status.value,
        ):
            if rsvp_status == RsvpStatus.INVITED:
                raise ValidationError("RSVP status must be attending, maybe or declined")

            async def respond() -> Invitation:
                invitation = await self._get_invitation(invitation_id)
                event = await self._locked_event(invitation.event_id)
                invitation = await self._get_invitation(invitation_id)

                if not invitation.is_addressed_to(
                    viewer.uid, viewer.normalized_email
                ):
                    logfire.warn(
                        "RSVP rejected for non-invitee",
                        invitation_id=invitation_id,
                        viewer_id=viewer.uid,
                    )
                    raise ForbiddenError("You can only update your own invitation.")

                now = _utcnow()
                counts = event.invitation_counts.apply_delta(
                    invitation.rsvp_status, rsvp_status
                )
                updated = invitation.model_copy(
                    update={
                        "rsvp_status": rsvp_status,
                        "invitee_id": viewer.uid,
                        "invitee_name": viewer.display_name,
                        "linked_at": invitation.linked_at or now,
                        "responded_at": now,
                        "updated_at": now,
                    }
                )
                saved = await self.invitation_repository.save(updated)
                await self.event_repository.save(
                    event.model_copy(
                        update={"invitation_counts": counts, "updated_at": now}
                    )
                )
                return saved

            saved = await self.transaction_manager.run(respond)

            await self.event_service.record_activity(
                viewer,
                saved.event_id,
                ActivityAction.RSVP_UPDATED,
                {"rsvp_status": rsvp_status.value},
            )
            logfire.info(
                "RSVP updated",
                invitation_id=invitation_id,
                event_id=saved.event_id,
                rsvp_status=rsvp_status.value,
            )
            return saved

    async def _get_invitation(self, invitation_id: InvitationId) -> Invitation:
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if not invitation:
            raise NotFoundError("Invitation", invitation_id)
        return invitation

    async def _locked_event(self, event_id: EventId) -> Event:
        event = await self.event_repository.find_by_id(event_id, for_update=True)
        if not event:
            raise NotFoundError("Event", event_id)
        return event

    def _build_invitation(
        self,
        event: Event,
        organizer: UserContext,
        email: str,
        linked: UserProfile | None,
    ) -> Invitation:
        now = _utcnow()
        return Invitation(
            id=build_invitation_id(event.id, email),
            event_id=event.id,
            event_title=event.title,
            event_starts_at=event.starts_at,
            event_ends_at=event.ends_at,
            timezone=event.timezone,
            invitee_id=linked.id if linked else None,
            invitee_email=email,
            normalized_invitee_email=email,
            invitee_name=linked.display_name if linked else None,
            organizer_id=organizer.uid,
            organizer_name=organizer.display_name,
            linked_at=now if linked else None,
            created_at=now,
            updated_at=now,
        )
