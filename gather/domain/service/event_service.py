"""Event domain service."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from math import ceil
from typing import Any
from uuid import uuid4

import logfire

from gather.config import AnalyticsSettings
from gather.domain.error import ForbiddenError, NotFoundError, ValidationError
from gather.domain.model.activity import ActivityLogEntry
from gather.domain.model.event import (
    Event,
    EventDetails,
    VisibleEvent,
    build_search_blob,
)
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext
from gather.domain.repository import (
    ActivityRepository,
    EventRepository,
    InvitationRepository,
    TransactionManager,
)
from gather.domain.value import (
    ActivityAction,
    ActivityId,
    EventId,
    EventScope,
    EventStatusFilter,
    InvitationCounts,
    RsvpStatus,
)

from .base import Service
from .overlap import sort_by_start


@dataclass
class EventListFilters:
    """Filters for listing the viewer's visible events."""

    q: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    scope: EventScope = EventScope.ALL
    status: EventStatusFilter | None = None
    page: int = 1
    limit: int = 12


@dataclass
class EventPage:
    """One page of visible events."""

    items: list[VisibleEvent]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return max(1, ceil(self.total / self.limit))


@dataclass
class EventDetail:
    """Event as shown on its detail page."""

    event: Event
    is_organizer: bool
    viewer_invitation: Invitation | None
    invitations: list[Invitation] = field(default_factory=list)
    activity: list[ActivityLogEntry] = field(default_factory=list)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _matches(
    event: VisibleEvent, filters: EventListFilters, now: datetime
) -> bool:
    query = (filters.q or "").strip().lower()
    if query and query not in event.search_blob:
        return False

    if filters.location and filters.location.lower() not in event.location.lower():
        return False

    if filters.start_date and event.starts_at < datetime.combine(
        filters.start_date, time.min, tzinfo=timezone.utc
    ):
        return False

    if filters.end_date and event.starts_at >= datetime.combine(
        filters.end_date + timedelta(days=1), time.min, tzinfo=timezone.utc
    ):
        return False

    if filters.status == EventStatusFilter.UPCOMING:
        return event.is_upcoming(now)

    if filters.status and event.viewer_rsvp_status != RsvpStatus(filters.status.value):
        return False

    return True


class EventService(Service):
    """Domain service for event operations."""

    def __init__(
        self,
        event_repository: EventRepository,
        invitation_repository: InvitationRepository,
        activity_repository: ActivityRepository,
        transaction_manager: TransactionManager,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
            invitation_repository: Invitation repository
            activity_repository: Activity log repository
            transaction_manager: Runs cascading deletes atomically
            analytics_settings: Supplies the event activity window
        """
        self.event_repository = event_repository
        self.invitation_repository = invitation_repository
        self.activity_repository = activity_repository
        self.transaction_manager = transaction_manager
        self.settings = analytics_settings

    async def get_event(self, event_id: EventId) -> Event:
        """Get event by ID.

        Raises:
            NotFoundError: If the event does not exist
        """
        event = await self.event_repository.find_by_id(event_id)
        if not event:
            logfire.warn("Event not found", event_id=event_id)
            raise NotFoundError("Event", event_id)
        return event

    def ensure_organizer(self, viewer: UserContext, event: Event) -> None:
        """Reject mutations by anyone but the organizer.

        Raises:
            ForbiddenError: If the viewer did not create the event
        """
        if event.organizer_id != viewer.uid:
            logfire.warn(
                "Non-organizer attempted event mutation",
                event_id=event.id,
                viewer_id=viewer.uid,
            )
            raise ForbiddenError("Only the event organizer can perform this action.")

    async def record_activity(
        self,
        actor: UserContext,
        event_id: EventId,
        action: ActivityAction,
        metadata: dict[str, Any] | None = None,
    ) -> ActivityLogEntry:
        """Append an entry to the event's activity log."""
        entry = ActivityLogEntry(
            id=ActivityId(uuid4().hex),
            event_id=event_id,
            actor_id=actor.uid,
            actor_name=actor.display_name,
            action=action,
            metadata=metadata or {},
            created_at=_utcnow(),
        )
        return await self.activity_repository.append(entry)

    async def viewer_invitations(self, viewer: UserContext) -> list[Invitation]:
        """Invitations addressed to the viewer, by linked account or email."""
        by_id: dict[str, Invitation] = {}
        for invitation in await self.invitation_repository.find_by_invitee(viewer.uid):
            by_id[invitation.id] = invitation
        for invitation in await self.invitation_repository.find_by_normalized_email(
            viewer.normalized_email
        ):
            if invitation.is_addressed_to(viewer.uid, viewer.normalized_email):
                by_id[invitation.id] = invitation
        return list(by_id.values())

    async def search_visible_events(
        self,
        viewer: UserContext,
        filters: EventListFilters,
        now: datetime | None = None,
    ) -> EventPage:
        """List events the viewer organizes or is invited to.

        Events are sorted by start time before filtering and pagination.

        Args:
            viewer: Current caller
            filters: Text, location, date, scope and status filters plus paging
            now: Reference instant for the ``upcoming`` status filter

        Returns:
            Requested page and the total number of matches
        """
        now = now or _utcnow()

        with logfire.span(
            "event_service.search_visible_events",
            viewer_id=viewer.uid,
            scope=filters.scope.value,
            page=filters.page,
            limit=filters.limit,
        ):
            owned = await self.event_repository.find_by_organizer(viewer.uid)
            invitations = await self.viewer_invitations(viewer)
            status_by_event = {inv.event_id: inv.rsvp_status for inv in invitations}
            invited = await self.event_repository.find_by_ids(
                [inv.event_id for inv in invitations]
            )

            deduped: dict[EventId, Event] = {}
            if filters.scope != EventScope.INVITED:
                for event in owned:
                    deduped[event.id] = event
            if filters.scope != EventScope.OWNED:
                for event in invited:
                    deduped[event.id] = event

            visible = [
                VisibleEvent.for_viewer(
                    event, viewer.uid, status_by_event.get(event.id)
                )
                for event in sort_by_start(deduped.values())
            ]
            matched = [event for event in visible if _matches(event, filters, now)]

            start = (filters.page - 1) * filters.limit
            page = EventPage(
                items=matched[start : start + filters.limit],
                page=filters.page,
                limit=filters.limit,
                total=len(matched),
            )
            logfire.info(
                "Visible events listed",
                viewer_id=viewer.uid,
                total=page.total,
                returned=len(page.items),
            )
            return page

    async def list_visible_events(
        self, viewer: UserContext, limit: int
    ) -> list[VisibleEvent]:
        """First ``limit`` visible events in start order, without filters."""
        page = await self.search_visible_events(
            viewer, EventListFilters(page=1, limit=limit)
        )
        return page.items

    async def create_event(self, organizer: UserContext, details: EventDetails) -> Event:
        """Create an event owned by the caller.

        Args:
            organizer: Caller creating the event
            details: Event fields

        Returns:
            Created event

        Raises:
            ValidationError: If the event ends before it starts
        """
        with logfire.span(
            "event_service.create_event", organizer_id=organizer.uid, title=details.title
        ):
            self._check_time_range(details)
            now = _utcnow()
            event = Event(
                id=EventId(uuid4().hex),
                **details.model_dump(),
                organizer_id=organizer.uid,
                organizer_name=organizer.display_name,
                search_blob=self._search_blob(details),
                invitation_counts=InvitationCounts(),
                created_at=now,
                updated_at=now,
            )

            saved = await self.event_repository.save(event)
            await self.record_activity(
                organizer,
                saved.id,
                ActivityAction.CREATED,
                {"title": saved.title, "starts_at": saved.starts_at.isoformat()},
            )
            logfire.info("Event created", event_id=saved.id, organizer_id=organizer.uid)
            return saved

    async def update_event(
        self, viewer: UserContext, event_id: EventId, details: EventDetails
    ) -> Event:
        """Replace the editable fields of an event.

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the event ends before it starts
        """
        with logfire.span(
            "event_service.update_event", event_id=event_id, viewer_id=viewer.uid
        ):
            existing = await self.get_event(event_id)
            self.ensure_organizer(viewer, existing)
            self._check_time_range(details)

            updated = existing.model_copy(
                update={
                    **details.model_dump(),
                    "search_blob": self._search_blob(details),
                    "updated_at": _utcnow(),
                }
            )
            saved = await self.event_repository.save(updated)
            await self.record_activity(
                viewer,
                event_id,
                ActivityAction.UPDATED,
                {"title": saved.title, "starts_at": saved.starts_at.isoformat()},
            )
            logfire.info("Event updated", event_id=event_id)
            return saved

    async def delete_event(self, viewer: UserContext, event_id: EventId) -> None:
        """Delete an event with its invitations and activity log.

        A ``deleted`` entry is appended afterwards so the deletion still shows
        up in the organizer's recent activity.

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is not the organizer
        """
        with logfire.span(
            "event_service.delete_event", event_id=event_id, viewer_id=viewer.uid
        ):
            existing = await self.get_event(event_id)
            self.ensure_organizer(viewer, existing)

            async def cascade() -> tuple[int, int]:
                invitations = await self.invitation_repository.delete_by_event(event_id)
                activity = await self.activity_repository.delete_by_event(event_id)
                await self.event_repository.delete(event_id)
                return invitations, activity

            invitation_count, activity_count = await self.transaction_manager.run(
                cascade
            )
            await self.record_activity(
                viewer, event_id, ActivityAction.DELETED, {"title": existing.title}
            )
            logfire.info(
                "Event deleted",
                event_id=event_id,
                invitations_deleted=invitation_count,
                activity_deleted=activity_count,
            )

    async def get_event_detail(
        self, viewer: UserContext, event_id: EventId
    ) -> EventDetail:
        """Load an event for its organizer or one of its invitees.

        Only the organizer sees the invitation list.

        Raises:
            NotFoundError: If the event does not exist
            ForbiddenError: If the caller is neither organizer nor invitee
        """
        with logfire.span(
            "event_service.get_event_detail", event_id=event_id, viewer_id=viewer.uid
        ):
            event = await self.get_event(event_id)
            is_organizer = event.organizer_id == viewer.uid

            invitations = await self.invitation_repository.find_by_event(event_id)
            viewer_invitation = next(
                (
                    inv
                    for inv in invitations
                    if inv.is_addressed_to(viewer.uid, viewer.normalized_email)
                ),
                None,
            )

            if not is_organizer and viewer_invitation is None:
                logfire.warn(
                    "Event detail access denied", event_id=event_id, viewer_id=viewer.uid
                )
                raise ForbiddenError("You do not have access to this event.")

            activity = sorted(
                await self.activity_repository.find_by_event(event_id),
                key=lambda entry: (entry.created_at, entry.id),
                reverse=True,
            )

            return EventDetail(
                event=event,
                is_organizer=is_organizer,
                viewer_invitation=viewer_invitation,
                invitations=invitations if is_organizer else [],
                activity=activity[: self.settings.event_activity_limit],
            )

    def _check_time_range(self, details: EventDetails) -> None:
        if details.ends_at <= details.starts_at:
            raise ValidationError("Event end time must be after the start time")

    def _search_blob(self, details: EventDetails) -> str:
        return build_search_blob(
            details.title, details.description, details.location, details.timezone
        )
