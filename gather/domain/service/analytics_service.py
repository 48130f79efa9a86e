"""Analytics aggregation for the dashboard."""

from datetime import datetime, timezone
from typing import Sequence

import logfire

from gather.config import AnalyticsSettings
from gather.domain.model.activity import ActivityLogEntry
from gather.domain.model.analytics import (
    AnalyticsOverview,
    DensityBucket,
    ResponseBucket,
)
from gather.domain.model.event import VisibleEvent
from gather.domain.model.invitation import Invitation
from gather.domain.model.user import UserContext
from gather.domain.repository import ActivityRepository
from gather.domain.value import RsvpStatus, UserId

from .base import Service
from .conflict_service import ConflictService
from .event_service import EventService
from .invitation_service import InvitationService
from .overlap import sort_by_start

RESPONSE_BUCKETS = (
    ("pending", RsvpStatus.INVITED),
    ("attending", RsvpStatus.ATTENDING),
    ("maybe", RsvpStatus.MAYBE),
    ("declined", RsvpStatus.DECLINED),
)


def day_label(instant: datetime) -> str:
    """Short UTC day label, e.g. ``"Jan 5"``."""
    instant = instant.astimezone(timezone.utc)
    return f"{instant.strftime('%b')} {instant.day}"


class AnalyticsService(Service):
    """Builds the per-viewer analytics overview."""

    def __init__(
        self,
        event_service: EventService,
        invitation_service: InvitationService,
        activity_repository: ActivityRepository,
        conflict_service: ConflictService,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize analytics service.

        Args:
            event_service: Loads the viewer's visible events
            invitation_service: Loads invitations received by the viewer
            activity_repository: Activity log repository
            conflict_service: Overlap scan over upcoming events
            analytics_settings: Window sizes and display caps
        """
        self.event_service = event_service
        self.invitation_service = invitation_service
        self.activity_repository = activity_repository
        self.conflict_service = conflict_service
        self.settings = analytics_settings

    async def get_overview(
        self, viewer: UserContext, now: datetime | None = None
    ) -> AnalyticsOverview:
        """Load the viewer's events, invitations and activity, then aggregate.

        Args:
            viewer: Current caller
            now: Reference instant, defaults to the current time

        Returns:
            Analytics overview for the viewer
        """
        now = now or datetime.now(timezone.utc)

        with logfire.span("analytics_service.get_overview", viewer_id=viewer.uid):
            visible_events = await self.event_service.list_visible_events(
                viewer, limit=self.settings.visible_event_limit
            )
            invitations = await self.invitation_service.list_for_invitee(viewer)

            by_id: dict[str, ActivityLogEntry] = {}
            for entry in await self.activity_repository.find_by_events(
                [event.id for event in visible_events]
            ):
                by_id[entry.id] = entry
            for entry in await self.activity_repository.find_by_actor(viewer.uid):
                by_id[entry.id] = entry

            return self.build_overview(
                viewer.uid, visible_events, invitations, list(by_id.values()), now
            )

    def build_overview(
        self,
        viewer_id: UserId,
        visible_events: Sequence[VisibleEvent],
        invitations: Sequence[Invitation],
        activity: Sequence[ActivityLogEntry],
        now: datetime,
    ) -> AnalyticsOverview:
        """Aggregate already-loaded state into an overview.

        Pure: the same inputs and ``now`` always give an equal overview.

        Args:
            viewer_id: Viewer the overview is built for
            visible_events: Events the viewer organizes or is invited to
            invitations: Invitations received by the viewer
            activity: Candidate activity entries; filtered to what the viewer
                may see
            now: Reference instant for "upcoming"

        Returns:
            Analytics overview
        """
        upcoming = sort_by_start(
            event for event in visible_events if event.is_upcoming(now)
        )
        owned_count = sum(1 for event in visible_events if event.is_organizer)

        response_distribution = [
            ResponseBucket(
                status=label,
                count=sum(1 for inv in invitations if inv.rsvp_status == status),
            )
            for label, status in RESPONSE_BUCKETS
        ]

        density: dict[str, int] = {}
        for event in upcoming[: self.settings.density_window]:
            label = day_label(event.starts_at)
            density[label] = density.get(label, 0) + 1

        conflicts = self.conflict_service.compute_conflicts(
            upcoming, high_risk_limit=self.settings.high_risk_limit
        )

        visible_ids = {event.id for event in visible_events}
        seen: set[str] = set()
        recent: list[ActivityLogEntry] = []
        for entry in activity:
            if entry.id in seen:
                continue
            if entry.actor_id == viewer_id or entry.event_id in visible_ids:
                seen.add(entry.id)
                recent.append(entry)
        recent.sort(key=lambda entry: (entry.created_at, entry.id), reverse=True)

        overview = AnalyticsOverview(
            upcoming_count=len(upcoming),
            owned_count=owned_count,
            invited_count=len(visible_events) - owned_count,
            conflict_count=conflicts.conflict_count,
            response_distribution=response_distribution,
            schedule_density=[
                DensityBucket(label=label, count=count)
                for label, count in density.items()
            ],
            high_risk_events=conflicts.high_risk_events,
            recent_activity=recent[: self.settings.recent_activity_limit],
        )

        logfire.info(
            "Analytics overview built",
            viewer_id=viewer_id,
            upcoming_count=overview.upcoming_count,
            conflict_count=overview.conflict_count,
        )
        return overview
