"""AI insight orchestration.

Every insight is computed deterministically first. One generation call is
then attempted; its output is used only if it parses and passes the
insight's schema. Any failure returns the deterministic result unchanged.
"""

from datetime import datetime, timedelta
from math import floor
from typing import Sequence, TypeVar

import logfire
from pydantic import BaseModel, ValidationError

from gather.config import AISettings
from gather.domain.model.analytics import AnalyticsOverview
from gather.domain.model.event import VisibleEvent
from gather.domain.model.insight import (
    DashboardInsight,
    GeneratedDashboardInsight,
    GeneratedRecommendationInsight,
    GeneratedSchedulingInsight,
    RecommendationInsight,
    RiskyInvitee,
    SchedulingDraft,
    SchedulingInsight,
    SuggestedTimeWindow,
)
from gather.domain.model.user import UserContext
from gather.domain.value import (
    ConflictLevel,
    InsightSource,
    ProgramHealth,
    RecommendedAction,
)

from .base import Service
from .insight_prompts import dashboard_prompt, recommendation_prompt, scheduling_prompt
from .overlap import has_overlap
from .recommendation_service import (
    NoRecommendation,
    Recommendation,
    RecommendationService,
)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

ACTION_LABELS = {
    RecommendedAction.RESPOND: "Respond to this invitation",
    RecommendedAction.ATTEND: "Attend this event",
    RecommendedAction.PREPARE: "Prepare for this event",
    RecommendedAction.HOST: "Focus on hosting this event",
    RecommendedAction.REVIEW: "Review this event",
}

HEALTH_HEADLINES = {
    ProgramHealth.STRONG: "Event program health looks strong",
    ProgramHealth.STEADY: "Event program is steady but needs tuning",
    ProgramHealth.WATCH: "Event program needs closer operational attention",
}

AGENDA_BULLETS = [
    "Arrival and context-setting",
    "Core event discussion",
    "Action items and next steps",
]

RISKY_INVITEE_LIMIT = 5


class TextGenerator:
    """Generative text backend used for insights."""

    async def generate(self, prompt: str, *, temperature: float, top_p: float) -> str:
        """Generate a JSON text completion for a prompt.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature
            top_p: Nucleus sampling cutoff

        Returns:
            Raw model output, expected to be JSON

        Raises:
            GenerationError: If the backend is unavailable, times out or fails
        """
        raise NotImplementedError


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _percent(rate: float) -> int:
    return floor(rate * 100 + 0.5)


def conflict_level(conflict_count: int) -> ConflictLevel:
    if conflict_count >= 4:
        return ConflictLevel.HIGH
    if conflict_count >= 2:
        return ConflictLevel.MEDIUM
    return ConflictLevel.LOW


class InsightService(Service):
    """Produces scheduling, dashboard and recommendation insights."""

    def __init__(
        self,
        text_generator: TextGenerator,
        recommendation_service: RecommendationService,
        ai_settings: AISettings,
    ) -> None:
        """Initialize insight service.

        Args:
            text_generator: Generation backend; may fail at any call
            recommendation_service: Deterministic scorer behind the
                recommendation fallback
            ai_settings: Sampling parameters per insight
        """
        self.text_generator = text_generator
        self.recommendation_service = recommendation_service
        self.settings = ai_settings

    # Scheduling assistant

    def related_events(
        self, draft: SchedulingDraft, visible_events: Sequence[VisibleEvent]
    ) -> list[VisibleEvent]:
        """Visible events overlapping the draft, excluding the draft's own event."""
        return [
            event
            for event in visible_events
            if event.id != draft.event_id and has_overlap(draft, event)
        ]

    def build_scheduling_fallback(
        self, draft: SchedulingDraft, visible_events: Sequence[VisibleEvent]
    ) -> SchedulingInsight:
        """Deterministic scheduling insight for a draft event."""
        conflict_count = len(self.related_events(draft, visible_events))
        reason = (
            "This event slot already overlaps with visible schedule activity."
            if conflict_count > 0
            else "Attendance risk is low, but confirmation is still pending."
        )

        suggested_start = draft.starts_at + timedelta(hours=2)
        suggested_end = suggested_start + (draft.ends_at - draft.starts_at)

        if conflict_count == 0:
            summary = (
                "This draft looks feasible. No direct conflicts were detected "
                "against the organizer's visible event schedule, so the current "
                "time window is a reasonable starting point."
            )
        else:
            summary = (
                f"This draft overlaps with {_plural(conflict_count, 'existing event slot')}. "
                "Consider shifting the time window or reducing invitee overlap "
                "before sending invitations."
            )

        return SchedulingInsight(
            summary=summary,
            conflict_level=conflict_level(conflict_count),
            conflict_count=conflict_count,
            risky_invitees=[
                RiskyInvitee(email=email, reason=reason)
                for email in draft.invitee_emails[:RISKY_INVITEE_LIMIT]
            ],
            suggested_time_windows=[
                SuggestedTimeWindow(
                    starts_at=suggested_start,
                    ends_at=suggested_end,
                    reason="A later buffer may reduce same-day overlap and attendance fatigue.",
                )
            ],
            suggested_summary=(
                f"{draft.title} at {draft.location}. A focused event aligned to "
                f"{draft.timezone}."
            ),
            agenda_bullets=list(AGENDA_BULLETS),
            source=InsightSource.FALLBACK,
        )

    async def generate_scheduling_insight(
        self, draft: SchedulingDraft, visible_events: Sequence[VisibleEvent]
    ) -> SchedulingInsight:
        """Scheduling advice for a draft event.

        Args:
            draft: Draft event being planned
            visible_events: Organizer's visible events to check against

        Returns:
            Generated insight if it validates, otherwise the fallback
        """
        with logfire.span(
            "insight_service.generate_scheduling_insight",
            event_count=len(visible_events),
            invitee_count=len(draft.invitee_emails),
        ):
            fallback = self.build_scheduling_fallback(draft, visible_events)
            prompt = scheduling_prompt(
                draft, fallback, self.related_events(draft, visible_events)
            )

            generated = await self._generate_validated(
                "scheduling",
                prompt,
                GeneratedSchedulingInsight,
                self.settings.scheduling_temperature,
                self.settings.scheduling_top_p,
            )
            if generated is None:
                return fallback

            return SchedulingInsight(
                **generated.model_dump(), source=InsightSource.GEMINI
            )

    # Dashboard insight

    def build_dashboard_fallback(self, overview: AnalyticsOverview) -> DashboardInsight:
        """Deterministic health summary of an analytics overview."""
        pending = overview.response_count("pending")
        attending = overview.response_count("attending")
        maybe = overview.response_count("maybe")
        declined = overview.response_count("declined")
        total = sum(bucket.count for bucket in overview.response_distribution)

        attendance_rate = attending / total if total else 0.0
        pending_rate = pending / total if total else 0.0
        decline_rate = declined / total if total else 0.0
        # conflict_count counts each pair twice
        overlap_pressure = overview.conflict_count / max(overview.upcoming_count * 2, 1)
        busiest_day = max(
            overview.schedule_density, key=lambda bucket: bucket.count, default=None
        )

        score = 0
        if attendance_rate >= 0.45:
            score += 2
        elif attendance_rate >= 0.28:
            score += 1

        if pending_rate <= 0.35:
            score += 1
        elif pending_rate > 0.55:
            score -= 1

        if overlap_pressure <= 0.16:
            score += 1
        elif overlap_pressure > 0.35:
            score -= 2
        elif overlap_pressure > 0.22:
            score -= 1

        if decline_rate > 0.28:
            score -= 1

        if overview.upcoming_count >= 4:
            score += 1

        if score >= 3:
            health = ProgramHealth.STRONG
        elif score >= 1:
            health = ProgramHealth.STEADY
        else:
            health = ProgramHealth.WATCH
        headline = HEALTH_HEADLINES[health]

        strengths = [
            (
                f"{_plural(overview.upcoming_count, 'upcoming event')} keep the "
                "near-term pipeline active."
                if overview.upcoming_count > 0
                else "The workspace is quiet enough to reset priorities before the "
                "next event cycle."
            ),
            (
                f"{_percent(attendance_rate)}% of visible responses are confirmed "
                "attending, which is a solid engagement baseline."
                if attendance_rate >= 0.3
                else "There is still room to convert interest, but the current "
                "response mix gives enough signal to prioritize follow-up."
            ),
        ]
        if busiest_day:
            strengths.append(
                f"{busiest_day.label} is the busiest visible day with "
                f"{_plural(busiest_day.count, 'scheduled event')}."
            )

        risks = [
            (
                f"Overlap pressure is elevated at {_percent(overlap_pressure)}%, "
                "which can reduce attendance quality."
                if overlap_pressure > 0.22
                else "Overlap pressure is currently contained, but it still needs "
                "monitoring as the schedule fills up."
            ),
            (
                f"{_plural(pending, 'invitation')} are still pending, which slows "
                "planning confidence."
                if pending_rate > 0.35
                else "Pending replies are under control, but conversion speed will "
                "still affect confidence in headcount."
            ),
        ]
        if decline_rate > 0.2:
            risks.append(
                f"{_plural(declined, 'decline')} suggest that some sessions may need "
                "sharper timing or audience targeting."
            )

        recommendations = [
            (
                "Follow up on pending invitations first so the attendance forecast "
                "becomes more reliable."
                if pending > 0
                else "Keep response momentum high by confirming attendees early and "
                "locking agendas sooner."
            ),
            (
                "Reduce overlap by staggering high-risk sessions or consolidating "
                "adjacent meetings."
                if overview.conflict_count > 0
                else "Protect the current low-overlap window by spacing new events "
                "away from busy slots."
            ),
            (
                "Clarify value, agenda, and expected outcomes for maybes to improve "
                "conversion into confirmed attendance."
                if maybe > attending
                else "Use confirmed attendance data to prioritize the events with "
                "the strongest traction."
            ),
        ]

        return DashboardInsight(
            headline=headline,
            summary=(
                f"{headline}. There are {overview.upcoming_count} upcoming visible "
                f"events, {attending} confirmed responses, {pending} pending replies, "
                f"and {_plural(overview.conflict_count, 'overlap signal')} in the "
                "current pipeline."
            ),
            health=health,
            strengths=strengths[:3],
            risks=risks[:3],
            recommendations=recommendations[:3],
            source=InsightSource.FALLBACK,
        )

    async def generate_dashboard_insight(
        self, overview: AnalyticsOverview
    ) -> DashboardInsight:
        """Business health insight for the dashboard.

        Args:
            overview: Viewer's analytics overview

        Returns:
            Generated insight if it validates, otherwise the fallback
        """
        with logfire.span("insight_service.generate_dashboard_insight"):
            fallback = self.build_dashboard_fallback(overview)

            generated = await self._generate_validated(
                "dashboard",
                dashboard_prompt(overview, fallback),
                GeneratedDashboardInsight,
                self.settings.dashboard_temperature,
                self.settings.dashboard_top_p,
            )
            if generated is None:
                return fallback

            return DashboardInsight(
                **generated.model_dump(), source=InsightSource.GEMINI
            )

    # Event recommendation

    def build_recommendation_fallback(
        self, result: Recommendation | NoRecommendation
    ) -> RecommendationInsight:
        """Reshape a scorer result into a recommendation insight."""
        if isinstance(result, NoRecommendation):
            return RecommendationInsight(
                headline=result.headline,
                reason=result.reason,
                why_now=result.why_now,
                recommended_action=RecommendedAction.REVIEW,
                source=InsightSource.FALLBACK,
            )

        winner = result.winner
        return RecommendationInsight(
            headline=ACTION_LABELS[winner.action],
            reason=" ".join(winner.reasons[:3]),
            why_now=winner.why_now,
            recommended_action=winner.action,
            event_id=winner.event.id,
            event_title=winner.event.title,
            starts_at=winner.event.starts_at,
            location=winner.event.location,
            source=InsightSource.FALLBACK,
        )

    async def generate_recommendation_insight(
        self,
        viewer: UserContext,
        visible_events: Sequence[VisibleEvent],
        now: datetime | None = None,
    ) -> RecommendationInsight:
        """Recommend the viewer's next event.

        The generator is not called when the scorer finds no candidate. A
        generated pick is only accepted if its event id is one of the scored
        candidates; title, start and location are then taken from that event.

        Args:
            viewer: Current caller
            visible_events: Viewer's visible events in start order
            now: Reference instant, defaults to the current time

        Returns:
            Generated recommendation if it validates, otherwise the fallback
        """
        with logfire.span(
            "insight_service.generate_recommendation_insight",
            viewer_id=viewer.uid,
            event_count=len(visible_events),
        ):
            result = self.recommendation_service.recommend(visible_events, now=now)
            fallback = self.build_recommendation_fallback(result)
            if isinstance(result, NoRecommendation):
                return fallback

            generated = await self._generate_validated(
                "recommendation",
                recommendation_prompt(viewer, visible_events, result.candidates, fallback),
                GeneratedRecommendationInsight,
                self.settings.recommendation_temperature,
                self.settings.recommendation_top_p,
            )
            if generated is None:
                return fallback

            matched = next(
                (
                    candidate.event
                    for candidate in result.candidates
                    if candidate.event.id == generated.event_id
                ),
                None,
            )
            if matched is None:
                logfire.warn(
                    "Generated recommendation rejected, using fallback",
                    insight="recommendation",
                    reason="unknown_event",
                    event_id=generated.event_id,
                )
                return fallback

            return RecommendationInsight(
                headline=generated.headline,
                reason=generated.reason,
                why_now=generated.why_now,
                recommended_action=generated.recommended_action,
                event_id=matched.id,
                event_title=matched.title,
                starts_at=matched.starts_at,
                location=matched.location,
                source=InsightSource.GEMINI,
            )

    async def _generate_validated(
        self,
        insight: str,
        prompt: str,
        schema: type[SchemaT],
        temperature: float,
        top_p: float,
    ) -> SchemaT | None:
        """Single generation attempt, validated strictly against ``schema``.

        Returns None on any failure; never retries.
        """
        try:
            text = await self.text_generator.generate(
                prompt, temperature=temperature, top_p=top_p
            )
        except Exception as e:
            logfire.warn(
                "Insight generation failed, using fallback",
                insight=insight,
                reason="generation_failed",
                error=str(e),
            )
            return None

        text = (text or "").strip()
        if not text:
            logfire.warn(
                "Insight generation returned no text, using fallback",
                insight=insight,
                reason="empty_response",
            )
            return None

        try:
            validated = schema.model_validate_json(text, strict=True)
        except ValidationError as e:
            logfire.warn(
                "Generated insight failed validation, using fallback",
                insight=insight,
                reason="schema_mismatch",
                error_count=e.error_count(),
            )
            return None

        logfire.info("Generated insight accepted", insight=insight)
        return validated
