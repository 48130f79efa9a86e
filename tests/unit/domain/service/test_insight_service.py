"""Unit tests for InsightService.

Every generated insight must either validate or be replaced by its
deterministic fallback, so most tests compare against ``build_*_fallback``.
"""

import json
from datetime import timedelta

import pytest

from gather.adapter.error import GenerationError
from gather.adapter.gemini import MockGeminiTextGenerator
from gather.config import AISettings
from gather.domain.model.analytics import AnalyticsOverview, DensityBucket, ResponseBucket
from gather.domain.model.insight import SchedulingDraft
from gather.domain.service import ConflictService, InsightService, RecommendationService
from gather.domain.value import (
    ConflictLevel,
    InsightSource,
    InvitationCounts,
    ProgramHealth,
    RecommendedAction,
    RsvpStatus,
)
from tests.conftest import NOW, make_viewer, make_visible_event


def build_service(generator: MockGeminiTextGenerator) -> InsightService:
    return InsightService(
        generator, RecommendationService(ConflictService()), AISettings()
    )


def make_draft(invitees: list[str] | None = None) -> SchedulingDraft:
    return SchedulingDraft(
        title="Launch sync",
        location="Dublin",
        starts_at=NOW + timedelta(hours=2),
        ends_at=NOW + timedelta(hours=3),
        timezone="Europe/Dublin",
        invitee_emails=invitees or [],
    )


def make_overview(
    upcoming: int = 0,
    conflicts: int = 0,
    pending: int = 0,
    attending: int = 0,
    maybe: int = 0,
    declined: int = 0,
    density: list[DensityBucket] | None = None,
) -> AnalyticsOverview:
    return AnalyticsOverview(
        upcoming_count=upcoming,
        owned_count=upcoming,
        invited_count=0,
        conflict_count=conflicts,
        response_distribution=[
            ResponseBucket(status="pending", count=pending),
            ResponseBucket(status="attending", count=attending),
            ResponseBucket(status="maybe", count=maybe),
            ResponseBucket(status="declined", count=declined),
        ],
        schedule_density=density or [],
        high_risk_events=[],
        recent_activity=[],
    )


def recommendation_events():
    invited = make_visible_event("invited", 2, rsvp=RsvpStatus.INVITED)
    hosted = make_visible_event(
        "hosted", 240, organizer_id="user-1", counts=InvitationCounts(invited=3)
    )
    return [invited, hosted]


class TestSchedulingInsight:
    """Tests for the scheduling assistant."""

    def test_fallback_without_conflicts(self):
        service = build_service(MockGeminiTextGenerator())
        draft = make_draft([f"guest{i}@example.com" for i in range(7)])

        insight = service.build_scheduling_fallback(draft, [])

        assert insight.conflict_level == ConflictLevel.LOW
        assert insight.conflict_count == 0
        assert insight.summary.startswith("This draft looks feasible.")
        assert len(insight.risky_invitees) == 5
        assert insight.risky_invitees[0].reason == (
            "Attendance risk is low, but confirmation is still pending."
        )
        [window] = insight.suggested_time_windows
        assert window.starts_at == draft.starts_at + timedelta(hours=2)
        assert window.ends_at - window.starts_at == timedelta(hours=1)
        assert insight.suggested_summary == (
            "Launch sync at Dublin. A focused event aligned to Europe/Dublin."
        )
        assert insight.source == InsightSource.FALLBACK

    def test_fallback_counts_overlaps_but_not_the_draft_itself(self):
        service = build_service(MockGeminiTextGenerator())
        events = [
            make_visible_event("a", 2.5),
            make_visible_event("b", 1.5),
            make_visible_event("own", 2),
            make_visible_event("later", 3.5),
        ]
        draft = make_draft().model_copy(update={"event_id": "own"})

        insight = service.build_scheduling_fallback(draft, events)

        assert insight.conflict_count == 2
        assert insight.conflict_level == ConflictLevel.MEDIUM
        assert "overlaps with 2 existing event slots" in insight.summary

    @pytest.mark.asyncio
    async def test_generator_failure_returns_fallback(self):
        generator = MockGeminiTextGenerator()
        generator.queue(GenerationError("Gemini request timed out"))
        service = build_service(generator)
        draft = make_draft(["bob@example.com"])

        insight = await service.generate_scheduling_insight(draft, [])

        assert insight == service.build_scheduling_fallback(draft, [])
        assert len(generator.calls) == 1
        assert generator.calls[0]["temperature"] == 0.2
        assert generator.calls[0]["top_p"] == 0.8

    @pytest.mark.asyncio
    async def test_schema_mismatch_returns_fallback(self):
        """A numeric string is not coerced into conflict_count."""
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "summary": "Looks fine overall for this slot.",
                    "conflict_level": "low",
                    "conflict_count": "0",
                    "risky_invitees": [],
                    "suggested_time_windows": [],
                }
            )
        )
        service = build_service(generator)
        draft = make_draft()

        insight = await service.generate_scheduling_insight(draft, [])

        assert insight == service.build_scheduling_fallback(draft, [])

    @pytest.mark.asyncio
    async def test_malformed_json_returns_fallback(self):
        generator = MockGeminiTextGenerator(default_response="not json")
        service = build_service(generator)
        draft = make_draft()

        insight = await service.generate_scheduling_insight(draft, [])

        assert insight.source == InsightSource.FALLBACK

    @pytest.mark.asyncio
    async def test_valid_generation_is_used(self):
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "summary": "Slot is clear; send invitations today.",
                    "conflict_level": "low",
                    "conflict_count": 0,
                    "risky_invitees": [
                        {"email": "bob@example.com", "reason": "Often travels"}
                    ],
                    "suggested_time_windows": [
                        {
                            "starts_at": "2026-03-02T13:00:00Z",
                            "ends_at": "2026-03-02T14:00:00Z",
                            "reason": "After lunch",
                        }
                    ],
                    "agenda_bullets": ["Welcome", "Demo", "Next steps"],
                }
            )
        )
        service = build_service(generator)

        insight = await service.generate_scheduling_insight(make_draft(), [])

        assert insight.source == InsightSource.GEMINI
        assert insight.summary == "Slot is clear; send invitations today."
        assert insight.risky_invitees[0].email == "bob@example.com"
        assert insight.agenda_bullets == ["Welcome", "Demo", "Next steps"]


    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "window",
        [
            {
                "starts_at": "2026-03-02T13:00:00",
                "ends_at": "2026-03-02T14:00:00",
                "reason": "No offset given",
            },
            {
                "starts_at": "2026-03-02T13:00:00Z",
                "ends_at": "2026-03-02T12:00:00Z",
                "reason": "Ends before it starts",
            },
        ],
    )
    async def test_invalid_suggested_window_returns_fallback(self, window):
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "summary": "Slot is clear; send invitations today.",
                    "conflict_level": "low",
                    "conflict_count": 0,
                    "risky_invitees": [],
                    "suggested_time_windows": [window],
                }
            )
        )
        service = build_service(generator)
        draft = make_draft()

        insight = await service.generate_scheduling_insight(draft, [])

        assert insight == service.build_scheduling_fallback(draft, [])


class TestDashboardInsight:
    """Tests for the dashboard insight."""

    def test_empty_workspace_is_steady(self):
        service = build_service(MockGeminiTextGenerator())

        insight = service.build_dashboard_fallback(make_overview())

        assert insight.health == ProgramHealth.STEADY
        assert insight.headline == "Event program is steady but needs tuning"
        assert insight.strengths[0].startswith("The workspace is quiet")
        assert insight.recommendations[0].startswith("Keep response momentum")
        assert len(insight.risks) == 2

    def test_strong_program(self):
        service = build_service(MockGeminiTextGenerator())
        overview = make_overview(
            upcoming=4,
            pending=2,
            attending=6,
            maybe=1,
            declined=1,
            density=[
                DensityBucket(label="Mar 2", count=1),
                DensityBucket(label="Mar 3", count=3),
            ],
        )

        insight = service.build_dashboard_fallback(overview)

        assert insight.health == ProgramHealth.STRONG
        assert insight.strengths == [
            "4 upcoming events keep the near-term pipeline active.",
            "60% of visible responses are confirmed attending, which is a solid "
            "engagement baseline.",
            "Mar 3 is the busiest visible day with 3 scheduled events.",
        ]
        assert insight.summary.startswith("Event program health looks strong. ")

    def test_overlapping_pending_program_needs_watching(self):
        service = build_service(MockGeminiTextGenerator())
        overview = make_overview(
            upcoming=2, conflicts=4, pending=8, attending=1, declined=1
        )

        insight = service.build_dashboard_fallback(overview)

        assert insight.health == ProgramHealth.WATCH
        assert insight.risks[0] == (
            "Overlap pressure is elevated at 100%, which can reduce attendance quality."
        )
        assert insight.risks[1].startswith("8 invitations are still pending")
        assert insight.recommendations[1].startswith("Reduce overlap")

    @pytest.mark.asyncio
    async def test_generated_bullets_out_of_bounds_fall_back(self):
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "headline": "Healthy",
                    "summary": "All good",
                    "health": "strong",
                    "strengths": ["a"],
                    "risks": ["b"],
                    "recommendations": ["only one"],
                }
            )
        )
        service = build_service(generator)
        overview = make_overview(upcoming=1)

        insight = await service.generate_dashboard_insight(overview)

        assert insight == service.build_dashboard_fallback(overview)

    @pytest.mark.asyncio
    async def test_generated_dashboard_is_used(self):
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "headline": "Healthy pipeline",
                    "summary": "Attendance is strong and overlaps are rare.",
                    "health": "strong",
                    "strengths": ["High attendance"],
                    "risks": ["Few maybes"],
                    "recommendations": ["Keep cadence", "Confirm agendas"],
                }
            )
        )
        service = build_service(generator)

        insight = await service.generate_dashboard_insight(make_overview(upcoming=1))

        assert insight.source == InsightSource.GEMINI
        assert insight.health == ProgramHealth.STRONG
        assert generator.calls[0]["temperature"] == 0.3


class TestRecommendationInsight:
    """Tests for the event recommendation."""

    @pytest.mark.asyncio
    async def test_no_candidates_skips_generation(self):
        generator = MockGeminiTextGenerator(default_response="{}")
        service = build_service(generator)

        insight = await service.generate_recommendation_insight(
            make_viewer(), [], now=NOW
        )

        assert generator.calls == []
        assert insight.recommended_action == RecommendedAction.REVIEW
        assert insight.event_id is None
        assert insight.source == InsightSource.FALLBACK

    @pytest.mark.asyncio
    async def test_fallback_describes_winner(self):
        generator = MockGeminiTextGenerator()
        generator.queue(GenerationError("Gemini API key is not configured"))
        service = build_service(generator)

        insight = await service.generate_recommendation_insight(
            make_viewer(), recommendation_events(), now=NOW
        )

        assert insight.source == InsightSource.FALLBACK
        assert insight.event_id == "invited"
        assert insight.recommended_action == RecommendedAction.RESPOND
        assert insight.headline == "Respond to this invitation"
        assert insight.location == "Dublin"

    @pytest.mark.asyncio
    async def test_unknown_event_id_falls_back(self):
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "headline": "Go to this",
                    "reason": "Because",
                    "why_now": "Soon",
                    "recommended_action": "attend",
                    "event_id": "made-up",
                }
            )
        )
        service = build_service(generator)
        events = recommendation_events()

        insight = await service.generate_recommendation_insight(
            make_viewer(), events, now=NOW
        )

        fallback = service.build_recommendation_fallback(
            service.recommendation_service.recommend(events, now=NOW)
        )
        assert insight == fallback

    @pytest.mark.asyncio
    async def test_generated_pick_uses_candidate_fields(self):
        """Title, start and location come from the stored event."""
        generator = MockGeminiTextGenerator()
        generator.queue(
            json.dumps(
                {
                    "headline": "Host your workshop",
                    "reason": "Three invitees still need a nudge.",
                    "why_now": "Pending replies slow planning.",
                    "recommended_action": "host",
                    "event_id": "hosted",
                    "event_title": "Something else",
                    "location": "Mars",
                }
            )
        )
        service = build_service(generator)
        events = recommendation_events()

        insight = await service.generate_recommendation_insight(
            make_viewer(), events, now=NOW
        )

        assert insight.source == InsightSource.GEMINI
        assert insight.event_id == "hosted"
        assert insight.event_title == events[1].title
        assert insight.location == "Dublin"
        assert insight.starts_at == events[1].starts_at
        assert insight.recommended_action == RecommendedAction.HOST
