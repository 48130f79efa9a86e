"""Unit tests for RecommendationService."""

from collections import Counter

from gather.domain.service import (
    ConflictService,
    NoRecommendation,
    Recommendation,
    RecommendationService,
    top_signals,
)
from gather.domain.service.recommendation_service import (
    NO_CLEAR_CANDIDATE,
    NO_UPCOMING_EVENTS,
    urgency_bonus,
)
from gather.domain.value import InvitationCounts, RecommendedAction, RsvpStatus
from tests.conftest import NOW, make_visible_event


def recommend(events):
    return RecommendationService(ConflictService()).recommend(events, now=NOW)


class TestRecommend:
    """Tests for recommend."""

    def test_no_upcoming_events(self):
        past = make_visible_event("past", -5, rsvp=RsvpStatus.ATTENDING)

        assert recommend([]) == NO_UPCOMING_EVENTS
        assert recommend([past]) == NO_UPCOMING_EVENTS

    def test_only_declined_events(self):
        declined = make_visible_event("declined", 5, rsvp=RsvpStatus.DECLINED)

        assert recommend([declined]) == NO_CLEAR_CANDIDATE

    def test_pending_invitation_soon_beats_hosted_event_later(self):
        invited = make_visible_event("invited", 2, rsvp=RsvpStatus.INVITED)
        hosted = make_visible_event(
            "hosted",
            240,
            organizer_id="user-1",
            counts=InvitationCounts(invited=3),
        )

        result = recommend([invited, hosted])

        assert isinstance(result, Recommendation)
        assert result.winner.event.id == "invited"
        assert result.winner.action == RecommendedAction.RESPOND
        # 16 urgency + 38 respond base + 2 * 4 without overlaps
        assert result.winner.score == 62
        hosted_candidate = next(c for c in result.candidates if c.event.id == "hosted")
        # 1 urgency + 26 host base + 7 * 3 pending
        assert hosted_candidate.score == 48
        assert hosted_candidate.action == RecommendedAction.HOST
        assert hosted_candidate.pending_count == 3

    def test_declined_event_still_counts_as_overlap(self):
        attending = make_visible_event("attending", 30, rsvp=RsvpStatus.ATTENDING)
        declined = make_visible_event(
            "declined", 30.5, rsvp=RsvpStatus.DECLINED, location="Cork"
        )

        result = recommend([attending, declined])

        assert isinstance(result, Recommendation)
        assert [c.event.id for c in result.candidates] == ["attending"]
        assert result.winner.overlap_count == 1
        assert result.winner.reasons[-1] == (
            "It currently overlaps with 1 other visible event."
        )

    def test_tie_keeps_first_event(self):
        first = make_visible_event("first", 100, rsvp=RsvpStatus.ATTENDING, location="Cork")
        second = make_visible_event(
            "second", 120, rsvp=RsvpStatus.ATTENDING, location="Cork"
        )

        result = recommend([first, second])

        assert isinstance(result, Recommendation)
        assert result.candidates[0].score == result.candidates[1].score
        assert result.winner.event.id == "first"

    def test_hosted_event_without_pending_or_overlap_is_prepare(self):
        hosted = make_visible_event("hosted", 10, organizer_id="user-1")

        result = recommend([hosted])

        assert isinstance(result, Recommendation)
        assert result.winner.action == RecommendedAction.PREPARE
        assert result.winner.why_now == (
            "This hosted event is approaching soon and is the most important "
            "one to prepare well."
        )

    def test_maybe_reasons_include_affinity(self):
        past_yes = make_visible_event(
            "past", -48, rsvp=RsvpStatus.ATTENDING, location="Galway"
        )
        maybe = make_visible_event("maybe", 50, rsvp=RsvpStatus.MAYBE, location="galway")

        result = recommend([past_yes, maybe])

        assert isinstance(result, Recommendation)
        winner = result.winner
        assert winner.action == RecommendedAction.REVIEW
        assert winner.reasons == [
            "You marked this as maybe, so it is a good candidate for a final decision.",
            "You have responded positively to similar events in galway.",
            "You usually engage well with invitations from Olive.",
        ]
        # 10 urgency + 6 * 2 location + 5 * 2 organizer + 28 + 2 * 3
        assert winner.score == 10 + 12 + 10 + 28 + 6

    def test_does_not_raise_for_any_status_mix(self):
        events = [
            make_visible_event(f"e{i}", i * 7, rsvp=status)
            for i, status in enumerate([None, *RsvpStatus])
        ]
        result = recommend(events)
        assert isinstance(result, (Recommendation, NoRecommendation))


class TestHelpers:
    """Tests for scoring helpers."""

    def test_urgency_bonus_steps(self):
        assert urgency_bonus(0) == 16
        assert urgency_bonus(24) == 16
        assert urgency_bonus(24.5) == 10
        assert urgency_bonus(72) == 10
        assert urgency_bonus(168) == 5
        assert urgency_bonus(169) == 1

    def test_top_signals_keeps_insertion_order_on_ties(self):
        counter = Counter({"cork": 1, "dublin": 2, "galway": 1, "sligo": 1})
        assert top_signals(counter) == [("dublin", 2), ("cork", 1), ("galway", 1)]
