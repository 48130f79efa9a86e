"""Recommendation scoring for the viewer's next event."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Sequence

import logfire

from gather.domain.model.event import VisibleEvent
from gather.domain.value import RecommendedAction, RsvpStatus

from .base import Service
from .conflict_service import ConflictService


@dataclass
class RecommendationCandidate:
    """One upcoming event scored for the viewer."""

    event: VisibleEvent
    score: int
    action: RecommendedAction
    reasons: list[str]
    why_now: str
    overlap_count: int
    pending_count: int


@dataclass
class Recommendation:
    """Winning candidate plus every candidate that was scored."""

    winner: RecommendationCandidate
    candidates: list[RecommendationCandidate]


@dataclass(frozen=True)
class NoRecommendation:
    """Explanation returned when nothing can be recommended."""

    headline: str
    reason: str
    why_now: str


NO_UPCOMING_EVENTS = NoRecommendation(
    headline="No upcoming event stands out yet",
    reason=(
        "There are no upcoming visible events to recommend right now, so the "
        "best next step is to create a new session or wait for more invitations."
    ),
    why_now=(
        "The recommendation engine only prioritizes upcoming events that the "
        "signed-in user can actually access."
    ),
)

NO_CLEAR_CANDIDATE = NoRecommendation(
    headline="No clear event recommendation is available",
    reason=(
        "The current visible event set does not produce a strong candidate yet, "
        "so the best step is to review your schedule manually."
    ),
    why_now=(
        "There is not enough upcoming signal to confidently prioritize one event "
        "over the others."
    ),
)


@dataclass
class AffinitySignals:
    """How the viewer has responded to past locations and organizers.

    Keys are lowercased.
    """

    positive_locations: Counter = field(default_factory=Counter)
    positive_organizers: Counter = field(default_factory=Counter)
    negative_locations: Counter = field(default_factory=Counter)
    negative_organizers: Counter = field(default_factory=Counter)

    @classmethod
    def from_events(cls, events: Sequence[VisibleEvent]) -> "AffinitySignals":
        signals = cls()
        for event in events:
            location = event.location.lower()
            organizer = event.organizer_name.lower()
            if event.viewer_rsvp_status in (RsvpStatus.ATTENDING, RsvpStatus.MAYBE):
                signals.positive_locations[location] += 1
                signals.positive_organizers[organizer] += 1
            elif event.viewer_rsvp_status == RsvpStatus.DECLINED:
                signals.negative_locations[location] += 1
                signals.negative_organizers[organizer] += 1
        return signals


def top_signals(counter: Counter, limit: int = 3) -> list[tuple[str, int]]:
    """Strongest entries of a signal counter; ties keep insertion order."""
    return counter.most_common(limit)


def urgency_bonus(hours_until_start: float) -> int:
    if hours_until_start <= 24:
        return 16
    if hours_until_start <= 72:
        return 10
    if hours_until_start <= 168:
        return 5
    return 1


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class RecommendationService(Service):
    """Ranks the viewer's upcoming events and picks one to act on."""

    def __init__(self, conflict_service: ConflictService) -> None:
        """Initialize recommendation service.

        Args:
            conflict_service: Used to count overlaps among upcoming events
        """
        self.conflict_service = conflict_service

    def recommend(
        self,
        visible_events: Sequence[VisibleEvent],
        now: datetime | None = None,
    ) -> Recommendation | NoRecommendation:
        """Score every viable upcoming event and return the best one.

        Declined events are never recommended but still count as overlaps for
        the others. The highest score wins; on a tie the candidate that comes
        first in ``visible_events`` is kept.

        Args:
            visible_events: Events visible to the viewer, in start order
            now: Reference instant, defaults to the current time

        Returns:
            The winning recommendation, or a NoRecommendation explaining why
            nothing was picked
        """
        now = now or datetime.now(timezone.utc)

        with logfire.span(
            "recommendation_service.recommend", event_count=len(visible_events)
        ):
            upcoming = [event for event in visible_events if event.is_upcoming(now)]
            if not upcoming:
                logfire.info("No upcoming events to recommend")
                return NO_UPCOMING_EVENTS

            signals = AffinitySignals.from_events(visible_events)
            overlaps = self.conflict_service.overlap_counts(upcoming)

            candidates = [
                self._score(event, overlaps.get(event.id, 0), signals, now)
                for event in upcoming
                if event.viewer_rsvp_status != RsvpStatus.DECLINED
            ]

            winner: RecommendationCandidate | None = None
            for candidate in candidates:
                if winner is None or candidate.score > winner.score:
                    winner = candidate

            if winner is None:
                logfire.info("No viable recommendation candidate")
                return NO_CLEAR_CANDIDATE

            logfire.info(
                "Recommendation selected",
                event_id=winner.event.id,
                score=winner.score,
                action=winner.action.value,
                candidate_count=len(candidates),
            )
            return Recommendation(winner=winner, candidates=candidates)

    def _score(
        self,
        event: VisibleEvent,
        overlap_count: int,
        signals: AffinitySignals,
        now: datetime,
    ) -> RecommendationCandidate:
        pending_count = event.invitation_counts.invited
        maybe_count = event.invitation_counts.maybe
        hours_until_start = max(0.0, (event.starts_at - now).total_seconds() / 3600)

        location = event.location.lower()
        organizer = event.organizer_name.lower()
        location_positive = signals.positive_locations[location]
        organizer_positive = signals.positive_organizers[organizer]

        score = (
            urgency_bonus(hours_until_start)
            + 6 * location_positive
            + 5 * organizer_positive
            - 4 * signals.negative_locations[location]
            - 4 * signals.negative_organizers[organizer]
        )
        reasons: list[str] = []

        if event.is_organizer:
            action = (
                RecommendedAction.HOST
                if pending_count > 0 or overlap_count > 0
                else RecommendedAction.PREPARE
            )
            score += 26 + 7 * pending_count + 3 * maybe_count + 6 * overlap_count
            reasons.append(
                "You are the organizer, so your decisions directly affect attendance quality."
            )
            if pending_count > 0:
                reasons.append(
                    f"{_plural(pending_count, 'invitation')} are still waiting for a reply."
                )
                why_now = (
                    "Unanswered invitations are still affecting attendance "
                    "confidence for this hosted event."
                )
            elif overlap_count > 0:
                reasons.append(
                    f"It overlaps with {overlap_count} other visible upcoming "
                    f"{'event' if overlap_count == 1 else 'events'}."
                )
                why_now = "The overlap risk should be managed before the event gets closer."
            else:
                why_now = (
                    "This hosted event is approaching soon and is the most "
                    "important one to prepare well."
                )
        else:
            if event.viewer_rsvp_status == RsvpStatus.INVITED:
                action = RecommendedAction.RESPOND
                score += 38 + 2 * max(0, 4 - overlap_count)
                reasons.append("You have not responded to this invitation yet.")
                why_now = (
                    "A pending RSVP is still open, so this is the cleanest next "
                    "decision to make."
                )
            elif event.viewer_rsvp_status == RsvpStatus.MAYBE:
                action = RecommendedAction.REVIEW
                score += 28 + 2 * max(0, 3 - overlap_count)
                reasons.append(
                    "You marked this as maybe, so it is a good candidate for a final decision."
                )
                why_now = (
                    "A tentative RSVP has more value when it is clarified before "
                    "the event gets closer."
                )
            else:
                action = RecommendedAction.PREPARE
                score += 22
                reasons.append(
                    "You are already attending, so this is the next event to prepare for."
                )
                why_now = (
                    "It is one of your closest confirmed commitments in the "
                    "visible schedule."
                )

            if location_positive > 0:
                reasons.append(
                    f"You have responded positively to similar events in {event.location}."
                )
            if organizer_positive > 0:
                reasons.append(
                    f"You usually engage well with invitations from {event.organizer_name}."
                )
            if overlap_count > 0:
                reasons.append(
                    f"It currently overlaps with {overlap_count} other visible "
                    f"{'event' if overlap_count == 1 else 'events'}."
                )

        return RecommendationCandidate(
            event=event,
            score=score,
            action=action,
            reasons=reasons,
            why_now=why_now,
            overlap_count=overlap_count,
            pending_count=pending_count,
        )
