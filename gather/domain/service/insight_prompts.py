"""Prompt builders for generated insights.

Each prompt embeds the deterministic fallback so the model can stay close
to it when unsure.
"""

from collections import Counter
from typing import Sequence

from gather.domain.model.analytics import AnalyticsOverview
from gather.domain.model.event import VisibleEvent
from gather.domain.model.insight import (
    DashboardInsight,
    RecommendationInsight,
    SchedulingDraft,
    SchedulingInsight,
)
from gather.domain.model.user import UserContext
from gather.domain.value import RsvpStatus

from .recommendation_service import RecommendationCandidate, top_signals


def _lines(items: list[str], empty: str) -> str:
    return "\n".join(items) if items else empty


def scheduling_prompt(
    draft: SchedulingDraft,
    fallback: SchedulingInsight,
    related_events: Sequence[VisibleEvent],
) -> str:
    related = [
        f"- {event.title} | {event.starts_at.isoformat()} -> "
        f"{event.ends_at.isoformat()} | organizer={event.organizer_name}"
        for event in related_events
    ]
    return f"""You are an event scheduling assistant.
Return strict JSON with keys:
summary, conflict_level, conflict_count, risky_invitees, suggested_time_windows, suggested_summary, agenda_bullets.

Constraints:
- summary max 700 chars
- conflict_level one of low, medium, high
- conflict_count must be an integer
- risky_invitees is an array of {{ email, reason }}
- suggested_time_windows is an array of {{ starts_at, ends_at, reason }} in ISO format
- agenda_bullets should be short, practical bullets

Draft event:
title={draft.title}
location={draft.location}
starts_at={draft.starts_at.isoformat()}
ends_at={draft.ends_at.isoformat()}
timezone={draft.timezone}
description={draft.description or 'N/A'}
invitee_emails={', '.join(draft.invitee_emails) or 'N/A'}

Relevant existing events:
{_lines(related, 'none')}

If unsure, stay close to this fallback analysis:
{fallback.model_dump_json(exclude={'source'})}
"""


def dashboard_prompt(overview: AnalyticsOverview, fallback: DashboardInsight) -> str:
    responses = [
        f"- {bucket.status}: {bucket.count}" for bucket in overview.response_distribution
    ]
    density = [f"- {bucket.label}: {bucket.count}" for bucket in overview.schedule_density]
    risks = [
        f"- {entry.title} | {entry.starts_at.isoformat()} | {entry.location} | "
        f"{entry.risk_label.value}"
        for entry in overview.high_risk_events
    ]
    return f"""You are an operations analyst for an event scheduling business.
Return strict JSON with keys:
headline, summary, health, strengths, risks, recommendations.

Constraints:
- headline max 140 chars
- summary max 900 chars
- health one of strong, steady, watch
- strengths: 1 to 4 concise bullets
- risks: 1 to 4 concise bullets
- recommendations: 2 to 4 practical actions
- no markdown

Analytics snapshot:
upcoming_count={overview.upcoming_count}
owned_count={overview.owned_count}
invited_count={overview.invited_count}
conflict_count={overview.conflict_count}

Response distribution:
{_lines(responses, '- none')}

Schedule density:
{_lines(density, '- none')}

High risk events:
{_lines(risks, '- none')}

Use an executive but practical tone. Focus on operational health, event demand, attendance confidence, and scheduling discipline.

If you are uncertain, stay close to this fallback:
{fallback.model_dump_json(exclude={'source'})}"""


def recommendation_prompt(
    viewer: UserContext,
    visible_events: Sequence[VisibleEvent],
    candidates: Sequence[RecommendationCandidate],
    fallback: RecommendationInsight,
) -> str:
    locations: Counter = Counter()
    organizers: Counter = Counter()
    for event in visible_events:
        if event.viewer_rsvp_status in (RsvpStatus.ATTENDING, RsvpStatus.MAYBE):
            locations[event.location] += 1
            organizers[event.organizer_name] += 1

    def signals(counter: Counter) -> str:
        return (
            ", ".join(f"{name} ({count})" for name, count in top_signals(counter))
            or "none"
        )

    candidate_lines = []
    for candidate in candidates:
        event = candidate.event
        status = event.viewer_rsvp_status.value if event.viewer_rsvp_status else "none"
        counts = event.invitation_counts
        candidate_lines.append(
            f"- id={event.id} | title={event.title} | "
            f"starts_at={event.starts_at.isoformat()} | location={event.location} | "
            f"organizer={event.organizer_name} | is_organizer={str(event.is_organizer).lower()} | "
            f"viewer_rsvp_status={status} | invited={counts.invited} | "
            f"attending={counts.attending} | maybe={counts.maybe} | "
            f"overlaps={candidate.overlap_count}"
        )

    return f"""You are an event recommendation assistant for the signed-in user.
Choose one visible upcoming event to recommend next and explain why.
Return strict JSON with keys:
headline, reason, why_now, recommended_action, event_id, event_title, starts_at, location.

Constraints:
- recommended_action one of respond, attend, prepare, host, review
- reason max 500 chars
- why_now max 320 chars
- pick only from the provided candidate ids
- do not recommend declined events
- no markdown

Signed-in user:
name={viewer.display_name}
email={viewer.email}

Positive response signals:
locations={signals(locations)}
organizers={signals(organizers)}

Candidate events:
{_lines(candidate_lines, '- none')}

If unsure, stay close to this fallback:
{fallback.model_dump_json(exclude={'source'})}"""
