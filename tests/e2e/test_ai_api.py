"""End-to-end tests for analytics and AI insight endpoints.

The test container's generator has nothing scripted, so every insight
comes back from its deterministic fallback.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from gather.config import Settings
from gather.interface.api.app import create_app
from gather.util.di.container import setup_di
from gather.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def auth_headers(uid: str, email: str, name: str) -> dict[str, str]:
    token = create_token(uid, email, Settings().auth, name=name)
    return {"Authorization": f"Bearer {token}"}


OLIVE = auth_headers("organizer-1", "olive@example.com", "Olive")
ALICE = auth_headers("user-1", "alice@example.com", "Alice")


def create_event(client, title: str, starts_at: datetime, hours: int = 1) -> str:
    response = client.post(
        "/events",
        json={
            "title": title,
            "description": f"{title} with the whole team",
            "location": "Dublin",
            "starts_at": starts_at.isoformat(),
            "ends_at": (starts_at + timedelta(hours=hours)).isoformat(),
            "timezone": "Europe/Dublin",
        },
        headers=OLIVE,
    )
    assert response.status_code == 201
    return response.json()["event"]["id"]


@pytest.fixture
def tomorrow():
    return (datetime.now(timezone.utc) + timedelta(days=1)).replace(
        hour=9, minute=0, second=0, microsecond=0
    )


class TestAnalyticsEndpoint:
    """Tests for GET /analytics/overview."""

    def test_overview_counts_overlaps(self, client, tomorrow):
        create_event(client, "Standup", tomorrow)
        create_event(client, "Design review", tomorrow + timedelta(minutes=30))
        create_event(client, "Retro", tomorrow + timedelta(hours=5))

        response = client.get("/analytics/overview", headers=OLIVE)

        assert response.status_code == 200
        overview = response.json()
        assert overview["upcoming_count"] == 3
        assert overview["owned_count"] == 3
        assert overview["invited_count"] == 0
        assert overview["conflict_count"] == 2
        assert [entry["title"] for entry in overview["high_risk_events"]] == [
            "Standup",
            "Design review",
        ]
        assert sum(bucket["count"] for bucket in overview["schedule_density"]) == 3

    def test_overview_requires_auth(self, client):
        assert client.get("/analytics/overview").status_code == 401


class TestInsightEndpoints:
    """Tests for the /ai routes."""

    def test_scheduling_assistant_fallback(self, client, tomorrow):
        create_event(client, "Standup", tomorrow)

        response = client.post(
            "/ai/scheduling-assistant",
            json={
                "title": "Planning",
                "location": "Dublin",
                "starts_at": (tomorrow + timedelta(minutes=15)).isoformat(),
                "ends_at": (tomorrow + timedelta(minutes=45)).isoformat(),
                "timezone": "Europe/Dublin",
                "invitee_emails": ["alice@example.com"],
            },
            headers=OLIVE,
        )

        assert response.status_code == 200
        insight = response.json()
        assert insight["source"] == "fallback"
        assert insight["conflict_count"] == 1
        assert insight["conflict_level"] == "low"
        assert insight["risky_invitees"][0]["email"] == "alice@example.com"

    def test_scheduling_assistant_rejects_inverted_draft(self, client, tomorrow):
        response = client.post(
            "/ai/scheduling-assistant",
            json={
                "title": "Planning",
                "location": "Dublin",
                "starts_at": tomorrow.isoformat(),
                "ends_at": (tomorrow - timedelta(hours=1)).isoformat(),
                "timezone": "Europe/Dublin",
            },
            headers=OLIVE,
        )

        assert response.status_code == 400
        assert "end time must be after" in response.json()["detail"][0]["msg"]

    def test_dashboard_insight_fallback(self, client):
        response = client.get("/ai/dashboard-insight", headers=OLIVE)

        assert response.status_code == 200
        insight = response.json()
        assert insight["source"] == "fallback"
        assert insight["health"] in {"strong", "steady", "watch"}
        assert 1 <= len(insight["recommendations"]) <= 3

    def test_event_recommendation_for_invitee(self, client, tomorrow):
        event_id = create_event(client, "Kickoff", tomorrow)
        client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["alice@example.com"]},
            headers=OLIVE,
        )

        response = client.get("/ai/event-recommendation", headers=ALICE)

        assert response.status_code == 200
        insight = response.json()
        assert insight["event_id"] == event_id
        assert insight["recommended_action"] == "respond"
        assert insight["headline"] == "Respond to this invitation"

    def test_event_recommendation_without_events(self, client):
        response = client.get("/ai/event-recommendation", headers=ALICE)

        assert response.status_code == 200
        assert response.json()["recommended_action"] == "review"
        assert response.json()["event_id"] is None
