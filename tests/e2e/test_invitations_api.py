"""End-to-end tests for invitation and RSVP endpoints."""

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
BOB = auth_headers("user-2", "bob@example.com", "Bob")


@pytest.fixture
def event_id(client):
    """Event organized by Olive."""
    starts_at = datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=2)
    response = client.post(
        "/events",
        json={
            "title": "Product launch",
            "description": "Launch party for the new release",
            "location": "Dublin",
            "starts_at": starts_at.isoformat(),
            "ends_at": (starts_at + timedelta(hours=2)).isoformat(),
            "timezone": "Europe/Dublin",
        },
        headers=OLIVE,
    )
    assert response.status_code == 201
    return response.json()["event"]["id"]


class TestInvitationEndpoints:
    """End-to-end tests for inviting and responding."""

    def test_invite_and_rsvp_flow(self, client, event_id):
        """Invitee sees the event and their response updates the counts."""
        # Act
        invited = client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["Alice@Example.com", "alice@example.com", "bob@example.com"]},
            headers=OLIVE,
        )

        # Assert
        assert invited.status_code == 201
        assert invited.json()["created_count"] == 2

        listing = client.get("/invitations", headers=ALICE)
        assert listing.status_code == 200
        [invitation] = listing.json()["invitations"]
        assert invitation["event_id"] == event_id
        assert invitation["rsvp_status"] == "invited"

        events = client.get("/events", headers=ALICE).json()["events"]
        assert [event["id"] for event in events] == [event_id]
        assert events[0]["viewer_rsvp_status"] == "invited"
        assert events[0]["is_organizer"] is False

        rsvp = client.post(
            f"/invitations/{invitation['id']}/rsvp",
            json={"rsvp_status": "attending"},
            headers=ALICE,
        )
        assert rsvp.status_code == 200
        assert rsvp.json()["invitation"]["rsvp_status"] == "attending"

        detail = client.get(f"/events/{event_id}", headers=OLIVE).json()
        assert detail["event"]["invitation_counts"] == {
            "invited": 1,
            "attending": 1,
            "maybe": 0,
            "declined": 0,
        }
        assert len(detail["invitations"]) == 2

        invitee_view = client.get(f"/events/{event_id}", headers=ALICE).json()
        assert invitee_view["invitations"] == []
        assert invitee_view["viewer_invitation"]["id"] == invitation["id"]

    def test_reinviting_skips_existing(self, client, event_id):
        client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["alice@example.com"]},
            headers=OLIVE,
        )

        response = client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["alice@example.com"]},
            headers=OLIVE,
        )

        assert response.status_code == 201
        assert response.json()["created_count"] == 0

    def test_only_organizer_can_invite(self, client, event_id):
        response = client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["carol@example.com"]},
            headers=ALICE,
        )

        assert response.status_code == 403

    def test_invalid_email_is_rejected(self, client, event_id):
        response = client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["not-an-email"]},
            headers=OLIVE,
        )

        assert response.status_code == 400

    def test_too_many_emails_is_rejected(self, client, event_id):
        response = client.post(
            f"/events/{event_id}/invitations",
            json={"emails": [f"guest{i}@example.com" for i in range(31)]},
            headers=OLIVE,
        )

        assert response.status_code == 400

    def test_uninvited_cannot_view_event(self, client, event_id):
        assert client.get(f"/events/{event_id}", headers=BOB).status_code == 403

    def test_rsvp_by_other_user_is_forbidden(self, client, event_id):
        client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["alice@example.com"]},
            headers=OLIVE,
        )
        [invitation] = client.get("/invitations", headers=ALICE).json()["invitations"]

        response = client.post(
            f"/invitations/{invitation['id']}/rsvp",
            json={"rsvp_status": "declined"},
            headers=BOB,
        )

        assert response.status_code == 403

    def test_rsvp_status_invited_is_rejected(self, client, event_id):
        client.post(
            f"/events/{event_id}/invitations",
            json={"emails": ["alice@example.com"]},
            headers=OLIVE,
        )
        [invitation] = client.get("/invitations", headers=ALICE).json()["invitations"]

        response = client.post(
            f"/invitations/{invitation['id']}/rsvp",
            json={"rsvp_status": "invited"},
            headers=ALICE,
        )

        assert response.status_code == 400

    def test_rsvp_unknown_invitation(self, client):
        response = client.post(
            "/invitations/missing/rsvp",
            json={"rsvp_status": "maybe"},
            headers=ALICE,
        )

        assert response.status_code == 404
