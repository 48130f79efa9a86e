"""Unit tests for GetCurrentUserUseCase and SyncUserUseCase."""

from datetime import datetime, timedelta, timezone

import pytest

from gather.application.usecase.auth import (
    GetCurrentUserUseCase,
    SyncUserUseCase,
)
from gather.application.usecase.auth.get_current_user import GetCurrentUserRequest
from gather.application.usecase.auth.sync_user import SyncUserRequest
from gather.domain.model.event import EventDetails
from gather.domain.repository import InvitationRepository, UserRepository
from gather.domain.service import EventService, InvitationService, JWTService
from gather.domain.value import UserId
from gather.util.jwt import JWTError
from tests.conftest import make_viewer
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_first_request_creates_profile(self, unit_env):
        """Should create a profile from token claims on first sight."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        token = jwt_service.create_token(
            "user-1", "Alice@Example.com", picture="https://example.com/a.png"
        )

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.user.uid == "user-1"
        assert response.user.normalized_email == "alice@example.com"
        assert response.user.display_name == "Attendee"
        assert response.user.photo_url == "https://example.com/a.png"
        assert await user_repo.find_by_id(UserId("user-1")) is not None

    @pytest.mark.asyncio
    async def test_existing_profile_is_returned_unchanged(self, unit_env):
        """Should not overwrite a stored profile with token claims."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        sync = await unit_env.get(SyncUserUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        token = jwt_service.create_token("user-1", "alice@example.com", name="Alice")
        await sync.execute(SyncUserRequest(token=token, display_name="Alice Smith"))

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.user.display_name == "Alice Smith"

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-token"))

    @pytest.mark.asyncio
    async def test_exposes_session_cookie_name(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        assert use_case.session_cookie_name == "gather_session"


class TestSyncUserUseCase:
    """Tests for SyncUserUseCase."""

    @pytest.mark.asyncio
    async def test_sync_links_pending_invitations(self, unit_env):
        """Invitations sent before sign-up are linked to the new account."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        sync = await unit_env.get(SyncUserUseCase)
        event_service = await unit_env.get(EventService)
        invitation_service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)

        organizer = make_viewer("organizer-1", "olive@example.com", "Olive")
        starts_at = datetime.now(timezone.utc) + timedelta(days=1)
        event = await event_service.create_event(
            organizer,
            EventDetails(
                title="Board meeting",
                description="Quarterly board meeting",
                location="Dublin",
                starts_at=starts_at,
                ends_at=starts_at + timedelta(hours=1),
                timezone="Europe/Dublin",
            ),
        )
        [invitation] = await invitation_service.create_invitations(
            organizer, event.id, ["dana@example.com"]
        )
        assert invitation.invitee_id is None
        token = jwt_service.create_token("user-7", "Dana@example.com", name="Dana")

        # Act
        response = await sync.execute(SyncUserRequest(token=token))

        # Assert
        assert response.user_id == "user-7"
        assert response.display_name == "Dana"
        assert response.created_at == response.last_login_at
        [linked] = await invitation_repo.find_by_invitee(UserId("user-7"))
        assert linked.id == invitation.id
        assert linked.invitee_name == "Dana"
