"""Unit tests for ListEventsUseCase and GetEventUseCase."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from gather.application.usecase.event import (
    CreateEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
)
from gather.application.usecase.event.create_event import CreateEventRequest
from gather.application.usecase.event.get_event import GetEventRequest
from gather.application.usecase.event.list_events import ListEventsRequest
from gather.domain.error import ForbiddenError, NotFoundError
from gather.domain.model.event import EventDetails
from tests.conftest import make_viewer
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ALICE = make_viewer()


def details(title: str, days: int) -> EventDetails:
    starts_at = datetime.now(timezone.utc) + timedelta(days=days)
    return EventDetails(
        title=title,
        description=f"{title} agenda",
        location="Dublin",
        starts_at=starts_at,
        ends_at=starts_at + timedelta(hours=1),
        timezone="Europe/Dublin",
    )


class TestListEventsUseCase:
    """Tests for ListEventsUseCase."""

    @pytest.mark.asyncio
    async def test_paginates_in_start_order(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateEventUseCase)
        use_case = await unit_env.get(ListEventsUseCase)
        for title, days in [("Third", 3), ("First", 1), ("Second", 2)]:
            await create.execute(
                CreateEventRequest(viewer=ALICE, details=details(title, days))
            )

        # Act
        first_page = await use_case.execute(ListEventsRequest(viewer=ALICE, limit=2))
        second_page = await use_case.execute(
            ListEventsRequest(viewer=ALICE, limit=2, page=2)
        )

        # Assert
        assert [event.title for event in first_page.events] == ["First", "Second"]
        assert [event.title for event in second_page.events] == ["Third"]
        assert first_page.total == 3
        assert first_page.total_pages == 2
        assert all(event.is_organizer for event in first_page.events)

    @pytest.mark.asyncio
    async def test_empty_listing_has_one_page(self, unit_env):
        use_case = await unit_env.get(ListEventsUseCase)

        response = await use_case.execute(ListEventsRequest(viewer=ALICE))

        assert response.events == []
        assert response.total == 0
        assert response.total_pages == 1

    def test_limit_is_bounded(self):
        with pytest.raises(ValidationError):
            ListEventsRequest(viewer=ALICE, limit=51)
        with pytest.raises(ValidationError):
            ListEventsRequest(viewer=ALICE, page=0)


class TestGetEventUseCase:
    """Tests for GetEventUseCase."""

    @pytest.mark.asyncio
    async def test_organizer_sees_creation_activity(self, unit_env):
        create = await unit_env.get(CreateEventUseCase)
        use_case = await unit_env.get(GetEventUseCase)
        created = await create.execute(
            CreateEventRequest(viewer=ALICE, details=details("Retro", 1))
        )

        response = await use_case.execute(
            GetEventRequest(viewer=ALICE, event_id=created.event.id)
        )

        assert response.is_organizer
        assert response.viewer_invitation is None
        assert [entry.action.value for entry in response.activity] == ["created"]

    @pytest.mark.asyncio
    async def test_unknown_event(self, unit_env):
        use_case = await unit_env.get(GetEventUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetEventRequest(viewer=ALICE, event_id="missing"))

    @pytest.mark.asyncio
    async def test_uninvited_viewer(self, unit_env):
        create = await unit_env.get(CreateEventUseCase)
        use_case = await unit_env.get(GetEventUseCase)
        created = await create.execute(
            CreateEventRequest(viewer=ALICE, details=details("Retro", 1))
        )

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                GetEventRequest(
                    viewer=make_viewer("user-2", "bob@example.com", "Bob"),
                    event_id=created.event.id,
                )
            )
