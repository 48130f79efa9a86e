"""Fixture factory for service and use case tests."""

import pytest_asyncio

from gather.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Return a fixture yielding a request-scoped container.

    Each test gets a fresh container, and with it an empty in-memory store
    and a fresh scripted text generator. Declare the fixture at module level::

        unit_env = create_env_fixture()

        async def test_something(unit_env):
            service = await unit_env.get(EventService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
