"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from gather.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Wires PostgreSQL persistence and the Gemini REST client. Nothing is
    instantiated until first use, so building it needs no database.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    logfire.info(
        "DI container created",
        providers=[type(provider).__name__ for provider in providers],
    )
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app, replacing any previous one."""
    setup_dishka(container, app)


async def close_di(app: FastAPI) -> None:
    """Close the app's container, disposing the database engine."""
    container: AsyncContainer = app.state.dishka_container
    await container.close()
    logfire.info("DI container closed")
