"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gather.config import Settings
from gather.interface.api.errors import register_error_handlers
from gather.interface.api.routes import (
    ai,
    analytics,
    auth,
    events,
    health,
    invitations,
)
from gather.util.di.container import close_di, create_container, setup_di
from gather.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncIterator[None]:
    yield
    await close_di(app_instance)


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Outbound generation calls (Logfire must be configured first)
    instrument_httpx()

    app_instance = FastAPI(
        title="Gather API",
        description="Backend API for Gather - invite-only event scheduling with AI insights",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    container = create_container()
    setup_di(app_instance, container)

    register_routes(app_instance)

    return app_instance


def register_routes(app_instance: FastAPI) -> None:
    """Attach routers and error handlers."""
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(events.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(analytics.router)
    app_instance.include_router(ai.router)


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
