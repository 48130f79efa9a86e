"""Observability configuration using Logfire.

Services log through logfire directly:

    import logfire

    logfire.info("Invitations created", event_id=event.id, count=3)

    with logfire.span("invitation_service.update_rsvp", invitation_id=invitation_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gather.config import Settings

SERVICE_NAME = "gather-backend"

# Path and query parameters copied onto request spans
TRACED_PARAMS = ("event_id", "invitation_id", "scope", "page", "limit")

# Attribute names redacted before export, on top of logfire's defaults
SCRUB_PATTERNS = ["api_key", "gather_session", "invitee_emails", "emails"]


def should_send(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, then token presence."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        ai_enabled=bool(settings.ai.api_key),
        git_sha=settings.git_sha,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    values = attributes.get("values") or {}
    traced = {name: values[name] for name in TRACED_PARAMS if name in values}
    traced["path"] = request.url.path
    if attributes.get("errors"):
        traced["validation_errors"] = len(attributes["errors"])
    return traced


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Headers are not captured since they carry identity tokens.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound generation calls."""
    logfire.instrument_httpx()
