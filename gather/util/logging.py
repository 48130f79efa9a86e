"""Standard library logging setup.

Records from library loggers (uvicorn, SQLAlchemy, alembic) are forwarded to
logfire so they land next to the service spans. Call after
``configure_logfire``.
"""

import logging

import logfire

from gather.config import Settings

# Request-level chatter from the Gemini client and pool checkouts
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.pool", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging through logfire.

    Args:
        settings: Application settings; ``debug`` lowers the level to DEBUG
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
