#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from gather.config import Settings
from gather.util.logging import setup_logging
from gather.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision`` and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            alembic_cfg = Config(str(ALEMBIC_INI))
            command.upgrade(alembic_cfg, revision)

            logfire.info("Database migrations completed", revision=revision)
            return 0

        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container does not start with a broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
