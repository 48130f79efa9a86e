#!/usr/bin/env python3
"""Serve the Gather API with uvicorn.

Logfire is configured before the app module is imported, so failures while
building the app or its container are reported too.
"""

import sys

import logfire
import uvicorn

from gather.config import Settings
from gather.util.logging import setup_logging
from gather.util.observability import configure_logfire

APP_PATH = "gather.interface.api.app:app"


def main() -> int:
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Gather API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        # log_config=None keeps uvicorn on the root handlers set up above
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",
            port=settings.port,
            log_config=None,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "Gather API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
