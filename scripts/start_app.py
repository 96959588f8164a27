#!/usr/bin/env python3
"""Run the Agora API under uvicorn.

Logging is configured before the app is built so that failures while wiring
the container or connecting to the database still reach logfire.
"""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.interface.api.app import create_app
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Agora API",
        environment=settings.environment,
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )

    try:
        uvicorn.run(
            create_app(),
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Agora API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
