#!/usr/bin/env python3
"""Upgrade the chatroom schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]   # defaults to "head"
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from agora.config import Settings
from agora.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container never starts on a broken schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
