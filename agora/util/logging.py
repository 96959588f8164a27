"""Logging configuration for the application.

Application code logs through logfire; this only sets levels for the
standard-library loggers used by uvicorn, SQLAlchemy and friends.
"""

import logging
import sys

from agora.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard-library logging.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Third-party loggers stay quiet unless debugging
    for name in ("httpx", "httpcore", "asyncpg"):
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger("agora").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
