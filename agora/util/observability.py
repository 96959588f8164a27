"""Logfire setup.

Application code logs and traces with logfire directly:

    with logfire.span("post_service.create_post", author_id=str(author.id)):
        ...
        logfire.info("Post created", post_id=str(post.id))

This module configures logfire once per process and instruments the
FastAPI app and the SQLAlchemy engine.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import ObservabilitySettings, Settings

SERVICE_NAME = "agora-api"


def _should_send(observability: ObservabilitySettings) -> bool:
    # An explicit setting wins; otherwise send only when a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for this process.

    Console output is always on and verbose in debug mode.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request and WebSocket session.

    Headers are not captured: they carry the auth cookie and bearer token.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement, tagging the SQL with the current span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
