"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agora.config import Settings
from agora.interface.api.routes import (
    admin,
    chatroom,
    health,
    info,
    realtime,
    suggestions,
)
from agora.interface.error import register_error_handlers
from agora.util.di.container import create_container, setup_di
from agora.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the DI container on shutdown (live sockets, DB engine)."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Agora API",
        description="Backend API for Agora - a community chatroom with threaded comments and live updates",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(chatroom.router)
    app_instance.include_router(realtime.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(info.router)
    app_instance.include_router(suggestions.router)

    return app_instance
