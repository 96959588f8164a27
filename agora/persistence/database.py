"""Async PostgreSQL engine and sessions.

Besides the request session, a post listing holds one extra session per
comment-tree worker while it runs, so ``pool_size + max_overflow`` bounds
how many listings can build trees at the same time.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine from ``settings.database``."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions that keep loaded rows usable after commit.

    Repositories flush explicitly; nothing is flushed behind their back.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
