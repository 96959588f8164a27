"""Persistence providers.

``PersistenceProvider`` is the swappable ``"persistence"`` component; the
PostgreSQL implementation lives here and the in-memory one in ``tests/di``.
"""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agora.config import Settings
from agora.domain.repository import (
    AnnouncementRepository,
    CommentRepository,
    CommentRepositoryFactory,
    PostRepository,
    SuggestionRepository,
    UnitOfWork,
    UserRepository,
)
from agora.persistence.database import create_engine, create_session_factory
from agora.persistence.repository import (
    PostgresAnnouncementRepository,
    PostgresCommentRepository,
    PostgresCommentRepositoryFactory,
    PostgresPostRepository,
    PostgresSuggestionRepository,
    PostgresUserRepository,
)
from agora.persistence.unit_of_work import SessionUnitOfWork
from agora.util.di.base import ProviderBase
from agora.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories, the unit of work and the fetcher's repository factory."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL through one pooled async engine per process."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_comment_repository_factory(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> CommentRepositoryFactory:
        """Each comment-tree worker reads through a session of its own."""
        return PostgresCommentRepositoryFactory(session_factory)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One session per request.

        Mutating use cases commit through the unit of work before they
        broadcast. Whatever is left pending is committed when the request
        ends cleanly and rolled back when it raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back request session", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return SessionUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_announcement_repository(
        self, session: AsyncSession
    ) -> AnnouncementRepository:
        return PostgresAnnouncementRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_suggestion_repository(self, session: AsyncSession) -> SuggestionRepository:
        return PostgresSuggestionRepository(session)
