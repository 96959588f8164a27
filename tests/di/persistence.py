"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agora.domain.repository import (
    AnnouncementRepository,
    CommentRepository,
    CommentRepositoryFactory,
    PostRepository,
    SuggestionRepository,
    UnitOfWork,
    UserRepository,
)
from agora.persistence.repository.inmemory import (
    InMemoryAnnouncementRepository,
    InMemoryCommentRepository,
    InMemoryCommentRepositoryFactory,
    InMemoryPostRepository,
    InMemorySuggestionRepository,
    InMemoryUserRepository,
)
from agora.persistence.unit_of_work import InMemoryUnitOfWork
from agora.util.di import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that every request against one container
    sees the same data, the way a database would. Test isolation comes from
    the harness building a fresh container per test.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_announcement_repository(self) -> AnnouncementRepository:
        """Provide in-memory announcement repository."""
        return InMemoryAnnouncementRepository()

    @provide(scope=Scope.APP)
    def get_suggestion_repository(self) -> SuggestionRepository:
        """Provide in-memory suggestion repository."""
        return InMemorySuggestionRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository_factory(
        self, comment_repository: CommentRepository
    ) -> CommentRepositoryFactory:
        """Hand the shared in-memory repository to every fetcher worker."""
        return InMemoryCommentRepositoryFactory(comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide a commit-counting unit of work."""
        return InMemoryUnitOfWork()
