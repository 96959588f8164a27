"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, ChatroomSettings
from agora.domain.repository import (
    AnnouncementRepository,
    CommentRepository,
    CommentRepositoryFactory,
    PostRepository,
    SuggestionRepository,
    UserRepository,
)
from agora.domain.service import (
    AnnouncementService,
    CommentService,
    CommentTreeFetcher,
    JWTService,
    ModerationService,
    PostService,
    SuggestionService,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Services that hold no session are APP-scoped so the WebSocket endpoint can
    use them outside a request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_comment_tree_fetcher(
        self,
        repository_factory: CommentRepositoryFactory,
        chatroom_settings: ChatroomSettings,
    ) -> CommentTreeFetcher:
        """Provide comment-tree fetcher (opens its own sessions per worker)."""
        return CommentTreeFetcher(
            repository_factory=repository_factory,
            listing_timeout=chatroom_settings.listing_timeout_seconds,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_moderation_service(
        self, user_repository: UserRepository
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(user_repository=user_repository)

    @provide
    def get_announcement_service(
        self, announcement_repository: AnnouncementRepository
    ) -> AnnouncementService:
        """Provide announcement domain service."""
        return AnnouncementService(announcement_repository=announcement_repository)

    @provide
    def get_suggestion_service(
        self, suggestion_repository: SuggestionRepository
    ) -> SuggestionService:
        """Provide suggestion domain service."""
        return SuggestionService(suggestion_repository=suggestion_repository)
