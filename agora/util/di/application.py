"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.activity import GetRecentActivityTotalUseCase
from agora.application.usecase.announcement import (
    CreateAnnouncementUseCase,
    DeleteAnnouncementUseCase,
    GetAnnouncementsUseCase,
    GetAnnouncementUseCase,
    UpdateAnnouncementUseCase,
)
from agora.application.usecase.comment import (
    CommentOnPostUseCase,
    DeleteCommentUseCase,
    GetCommentsByPostUseCase,
    ReplyToCommentUseCase,
)
from agora.application.usecase.like import LikeCommentUseCase, LikePostUseCase
from agora.application.usecase.moderation import ListUsersUseCase, ModerateUserUseCase
from agora.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostByIDUseCase,
    GetPostsUseCase,
)
from agora.application.usecase.suggestion import (
    CreateSuggestionUseCase,
    GetSuggestionsUseCase,
    GetSuggestionUseCase,
    UpdateSuggestionStatusUseCase,
)
from agora.config import ChatroomSettings
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    AnnouncementService,
    CommentService,
    CommentTreeFetcher,
    EventPublisher,
    ModerationService,
    PostService,
    SuggestionService,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    @provide
    def get_get_posts_use_case(
        self,
        post_service: PostService,
        comment_tree_fetcher: CommentTreeFetcher,
        chatroom_settings: ChatroomSettings,
        unit_of_work: UnitOfWork,
    ) -> GetPostsUseCase:
        """Provide get posts use case."""
        return GetPostsUseCase(
            post_service=post_service,
            comment_tree_fetcher=comment_tree_fetcher,
            chatroom_settings=chatroom_settings,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_get_post_by_id_use_case(
        self,
        post_service: PostService,
        comment_tree_fetcher: CommentTreeFetcher,
        chatroom_settings: ChatroomSettings,
        unit_of_work: UnitOfWork,
    ) -> GetPostByIDUseCase:
        """Provide get post by ID use case."""
        return GetPostByIDUseCase(
            post_service=post_service,
            comment_tree_fetcher=comment_tree_fetcher,
            chatroom_settings=chatroom_settings,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    @provide
    def get_recent_activity_total_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        chatroom_settings: ChatroomSettings,
    ) -> GetRecentActivityTotalUseCase:
        """Provide recent activity total use case."""
        return GetRecentActivityTotalUseCase(
            post_service=post_service,
            comment_service=comment_service,
            chatroom_settings=chatroom_settings,
        )

    # Comment use cases
    @provide
    def get_comment_on_post_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> CommentOnPostUseCase:
        """Provide comment on post use case."""
        return CommentOnPostUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    @provide
    def get_reply_to_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> ReplyToCommentUseCase:
        """Provide reply to comment use case."""
        return ReplyToCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    @provide
    def get_get_comments_by_post_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> GetCommentsByPostUseCase:
        """Provide get comments by post use case."""
        return GetCommentsByPostUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    # Like use cases
    @provide
    def get_like_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_tree_fetcher: CommentTreeFetcher,
        chatroom_settings: ChatroomSettings,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(
            post_service=post_service,
            user_service=user_service,
            comment_tree_fetcher=comment_tree_fetcher,
            chatroom_settings=chatroom_settings,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    @provide
    def get_like_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
            event_publisher=event_publisher,
        )

    # Moderation use cases
    @provide
    def get_moderate_user_use_case(
        self,
        moderation_service: ModerationService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> ModerateUserUseCase:
        """Provide moderate user use case."""
        return ModerateUserUseCase(
            moderation_service=moderation_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_list_users_use_case(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            moderation_service=moderation_service, user_service=user_service
        )

    # Announcement use cases
    @provide
    def get_create_announcement_use_case(
        self,
        announcement_service: AnnouncementService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> CreateAnnouncementUseCase:
        """Provide create announcement use case."""
        return CreateAnnouncementUseCase(
            announcement_service=announcement_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_get_announcement_use_case(
        self, announcement_service: AnnouncementService, user_service: UserService
    ) -> GetAnnouncementUseCase:
        """Provide get announcement use case."""
        return GetAnnouncementUseCase(
            announcement_service=announcement_service, user_service=user_service
        )

    @provide
    def get_get_announcements_use_case(
        self, announcement_service: AnnouncementService, user_service: UserService
    ) -> GetAnnouncementsUseCase:
        """Provide get announcements use case."""
        return GetAnnouncementsUseCase(
            announcement_service=announcement_service, user_service=user_service
        )

    @provide
    def get_update_announcement_use_case(
        self,
        announcement_service: AnnouncementService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> UpdateAnnouncementUseCase:
        """Provide update announcement use case."""
        return UpdateAnnouncementUseCase(
            announcement_service=announcement_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_delete_announcement_use_case(
        self,
        announcement_service: AnnouncementService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> DeleteAnnouncementUseCase:
        """Provide delete announcement use case."""
        return DeleteAnnouncementUseCase(
            announcement_service=announcement_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )

    # Suggestion use cases
    @provide
    def get_create_suggestion_use_case(
        self,
        suggestion_service: SuggestionService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> CreateSuggestionUseCase:
        """Provide create suggestion use case."""
        return CreateSuggestionUseCase(
            suggestion_service=suggestion_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_get_suggestion_use_case(
        self, suggestion_service: SuggestionService, user_service: UserService
    ) -> GetSuggestionUseCase:
        """Provide get suggestion use case."""
        return GetSuggestionUseCase(
            suggestion_service=suggestion_service, user_service=user_service
        )

    @provide
    def get_get_suggestions_use_case(
        self, suggestion_service: SuggestionService, user_service: UserService
    ) -> GetSuggestionsUseCase:
        """Provide get suggestions use case."""
        return GetSuggestionsUseCase(
            suggestion_service=suggestion_service, user_service=user_service
        )

    @provide
    def get_update_suggestion_status_use_case(
        self,
        suggestion_service: SuggestionService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> UpdateSuggestionStatusUseCase:
        """Provide update suggestion status use case."""
        return UpdateSuggestionStatusUseCase(
            suggestion_service=suggestion_service,
            user_service=user_service,
            unit_of_work=unit_of_work,
        )
