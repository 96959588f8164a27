"""Like post use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.config import ChatroomSettings
from agora.domain.model import LikePostEvent, Post
from agora.domain.model.event import LikePostPayload
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    CommentTreeFetcher,
    EventPublisher,
    PostService,
    UserService,
)
from agora.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like post request (the same call removes an existing like)."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikePostResponse(BaseModel):
    """Like post response."""

    post: Post
    liked: bool


class LikePostUseCase(BaseUseCase):
    """Use case for toggling the acting user's like on a post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        comment_tree_fetcher: CommentTreeFetcher,
        chatroom_settings: ChatroomSettings,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            comment_tree_fetcher: Fills in the post's comment tree
            chatroom_settings: Worker count for the fetcher
            unit_of_work: Request transaction
            event_publisher: Broadcaster for chatroom events
        """
        self.post_service = post_service
        self.user_service = user_service
        self.comment_tree_fetcher = comment_tree_fetcher
        self.chatroom_settings = chatroom_settings
        self.unit_of_work = unit_of_work
        self.event_publisher = event_publisher

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like post flow.

        Steps:
        1. Load the acting user
        2. Toggle the like in one repository call (never from a prior read)
        3. Commit, attach the comment tree, broadcast ``like_post``

        Raises:
            NotFoundError: If the user or post does not exist
        """
        with logfire.span(
            "like_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            user = await self.user_service.get_user(
                UserId(parse_id(request.user_id, "user_id"))
            )
            post, liked = await self.post_service.toggle_like(
                PostId(parse_id(request.post_id, "post_id")), user.id
            )
            await self.unit_of_work.commit()

            [post] = await self.comment_tree_fetcher.fetch(
                [post], self.chatroom_settings.single_fetch_workers
            )

            await self.event_publisher.publish(
                LikePostEvent(
                    payload=LikePostPayload(
                        post=post, post_id=post.id, user_id=user.id, liked=liked
                    )
                )
            )
            return LikePostResponse(post=post, liked=liked)
