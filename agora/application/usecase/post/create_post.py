"""Create post use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import NewPostEvent, Post
from agora.domain.repository import UnitOfWork
from agora.domain.service import EventPublisher, PostService, UserService
from agora.domain.value import PostType, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    content: str
    type: PostType = PostType.TEXT


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: Post


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            unit_of_work: Request transaction
            event_publisher: Broadcaster for chatroom events
        """
        self.post_service = post_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.event_publisher = event_publisher

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load the author (via UserService)
        2. Create and save the post (via PostService)
        3. Commit, then broadcast ``new_post``

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If content is empty
        """
        author = await self.user_service.get_user(
            UserId(parse_id(request.author_id, "author_id"))
        )

        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(
                author, request.content, request.type
            )
            await self.unit_of_work.commit()

            await self.event_publisher.publish(NewPostEvent(payload=post))
            return CreatePostResponse(post=post)
