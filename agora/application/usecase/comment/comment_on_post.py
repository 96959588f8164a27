"""Comment on post use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import Comment, NewCommentEvent
from agora.domain.model.event import NewCommentPayload
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    CommentService,
    EventPublisher,
    PostService,
    UserService,
)
from agora.domain.value import PostId, ReferenceKind, UserId


class CommentOnPostRequest(BaseModel):
    """Comment on post request."""

    post_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str


class CommentResponse(BaseModel):
    """A newly created comment or reply."""

    comment: Comment


class CommentOnPostUseCase(BaseUseCase):
    """Use case for adding a top-level comment to a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize comment on post use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            unit_of_work: Request transaction
            event_publisher: Broadcaster for chatroom events
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.event_publisher = event_publisher

    async def execute(self, request: CommentOnPostRequest) -> CommentResponse:
        """Execute comment on post flow.

        Steps:
        1. Load the author and verify the post exists
        2. Create the comment referencing the post
        3. Commit, then broadcast ``new_comment``

        Raises:
            NotFoundError: If the author or post does not exist
            ValidationError: If content is empty
        """
        with logfire.span(
            "comment_on_post.execute",
            post_id=request.post_id,
            author_id=request.author_id,
        ):
            author = await self.user_service.get_user(
                UserId(parse_id(request.author_id, "author_id"))
            )
            post = await self.post_service.get_post(
                PostId(parse_id(request.post_id, "post_id"))
            )

            comment = await self.comment_service.create_comment(
                ReferenceKind.POST, post.id, author, request.content
            )
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                NewCommentEvent(
                    payload=NewCommentPayload(
                        comment=comment,
                        reference=ReferenceKind.POST,
                        reference_id=post.id,
                    )
                )
            )
            return CommentResponse(comment=comment)
