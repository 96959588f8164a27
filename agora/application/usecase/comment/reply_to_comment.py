"""Reply to comment use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import NewCommentEvent
from agora.domain.model.event import NewCommentPayload
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentService, EventPublisher, UserService
from agora.domain.value import CommentId, ReferenceKind, UserId

from .comment_on_post import CommentResponse


class ReplyToCommentRequest(BaseModel):
    """Reply to comment request."""

    comment_id: str  # Parent comment UUID string
    author_id: str  # User ID from authenticated user
    content: str


class ReplyToCommentUseCase(BaseUseCase):
    """Use case for replying to an existing comment, at any depth."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.event_publisher = event_publisher

    async def execute(self, request: ReplyToCommentRequest) -> CommentResponse:
        """Create a reply and broadcast ``new_comment``.

        Raises:
            NotFoundError: If the author or parent comment does not exist
            ValidationError: If content is empty
        """
        with logfire.span(
            "reply_to_comment.execute",
            comment_id=request.comment_id,
            author_id=request.author_id,
        ):
            author = await self.user_service.get_user(
                UserId(parse_id(request.author_id, "author_id"))
            )
            parent = await self.comment_service.get_comment(
                CommentId(parse_id(request.comment_id, "comment_id"))
            )

            reply = await self.comment_service.create_comment(
                ReferenceKind.COMMENT, parent.id, author, request.content
            )
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                NewCommentEvent(
                    payload=NewCommentPayload(
                        comment=reply,
                        reference=ReferenceKind.COMMENT,
                        reference_id=parent.id,
                    )
                )
            )
            return CommentResponse(comment=reply)
