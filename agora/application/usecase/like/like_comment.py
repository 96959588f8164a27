"""Like comment use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import Comment, LikeCommentEvent
from agora.domain.model.event import LikeCommentPayload
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentService, EventPublisher, UserService
from agora.domain.value import CommentId, UserId


class LikeCommentRequest(BaseModel):
    """Like comment request (the same call removes an existing like)."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    comment: Comment
    liked: bool


class LikeCommentUseCase(BaseUseCase):
    """Use case for toggling the acting user's like on a comment."""

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

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Toggle the like and broadcast ``like_comment``.

        Raises:
            NotFoundError: If the user or comment does not exist
        """
        with logfire.span(
            "like_comment.execute",
            comment_id=request.comment_id,
            user_id=request.user_id,
        ):
            user = await self.user_service.get_user(
                UserId(parse_id(request.user_id, "user_id"))
            )
            comment, liked = await self.comment_service.toggle_like(
                CommentId(parse_id(request.comment_id, "comment_id")), user.id
            )
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                LikeCommentEvent(
                    payload=LikeCommentPayload(
                        comment_id=comment.id,
                        reference=comment.reference,
                        reference_id=comment.reference_id,
                        user_id=user.id,
                        liked=liked,
                    )
                )
            )
            return LikeCommentResponse(comment=comment, liked=liked)
