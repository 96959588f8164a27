"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import DeleteCommentEvent
from agora.domain.model.event import DeleteCommentPayload
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentService, EventPublisher, UserService
from agora.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    replies_removed: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            unit_of_work: Request transaction
            event_publisher: Broadcaster for chatroom events
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.event_publisher = event_publisher

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        The comment is loaded first so the broadcast can name its parent.

        Raises:
            NotFoundError: If the actor or comment does not exist
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "delete_comment.execute",
            comment_id=request.comment_id,
            actor_id=request.actor_id,
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            comment = await self.comment_service.get_comment(
                CommentId(parse_id(request.comment_id, "comment_id"))
            )

            removed = await self.comment_service.delete_comment(comment, actor)
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                DeleteCommentEvent(
                    payload=DeleteCommentPayload(
                        comment_id=comment.id,
                        reference=comment.reference,
                        reference_id=comment.reference_id,
                    )
                )
            )
            return DeleteCommentResponse(
                comment_id=str(comment.id), replies_removed=removed
            )
