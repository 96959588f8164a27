"""Delete post use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import DeletePostEvent
from agora.domain.model.event import DeletePostPayload
from agora.domain.repository import UnitOfWork
from agora.domain.service import EventPublisher, PostService, UserService
from agora.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    comments_removed: int


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post together with its comment tree."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        event_publisher: EventPublisher,
    ) -> None:
        """Initialize delete post use case.

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

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the actor or post does not exist
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "delete_post.execute", post_id=request.post_id, actor_id=request.actor_id
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            post = await self.post_service.get_post(
                PostId(parse_id(request.post_id, "post_id"))
            )

            removed = await self.post_service.delete_post(post, actor)
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                DeletePostEvent(payload=DeletePostPayload(post_id=post.id))
            )
            return DeletePostResponse(post_id=str(post.id), comments_removed=removed)
