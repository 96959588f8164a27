"""Recent activity total use case."""

from datetime import timedelta

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.config import ChatroomSettings
from agora.domain.service import CommentService, PostService
from agora.domain.value import ReferenceKind


class GetRecentActivityTotalResponse(BaseModel):
    """Recent activity counts."""

    total: int
    posts: int
    comments: int
    window_hours: int


class GetRecentActivityTotalUseCase(BaseUseCase):
    """Counts recent posts plus the top-level comments on them."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        chatroom_settings: ChatroomSettings,
    ) -> None:
        self.post_service = post_service
        self.comment_service = comment_service
        self.chatroom_settings = chatroom_settings

    async def execute(self, request: None = None) -> GetRecentActivityTotalResponse:
        hours = self.chatroom_settings.recent_window_hours
        posts = await self.post_service.list_recent_posts(timedelta(hours=hours))

        comments = 0
        for post in posts:
            # Only the total matters; ask for the smallest page
            _, total = await self.comment_service.list_comments(
                ReferenceKind.POST, post.id, 1, 1
            )
            comments += total

        return GetRecentActivityTotalResponse(
            total=len(posts) + comments,
            posts=len(posts),
            comments=comments,
            window_hours=hours,
        )
