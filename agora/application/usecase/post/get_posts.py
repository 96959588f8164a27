"""Get posts use case."""

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, count_pages
from agora.config import ChatroomSettings
from agora.domain.model import Post
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentTreeFetcher, PostService


class GetPostsRequest(BaseModel):
    """Get posts request.

    ``page == 0`` with ``limit == 0`` returns every post.
    """

    page: int = Field(default=1, ge=0)
    limit: int = Field(default=10, ge=0, le=100)


class GetPostsResponse(BaseModel):
    """One page of posts with their comment trees."""

    posts: list[Post]
    total: int
    page: int
    limit: int
    total_pages: int


class GetPostsUseCase(BaseUseCase):
    """Use case for listing posts, newest first, with full comment trees."""

    def __init__(
        self,
        post_service: PostService,
        comment_tree_fetcher: CommentTreeFetcher,
        chatroom_settings: ChatroomSettings,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize get posts use case.

        Args:
            post_service: Post domain service
            comment_tree_fetcher: Fills in comment trees
            chatroom_settings: Worker counts for the fetcher
            unit_of_work: Request transaction, released before the fetch
        """
        self.post_service = post_service
        self.comment_tree_fetcher = comment_tree_fetcher
        self.chatroom_settings = chatroom_settings
        self.unit_of_work = unit_of_work

    async def execute(self, request: GetPostsRequest) -> GetPostsResponse:
        """List a page of posts and attach their comment trees."""
        with logfire.span(
            "get_posts.execute", page=request.page, limit=request.limit
        ):
            posts, total = await self.post_service.list_posts(
                request.page, request.limit
            )
            await self.unit_of_work.release()

            workers = self.chatroom_settings.list_fetch_workers
            if workers is None:
                workers = len(posts)
            posts = await self.comment_tree_fetcher.fetch(posts, workers)

            return GetPostsResponse(
                posts=posts,
                total=total,
                page=request.page,
                limit=request.limit,
                total_pages=count_pages(total, request.limit),
            )
