"""Get post by ID use case."""

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.config import ChatroomSettings
from agora.domain.model import Post
from agora.domain.repository import UnitOfWork
from agora.domain.service import CommentTreeFetcher, PostService
from agora.domain.value import PostId


class GetPostByIDRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostByIDResponse(BaseModel):
    """Get post response."""

    post: Post


class GetPostByIDUseCase(BaseUseCase):
    """Use case for retrieving one post with its comment tree."""

    def __init__(
        self,
        post_service: PostService,
        comment_tree_fetcher: CommentTreeFetcher,
        chatroom_settings: ChatroomSettings,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.post_service = post_service
        self.comment_tree_fetcher = comment_tree_fetcher
        self.chatroom_settings = chatroom_settings
        self.unit_of_work = unit_of_work

    async def execute(self, request: GetPostByIDRequest) -> GetPostByIDResponse:
        """Load the post and attach its comment tree.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(
            PostId(parse_id(request.post_id, "post_id"))
        )
        await self.unit_of_work.release()

        [post] = await self.comment_tree_fetcher.fetch(
            [post], self.chatroom_settings.single_fetch_workers
        )
        return GetPostByIDResponse(post=post)
