"""Get comments by post use case."""

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, count_pages, parse_id
from agora.domain.model import Comment
from agora.domain.service import CommentService, PostService
from agora.domain.value import PostId, ReferenceKind


class GetCommentsByPostRequest(BaseModel):
    """Get comments by post request."""

    post_id: str  # UUID string
    page: int = Field(default=1, ge=0)
    limit: int = Field(default=10, ge=0, le=100)


class GetCommentsByPostResponse(BaseModel):
    """One page of a post's top-level comments (replies not attached)."""

    comments: list[Comment]
    total: int
    page: int
    limit: int
    total_pages: int


class GetCommentsByPostUseCase(BaseUseCase):
    """Use case for paging through a post's top-level comments, oldest first."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(
        self, request: GetCommentsByPostRequest
    ) -> GetCommentsByPostResponse:
        """List one page of top-level comments.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(
            PostId(parse_id(request.post_id, "post_id"))
        )
        comments, total = await self.comment_service.list_comments(
            ReferenceKind.POST, post.id, request.page, request.limit
        )
        return GetCommentsByPostResponse(
            comments=comments,
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=count_pages(total, request.limit),
        )
