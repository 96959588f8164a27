"""Chatroom REST routes.

Every mutation is broadcast to live WebSocket clients by its use case;
these handlers only authenticate and translate the HTTP shape.
Domain errors are mapped to status codes by the app's error handlers.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.activity import (
    GetRecentActivityTotalResponse,
    GetRecentActivityTotalUseCase,
)
from agora.application.usecase.comment import (
    CommentOnPostRequest,
    CommentOnPostUseCase,
    CommentResponse,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsByPostRequest,
    GetCommentsByPostResponse,
    GetCommentsByPostUseCase,
    ReplyToCommentRequest,
    ReplyToCommentUseCase,
)
from agora.application.usecase.like import (
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
)
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostByIDRequest,
    GetPostByIDResponse,
    GetPostByIDUseCase,
    GetPostsRequest,
    GetPostsResponse,
    GetPostsUseCase,
)
from agora.config import ChatroomSettings
from agora.domain.service import JWTService
from agora.domain.value import PostType
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/chatroom", tags=["chatroom"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=10000)
    type: PostType = PostType.TEXT


class CommentAPIRequest(BaseModel):
    """API request for creating a comment or reply."""

    content: str = Field(min_length=1, max_length=10000)


# ============================================================================
# Posts
# ============================================================================


@router.post(
    "/post", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreatePostResponse:
    """Create a post and broadcast ``new_post``.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await create_post_use_case.execute(
        CreatePostRequest(author_id=user_id, content=request.content, type=request.type)
    )


@router.get("/posts", response_model=GetPostsResponse)
async def get_posts(
    get_posts_use_case: FromDishka[GetPostsUseCase],
    chatroom_settings: FromDishka[ChatroomSettings],
    page: int = Query(default=1, ge=0),
    limit: int | None = Query(default=None, ge=0, le=100),
) -> GetPostsResponse:
    """List posts, newest first, each with its full comment tree.

    ``page=0&limit=0`` returns every post.
    """
    if limit is None:
        limit = chatroom_settings.default_page_limit
    return await get_posts_use_case.execute(GetPostsRequest(page=page, limit=limit))


@router.get("/recent_post_total", response_model=GetRecentActivityTotalResponse)
async def recent_post_total(
    recent_activity_use_case: FromDishka[GetRecentActivityTotalUseCase],
) -> GetRecentActivityTotalResponse:
    """Count posts in the recent window plus their top-level comments."""
    return await recent_activity_use_case.execute()


@router.get("/post/{post_id}", response_model=GetPostByIDResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostByIDUseCase],
) -> GetPostByIDResponse:
    """Get one post with its full comment tree."""
    return await get_post_use_case.execute(GetPostByIDRequest(post_id=post_id))


@router.delete("/post/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post and its comment tree (author or admin only)."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, actor_id=user_id)
    )


@router.post("/post/{post_id}/like", response_model=LikePostResponse)
@router.post("/post/{post_id}/unlike", response_model=LikePostResponse)
async def like_post(
    post_id: str,
    like_post_use_case: FromDishka[LikePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LikePostResponse:
    """Toggle the caller's like on a post.

    ``/like`` and ``/unlike`` are the same toggle.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await like_post_use_case.execute(
        LikePostRequest(post_id=post_id, user_id=user_id)
    )


# ============================================================================
# Comments
# ============================================================================


@router.post(
    "/post/{post_id}/comment",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_post(
    post_id: str,
    request: CommentAPIRequest,
    comment_on_post_use_case: FromDishka[CommentOnPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Add a top-level comment to a post."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await comment_on_post_use_case.execute(
        CommentOnPostRequest(post_id=post_id, author_id=user_id, content=request.content)
    )


@router.post(
    "/comment/{comment_id}/comment",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: str,
    request: CommentAPIRequest,
    reply_to_comment_use_case: FromDishka[ReplyToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Reply to a comment."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await reply_to_comment_use_case.execute(
        ReplyToCommentRequest(
            comment_id=comment_id, author_id=user_id, content=request.content
        )
    )


@router.get("/post/{post_id}/comments", response_model=GetCommentsByPostResponse)
async def get_comments_by_post(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsByPostUseCase],
    chatroom_settings: FromDishka[ChatroomSettings],
    page: int = Query(default=1, ge=0),
    limit: int | None = Query(default=None, ge=0, le=100),
) -> GetCommentsByPostResponse:
    """Page through a post's top-level comments, oldest first."""
    if limit is None:
        limit = chatroom_settings.default_page_limit
    return await get_comments_use_case.execute(
        GetCommentsByPostRequest(post_id=post_id, page=page, limit=limit)
    )


@router.post("/comment/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LikeCommentResponse:
    """Toggle the caller's like on a comment."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=comment_id, user_id=user_id)
    )


@router.delete("/comment/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and its replies (author or admin only)."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, actor_id=user_id)
    )
