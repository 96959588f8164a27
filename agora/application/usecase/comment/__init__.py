"""Comment use cases."""

from .comment_on_post import (
    CommentOnPostRequest,
    CommentOnPostUseCase,
    CommentResponse,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments_by_post import (
    GetCommentsByPostRequest,
    GetCommentsByPostResponse,
    GetCommentsByPostUseCase,
)
from .reply_to_comment import ReplyToCommentRequest, ReplyToCommentUseCase

__all__ = [
    "CommentOnPostRequest",
    "CommentOnPostUseCase",
    "CommentResponse",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsByPostRequest",
    "GetCommentsByPostResponse",
    "GetCommentsByPostUseCase",
    "ReplyToCommentRequest",
    "ReplyToCommentUseCase",
]
