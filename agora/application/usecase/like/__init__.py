"""Like use cases."""

from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .like_post import LikePostRequest, LikePostResponse, LikePostUseCase

__all__ = [
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
]
