"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostByIDRequest, GetPostByIDResponse, GetPostByIDUseCase
from .get_posts import GetPostsRequest, GetPostsResponse, GetPostsUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostByIDRequest",
    "GetPostByIDResponse",
    "GetPostByIDUseCase",
    "GetPostsRequest",
    "GetPostsResponse",
    "GetPostsUseCase",
]
