"""Moderation use cases."""

from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .moderate_user import (
    ModerateUserRequest,
    ModerateUserResponse,
    ModerateUserUseCase,
    ModerationAction,
)

__all__ = [
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "ModerateUserRequest",
    "ModerateUserResponse",
    "ModerateUserUseCase",
    "ModerationAction",
]
