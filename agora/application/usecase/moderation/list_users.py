"""List users use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, count_pages, parse_id
from agora.domain.model import User
from agora.domain.service import ModerationService, UserService
from agora.domain.value import Role, UserId


class ListUsersRequest(BaseModel):
    """List users request."""

    actor_id: str  # User ID from authenticated user
    banned: Optional[bool] = None
    role: Optional[Role] = None
    page: int = Field(default=1, ge=0)
    limit: int = Field(default=20, ge=0, le=100)


class ListUsersResponse(BaseModel):
    """One page of users."""

    users: list[User]
    total: int
    page: int
    limit: int
    total_pages: int


class ListUsersUseCase(BaseUseCase):
    """Use case for the moderation console's user listing."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """List users matching the filters."""
        with logfire.span("list_users.execute", actor_id=request.actor_id):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            users, total = await self.moderation_service.list_users(
                actor,
                banned=request.banned,
                role=request.role,
                page=request.page,
                limit=request.limit,
            )
            return ListUsersResponse(
                users=users,
                total=total,
                page=request.page,
                limit=request.limit,
                total_pages=count_pages(total, request.limit),
            )
