"""User domain service."""

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.user import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user(self, user_id: UserId) -> User:
        """Get an active user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user does not exist or is deactivated
        """
        with logfire.span("user_service.get_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user or not user.active:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user
