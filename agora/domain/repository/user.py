"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from agora.domain.model.user import User
from agora.domain.value import Role, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Accounts are created elsewhere; the chatroom looks users up and
    records moderation changes (bans and roles).
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def list_users(
        self,
        active: Optional[bool] = None,
        role: Optional[Role] = None,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[User], int]:
        """List users by name, optionally filtered.

        Args:
            active: Only users with this active flag, if given
            role: Only users with this role, if given
            page: 1-based page number
            limit: Page size, 0 for everything

        Returns:
            The page of users and the total number matching
        """
        pass
