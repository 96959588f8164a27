"""In-memory user repository for testing."""

from typing import List, Optional, Tuple

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import Role, UserId
from agora.persistence.pagination import page_window


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def list_users(
        self,
        active: Optional[bool] = None,
        role: Optional[Role] = None,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[User], int]:
        """List users by name, optionally filtered."""
        users = [
            u
            for u in self._users.values()
            if (active is None or u.active == active)
            and (role is None or u.role == role)
        ]
        users.sort(key=lambda u: u.name)
        window = page_window(page, limit)
        if window is None:
            return users, len(users)
        offset, size = window
        return users[offset : offset + size], len(users)
