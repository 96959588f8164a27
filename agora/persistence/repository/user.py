"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Tuple

import logfire
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import Role, UserId
from agora.persistence.error import store_errors
from agora.persistence.mappers import row_to_user, user_to_dict
from agora.persistence.pagination import page_window
from agora.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with store_errors("user_repository.find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if not row:
            logfire.debug("User not found", user_id=str(user_id))
            return None
        return row_to_user(row._asdict())

    async def save(self, user: User) -> User:
        """Insert a user or update the existing record."""
        with store_errors("user_repository.save"):
            values = user_to_dict(user)
            stmt = insert(users_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
        return user

    async def list_users(
        self,
        active: Optional[bool] = None,
        role: Optional[Role] = None,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[User], int]:
        """List users by name, optionally filtered."""
        with store_errors("user_repository.list_users"):
            conditions = []
            if active is not None:
                conditions.append(users_table.c.active == active)
            if role is not None:
                conditions.append(users_table.c.role == role.value)

            count_stmt = (
                select(func.count()).select_from(users_table).where(*conditions)
            )
            total = (await self.session.execute(count_stmt)).scalar() or 0

            stmt = select(users_table).where(*conditions).order_by(users_table.c.name)
            window = page_window(page, limit)
            if window is not None:
                offset, size = window
                stmt = stmt.limit(size).offset(offset)
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        return [row_to_user(row._asdict()) for row in rows], total
