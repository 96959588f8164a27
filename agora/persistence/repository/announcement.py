"""PostgreSQL implementation of Announcement repository."""

from typing import List, Optional, Tuple

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Announcement
from agora.domain.repository.announcement import AnnouncementRepository
from agora.domain.value import AnnouncementId
from agora.persistence.error import store_errors
from agora.persistence.mappers import announcement_to_dict, row_to_announcement
from agora.persistence.pagination import page_window
from agora.persistence.tables import announcements_table


class PostgresAnnouncementRepository(AnnouncementRepository):
    """PostgreSQL implementation of AnnouncementRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, announcement_id: AnnouncementId
    ) -> Optional[Announcement]:
        """Find an announcement by ID."""
        with store_errors("announcement_repository.find_by_id"):
            stmt = select(announcements_table).where(
                announcements_table.c.id == announcement_id
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if not row:
            return None
        return row_to_announcement(row._asdict())

    async def list_announcements(
        self, published_only: bool = True, page: int = 0, limit: int = 0
    ) -> Tuple[List[Announcement], int]:
        """List announcements, newest first."""
        with logfire.span(
            "announcement_repository.list_announcements",
            published_only=published_only,
            page=page,
            limit=limit,
        ):
            with store_errors("announcement_repository.list_announcements"):
                conditions = []
                if published_only:
                    conditions.append(announcements_table.c.published.is_(True))

                count_stmt = (
                    select(func.count())
                    .select_from(announcements_table)
                    .where(*conditions)
                )
                total = (await self.session.execute(count_stmt)).scalar() or 0

                stmt = (
                    select(announcements_table)
                    .where(*conditions)
                    .order_by(desc(announcements_table.c.created_at))
                )
                window = page_window(page, limit)
                if window is not None:
                    offset, size = window
                    stmt = stmt.limit(size).offset(offset)
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_announcement(row._asdict()) for row in rows], total

    async def save(self, announcement: Announcement) -> Announcement:
        """Save an announcement (create or update)."""
        with store_errors("announcement_repository.save"):
            values = announcement_to_dict(announcement)
            stmt = insert(announcements_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[announcements_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()

        logfire.info("Announcement saved", announcement_id=str(announcement.id))
        return announcement

    async def delete(self, announcement_id: AnnouncementId) -> bool:
        """Delete an announcement."""
        with store_errors("announcement_repository.delete"):
            stmt = (
                delete(announcements_table)
                .where(announcements_table.c.id == announcement_id)
                .returning(announcements_table.c.id)
            )
            result = await self.session.execute(stmt)
            deleted = result.fetchone() is not None
            await self.session.flush()
            return deleted
