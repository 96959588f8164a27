"""PostgreSQL implementation of Suggestion repository."""

from typing import List, Optional, Tuple

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Suggestion
from agora.domain.repository.suggestion import SuggestionRepository
from agora.domain.value import SuggestionId, SuggestionStatus, UserId
from agora.persistence.error import store_errors
from agora.persistence.mappers import row_to_suggestion, suggestion_to_dict
from agora.persistence.pagination import page_window
from agora.persistence.tables import suggestions_table


class PostgresSuggestionRepository(SuggestionRepository):
    """PostgreSQL implementation of SuggestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        with store_errors("suggestion_repository.find_by_id"):
            stmt = select(suggestions_table).where(
                suggestions_table.c.id == suggestion_id
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if not row:
            return None
        return row_to_suggestion(row._asdict())

    async def list_suggestions(
        self,
        status: Optional[SuggestionStatus] = None,
        author_id: Optional[UserId] = None,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Suggestion], int]:
        """List suggestions, newest first."""
        with logfire.span(
            "suggestion_repository.list_suggestions",
            status=status.value if status else None,
            page=page,
            limit=limit,
        ):
            with store_errors("suggestion_repository.list_suggestions"):
                conditions = []
                if status is not None:
                    conditions.append(suggestions_table.c.status == status.value)
                if author_id is not None:
                    conditions.append(suggestions_table.c.author_id == author_id)

                count_stmt = (
                    select(func.count())
                    .select_from(suggestions_table)
                    .where(*conditions)
                )
                total = (await self.session.execute(count_stmt)).scalar() or 0

                stmt = (
                    select(suggestions_table)
                    .where(*conditions)
                    .order_by(desc(suggestions_table.c.created_at))
                )
                window = page_window(page, limit)
                if window is not None:
                    offset, size = window
                    stmt = stmt.limit(size).offset(offset)
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_suggestion(row._asdict()) for row in rows], total

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save a suggestion (create or update)."""
        with store_errors("suggestion_repository.save"):
            values = suggestion_to_dict(suggestion)
            stmt = insert(suggestions_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[suggestions_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()

        logfire.info("Suggestion saved", suggestion_id=str(suggestion.id))
        return suggestion
