"""PostgreSQL implementation of Comment repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Tuple
from uuid import UUID

import logfire
from sqlalchemy import case, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agora.domain.model import Comment
from agora.domain.repository.comment import (
    CommentRepository,
    CommentRepositoryFactory,
)
from agora.domain.value import CommentId, ReferenceKind, UserId
from agora.persistence.error import store_errors
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.pagination import page_window
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID."""
        with store_errors("comment_repository.find_by_id"):
            stmt = select(comments_table).where(
                comments_table.c.id == comment_id,
                comments_table.c.deleted_at.is_(None),
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if not row:
            return None
        return row_to_comment(row._asdict())

    async def list_by_reference(
        self,
        reference: ReferenceKind,
        reference_id: UUID,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Comment], int]:
        """List live comments attached to a parent, oldest first."""
        with logfire.span(
            "comment_repository.list_by_reference",
            reference=reference.value,
            reference_id=str(reference_id),
            page=page,
            limit=limit,
        ):
            with store_errors("comment_repository.list_by_reference"):
                attached = (
                    comments_table.c.reference == reference.value,
                    comments_table.c.reference_id == reference_id,
                    comments_table.c.deleted_at.is_(None),
                )

                stmt = (
                    select(comments_table)
                    .where(*attached)
                    .order_by(comments_table.c.created_at, comments_table.c.id)
                )
                window = page_window(page, limit)
                if window is None:
                    result = await self.session.execute(stmt)
                    comments = [row_to_comment(r._asdict()) for r in result.fetchall()]
                    return comments, len(comments)

                offset, size = window
                count_stmt = (
                    select(func.count()).select_from(comments_table).where(*attached)
                )
                total = (await self.session.execute(count_stmt)).scalar() or 0
                result = await self.session.execute(stmt.limit(size).offset(offset))
                comments = [row_to_comment(r._asdict()) for r in result.fetchall()]
                return comments, total

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            with store_errors("comment_repository.save"):
                values = comment_to_dict(comment)
                stmt = insert(comments_table).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[comments_table.c.id],
                    set_={k: v for k, v in values.items() if k != "id"},
                )
                await self.session.execute(stmt)
                await self.session.flush()
            return comment.model_copy(update={"comments": []})

    async def delete(self, comment_id: CommentId) -> bool:
        """Soft delete a single comment."""
        with store_errors("comment_repository.delete"):
            stmt = (
                update(comments_table)
                .where(
                    comments_table.c.id == comment_id,
                    comments_table.c.deleted_at.is_(None),
                )
                .values(deleted_at=func.now())
                .returning(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            deleted = result.fetchone() is not None
            await self.session.flush()
            return deleted

    async def delete_tree(self, reference: ReferenceKind, reference_id: UUID) -> int:
        """Soft delete everything below a parent with one recursive CTE."""
        with logfire.span(
            "comment_repository.delete_tree",
            reference=reference.value,
            reference_id=str(reference_id),
        ):
            with store_errors("comment_repository.delete_tree"):
                live = comments_table.c.deleted_at.is_(None)

                tree = (
                    select(comments_table.c.id)
                    .where(
                        comments_table.c.reference == reference.value,
                        comments_table.c.reference_id == reference_id,
                        live,
                    )
                    .cte("tree", recursive=True)
                )
                replies = select(comments_table.c.id).where(
                    comments_table.c.reference == ReferenceKind.COMMENT.value,
                    comments_table.c.reference_id == tree.c.id,
                    live,
                )
                tree = tree.union_all(replies)

                stmt = (
                    update(comments_table)
                    .where(comments_table.c.id.in_(select(tree.c.id)))
                    .values(deleted_at=func.now())
                    .returning(comments_table.c.id)
                )
                result = await self.session.execute(stmt)
                removed = len(result.fetchall())
                await self.session.flush()

            logfire.info(
                "Comment tree deleted",
                reference=reference.value,
                reference_id=str(reference_id),
                removed=removed,
            )
            return removed

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Tuple[Comment, bool]]:
        """Toggle a like in a single UPDATE (see the post repository)."""
        with store_errors("comment_repository.toggle_like"):
            already_liked = comments_table.c.liked_user_ids.any(user_id)
            stmt = (
                update(comments_table)
                .where(
                    comments_table.c.id == comment_id,
                    comments_table.c.deleted_at.is_(None),
                )
                .values(
                    liked_user_ids=case(
                        (
                            already_liked,
                            func.array_remove(comments_table.c.liked_user_ids, user_id),
                        ),
                        else_=func.array_append(comments_table.c.liked_user_ids, user_id),
                    ),
                    likes=case(
                        (already_liked, func.greatest(comments_table.c.likes - 1, 0)),
                        else_=comments_table.c.likes + 1,
                    ),
                    updated_at=func.now(),
                )
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

        if row is None:
            logfire.warn("Comment not found or deleted", comment_id=str(comment_id))
            return None

        comment = row_to_comment(row._asdict())
        return comment, user_id in comment.liked_user_ids


class PostgresCommentRepositoryFactory(CommentRepositoryFactory):
    """Opens a read repository on its own session.

    An ``AsyncSession`` cannot run concurrent operations, so each comment-tree
    worker gets a dedicated session, returned to the pool when it finishes.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _open(self) -> AsyncIterator[CommentRepository]:
        async with self.session_factory() as session:
            yield PostgresCommentRepository(session)

    def open(self):
        return self._open()
