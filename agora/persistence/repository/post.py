"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional, Tuple

import logfire
from sqlalchemy import case, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, UserId
from agora.persistence.error import store_errors
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.pagination import page_window
from agora.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a live post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with store_errors("post_repository.find_by_id"):
                stmt = select(posts_table).where(
                    posts_table.c.id == post_id,
                    posts_table.c.deleted_at.is_(None),
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                return None
            return row_to_post(row._asdict())

    async def list_posts(
        self, page: int = 0, limit: int = 0
    ) -> Tuple[List[Post], int]:
        """List live posts, newest first."""
        with logfire.span("post_repository.list_posts", page=page, limit=limit):
            with store_errors("post_repository.list_posts"):
                live = posts_table.c.deleted_at.is_(None)

                count_stmt = select(func.count()).select_from(posts_table).where(live)
                total = (await self.session.execute(count_stmt)).scalar() or 0

                stmt = (
                    select(posts_table)
                    .where(live)
                    .order_by(desc(posts_table.c.created_at))
                )
                window = page_window(page, limit)
                if window is not None:
                    offset, size = window
                    stmt = stmt.limit(size).offset(offset)

                result = await self.session.execute(stmt)
                rows = result.fetchall()

            posts = [row_to_post(row._asdict()) for row in rows]
            logfire.info("Found posts", count=len(posts), total=total)
            return posts, total

    async def list_since(self, since: datetime) -> List[Post]:
        """List live posts created at or after ``since``, newest first."""
        with store_errors("post_repository.list_since"):
            stmt = (
                select(posts_table)
                .where(
                    posts_table.c.deleted_at.is_(None),
                    posts_table.c.created_at >= since,
                )
                .order_by(desc(posts_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            with store_errors("post_repository.save"):
                values = post_to_dict(post)
                stmt = insert(posts_table).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[posts_table.c.id],
                    set_={k: v for k, v in values.items() if k != "id"},
                )
                await self.session.execute(stmt)
                await self.session.flush()

            logfire.info("Post saved", post_id=str(post.id))
            return post.model_copy(update={"comments": []})

    async def delete(self, post_id: PostId) -> bool:
        """Soft delete a post."""
        with store_errors("post_repository.delete"):
            stmt = (
                update(posts_table)
                .where(
                    posts_table.c.id == post_id,
                    posts_table.c.deleted_at.is_(None),
                )
                .values(deleted_at=func.now())
                .returning(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            deleted = result.fetchone() is not None
            await self.session.flush()
            return deleted

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Tuple[Post, bool]]:
        """Toggle a like in a single UPDATE.

        Both CASE expressions read the pre-update row, so the membership test
        and the counter change cannot interleave with a concurrent toggle.
        """
        with logfire.span(
            "post_repository.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            with store_errors("post_repository.toggle_like"):
                already_liked = posts_table.c.liked_user_ids.any(user_id)
                stmt = (
                    update(posts_table)
                    .where(
                        posts_table.c.id == post_id,
                        posts_table.c.deleted_at.is_(None),
                    )
                    .values(
                        liked_user_ids=case(
                            (
                                already_liked,
                                func.array_remove(posts_table.c.liked_user_ids, user_id),
                            ),
                            else_=func.array_append(
                                posts_table.c.liked_user_ids, user_id
                            ),
                        ),
                        likes=case(
                            (already_liked, func.greatest(posts_table.c.likes - 1, 0)),
                            else_=posts_table.c.likes + 1,
                        ),
                        updated_at=func.now(),
                    )
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            if row is None:
                logfire.warn("Post not found or deleted", post_id=str(post_id))
                return None

            post = row_to_post(row._asdict())
            return post, user_id in post.liked_user_ids
