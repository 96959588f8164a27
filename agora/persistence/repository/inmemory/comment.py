"""In-memory comment repository for testing."""

from collections import deque
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional, Tuple
from uuid import UUID

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import (
    CommentRepository,
    CommentRepositoryFactory,
)
from agora.domain.value import CommentId, ReferenceKind, UserId
from agora.persistence.pagination import page_window


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _children(self, reference: ReferenceKind, reference_id: UUID) -> list[Comment]:
        comments = [
            c
            for c in self._comments.values()
            if c.reference == reference
            and c.reference_id == reference_id
            and c.deleted_at is None
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None
        return comment

    async def list_by_reference(
        self,
        reference: ReferenceKind,
        reference_id: UUID,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Comment], int]:
        """List live comments attached to a parent, oldest first."""
        comments = self._children(reference, reference_id)
        window = page_window(page, limit)
        if window is None:
            return comments, len(comments)
        offset, size = window
        return comments[offset : offset + size], len(comments)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment, without its replies."""
        stored = comment.model_copy(update={"comments": []})
        self._comments[comment.id] = stored
        return stored

    async def delete(self, comment_id: CommentId) -> bool:
        """Soft delete a comment."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return False
        self._comments[comment_id] = comment.model_copy(
            update={"deleted_at": datetime.now()}
        )
        return True

    async def delete_tree(self, reference: ReferenceKind, reference_id: UUID) -> int:
        """Soft delete every comment below a parent, breadth first."""
        now = datetime.now()
        removed = 0
        pending = deque(self._children(reference, reference_id))
        while pending:
            comment = pending.popleft()
            pending.extend(self._children(ReferenceKind.COMMENT, comment.id))
            self._comments[comment.id] = comment.model_copy(update={"deleted_at": now})
            removed += 1
        return removed

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Tuple[Comment, bool]]:
        """Toggle a like without yielding to the event loop."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None

        if user_id in comment.liked_user_ids:
            liked_user_ids = [u for u in comment.liked_user_ids if u != user_id]
            likes = max(comment.likes - 1, 0)
            liked = False
        else:
            liked_user_ids = [*comment.liked_user_ids, user_id]
            likes = comment.likes + 1
            liked = True

        updated = comment.model_copy(
            update={
                "likes": likes,
                "liked_user_ids": liked_user_ids,
                "updated_at": datetime.now(),
            }
        )
        self._comments[comment_id] = updated
        return updated, liked


class InMemoryCommentRepositoryFactory(CommentRepositoryFactory):
    """Hands every worker the same in-memory repository."""

    def __init__(self, repository: CommentRepository) -> None:
        self._repository = repository

    @asynccontextmanager
    async def _open(self) -> AsyncIterator[CommentRepository]:
        yield self._repository

    def open(self):
        return self._open()
