"""Comment repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional, Tuple
from uuid import UUID

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, ReferenceKind, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live (not deleted) comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_reference(
        self,
        reference: ReferenceKind,
        reference_id: UUID,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Comment], int]:
        """List live comments attached directly to a post or comment.

        Comments are returned oldest first. ``page`` is 1-based;
        ``page == 0`` and ``limit == 0`` returns every comment unpaginated.

        Args:
            reference: Whether ``reference_id`` names a post or a comment
            reference_id: ID of the parent post or comment
            page: Page number
            limit: Page size

        Returns:
            The page of comments and the total number attached to the parent
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        The transient ``comments`` replies are never stored.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Soft delete a single comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a live comment was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def delete_tree(self, reference: ReferenceKind, reference_id: UUID) -> int:
        """Soft delete every comment transitively attached to a parent.

        The parent itself is not touched.

        Args:
            reference: Whether ``reference_id`` names a post or a comment
            reference_id: ID of the parent post or comment

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Tuple[Comment, bool]]:
        """Atomically add or remove a user's like on a comment.

        Args:
            comment_id: The comment ID
            user_id: The liking user

        Returns:
            The updated comment and whether it is now liked by the user,
            or None if the comment does not exist
        """
        pass


class CommentRepositoryFactory(ABC):
    """Opens comment repositories that can be used concurrently.

    The comment-tree fetcher runs several workers at once; each worker
    opens its own repository so that no two workers share a store session.
    """

    @abstractmethod
    def open(self) -> AbstractAsyncContextManager[CommentRepository]:
        """Open a repository for the lifetime of the context."""
        pass
