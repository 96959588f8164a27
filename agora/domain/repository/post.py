"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from agora.domain.model.post import Post
from agora.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a live (not deleted) post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_posts(
        self, page: int = 0, limit: int = 0
    ) -> Tuple[List[Post], int]:
        """List live posts, newest first.

        ``page`` is 1-based. ``page == 0`` and ``limit == 0`` returns every
        post unpaginated.

        Args:
            page: Page number
            limit: Page size

        Returns:
            The page of posts and the total number of live posts
        """
        pass

    @abstractmethod
    async def list_since(self, since: datetime) -> List[Post]:
        """List live posts created at or after ``since``, newest first.

        Args:
            since: Lower bound on creation time

        Returns:
            Matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        The transient ``comments`` tree is never stored.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Soft delete a post.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a live post was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Tuple[Post, bool]]:
        """Atomically add or remove a user's like on a post.

        If the user is in the liked-by set they are removed and the counter
        decremented (never below 0); otherwise they are added and the counter
        incremented. Membership test and update happen in one storage step.

        Args:
            post_id: The post ID
            user_id: The liking user

        Returns:
            The updated post and whether the post is now liked by the user,
            or None if the post does not exist
        """
        pass
