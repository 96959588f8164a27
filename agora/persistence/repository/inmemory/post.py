"""In-memory post repository for testing."""

from datetime import datetime
from typing import List, Optional, Tuple

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, UserId
from agora.persistence.pagination import page_window


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _live(self) -> list[Post]:
        posts = [p for p in self._posts.values() if p.deleted_at is None]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a live post by ID."""
        post = self._posts.get(post_id)
        if post is None or post.deleted_at is not None:
            return None
        return post

    async def list_posts(
        self, page: int = 0, limit: int = 0
    ) -> Tuple[List[Post], int]:
        """List live posts, newest first."""
        posts = self._live()
        window = page_window(page, limit)
        if window is None:
            return posts, len(posts)
        offset, size = window
        return posts[offset : offset + size], len(posts)

    async def list_since(self, since: datetime) -> List[Post]:
        """List live posts created at or after ``since``."""
        return [p for p in self._live() if p.created_at >= since]

    async def save(self, post: Post) -> Post:
        """Save or update a post, without its comment tree."""
        stored = post.model_copy(update={"comments": []})
        self._posts[post.id] = stored
        return stored

    async def delete(self, post_id: PostId) -> bool:
        """Soft delete a post."""
        post = await self.find_by_id(post_id)
        if post is None:
            return False
        self._posts[post_id] = post.model_copy(update={"deleted_at": datetime.now()})
        return True

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Tuple[Post, bool]]:
        """Toggle a like without yielding to the event loop."""
        post = self._posts.get(post_id)
        if post is None or post.deleted_at is not None:
            return None

        if user_id in post.liked_user_ids:
            liked_user_ids = [u for u in post.liked_user_ids if u != user_id]
            likes = max(post.likes - 1, 0)
            liked = False
        else:
            liked_user_ids = [*post.liked_user_ids, user_id]
            likes = post.likes + 1
            liked = True

        updated = post.model_copy(
            update={
                "likes": likes,
                "liked_user_ids": liked_user_ids,
                "updated_at": datetime.now(),
            }
        )
        self._posts[post_id] = updated
        return updated, liked
