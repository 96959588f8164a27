"""Post domain service."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError, ValidationError
from agora.domain.model.post import Post
from agora.domain.model.user import User
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.value import Author, PostId, PostType, ReferenceKind, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascading deletes)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(
        self, author: User, content: str, post_type: PostType = PostType.TEXT
    ) -> Post:
        """Create a post.

        Args:
            author: Authoring user
            content: Post content
            post_type: Kind of post

        Returns:
            Created post

        Raises:
            ValidationError: If content is empty
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author.id),
            post_type=post_type.value,
        ):
            if not content or not content.strip():
                raise ValidationError("Content is required")

            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                author=Author(id=author.id, name=author.name),
                content=content,
                type=post_type,
                likes=0,
                liked_user_ids=[],
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=str(author.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a live post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist or was deleted
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(self, page: int, limit: int) -> tuple[list[Post], int]:
        """List one page of posts, newest first.

        Args:
            page: 1-based page number (0 with limit 0 lists everything)
            limit: Page size

        Returns:
            Posts on the page and the total post count
        """
        with logfire.span("post_service.list_posts", page=page, limit=limit):
            posts, total = await self.post_repository.list_posts(page=page, limit=limit)
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def list_recent_posts(self, window: timedelta) -> list[Post]:
        """List posts created within the given window.

        Args:
            window: How far back to look

        Returns:
            Recent posts, newest first
        """
        with logfire.span("post_service.list_recent_posts", window=str(window)):
            return await self.post_repository.list_since(datetime.now() - window)

    async def delete_post(self, post: Post, actor: User) -> int:
        """Delete a post and its whole comment tree.

        Only the post's author or an administrator may delete it.

        Args:
            post: Post to delete
            actor: User requesting the deletion

        Returns:
            Number of comments removed along with the post

        Raises:
            NotAuthorizedError: If the actor is neither author nor admin
            NotFoundError: If the post was deleted concurrently
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post.id), actor_id=str(actor.id)
        ):
            self.ensure_author_or_admin(
                actor, post.author_id, "delete", "post", str(post.id)
            )

            removed = await self.comment_repository.delete_tree(
                ReferenceKind.POST, post.id
            )
            if not await self.post_repository.delete(post.id):
                raise NotFoundError("Post", str(post.id))

            logfire.info(
                "Post deleted",
                post_id=str(post.id),
                actor_id=str(actor.id),
                comments_removed=removed,
            )
            return removed

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> tuple[Post, bool]:
        """Like the post, or remove the like if the user already liked it.

        Args:
            post_id: Post ID
            user_id: Liking user

        Returns:
            Updated post and whether the user now likes it

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            result = await self.post_repository.toggle_like(post_id, user_id)
            if result is None:
                logfire.warn("Like on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            post, liked = result
            logfire.info(
                "Post like toggled",
                post_id=str(post_id),
                user_id=str(user_id),
                liked=liked,
                likes=post.likes,
            )
            return post, liked
