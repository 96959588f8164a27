"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from agora.domain.error import NotFoundError, ValidationError
from agora.domain.model.comment import Comment
from agora.domain.model.user import User
from agora.domain.repository import CommentRepository
from agora.domain.value import Author, CommentId, ReferenceKind, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        reference: ReferenceKind,
        reference_id: UUID,
        author: User,
        content: str,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        The caller is responsible for checking that the parent exists.

        Args:
            reference: Kind of parent
            reference_id: Parent post or comment ID
            author: Authoring user
            content: Comment text

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty
        """
        with logfire.span(
            "comment_service.create_comment",
            reference=reference.value,
            reference_id=str(reference_id),
            author_id=str(author.id),
        ):
            if not content or not content.strip():
                raise ValidationError("Content is required")

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                reference=reference,
                reference_id=reference_id,
                author=Author(id=author.id, name=author.name),
                content=content,
                likes=0,
                liked_user_ids=[],
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                reference=reference.value,
                reference_id=str(reference_id),
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a live comment by ID.

        Raises:
            NotFoundError: If the comment does not exist or was deleted
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_comments(
        self, reference: ReferenceKind, reference_id: UUID, page: int, limit: int
    ) -> tuple[list[Comment], int]:
        """List one page of comments attached directly to a parent, oldest first.

        Args:
            reference: Kind of parent
            reference_id: Parent post or comment ID
            page: 1-based page number (0 with limit 0 lists everything)
            limit: Page size

        Returns:
            Comments on the page and the total attached to the parent
        """
        with logfire.span(
            "comment_service.list_comments",
            reference=reference.value,
            reference_id=str(reference_id),
            page=page,
            limit=limit,
        ):
            return await self.comment_repository.list_by_reference(
                reference, reference_id, page=page, limit=limit
            )

    async def delete_comment(self, comment: Comment, actor: User) -> int:
        """Delete a comment and every reply below it.

        Args:
            comment: Comment to delete
            actor: User requesting the deletion

        Returns:
            Number of replies removed along with the comment

        Raises:
            NotAuthorizedError: If the actor is neither author nor admin
            NotFoundError: If the comment was deleted concurrently
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment.id),
            actor_id=str(actor.id),
        ):
            self.ensure_author_or_admin(
                actor, comment.author_id, "delete", "comment", str(comment.id)
            )

            removed = await self.comment_repository.delete_tree(
                ReferenceKind.COMMENT, comment.id
            )
            if not await self.comment_repository.delete(comment.id):
                raise NotFoundError("Comment", str(comment.id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment.id),
                actor_id=str(actor.id),
                replies_removed=removed,
            )
            return removed

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> tuple[Comment, bool]:
        """Like the comment, or remove the like if the user already liked it.

        Returns:
            Updated comment and whether the user now likes it

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            result = await self.comment_repository.toggle_like(comment_id, user_id)
            if result is None:
                logfire.warn("Like on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            comment, liked = result
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                user_id=str(user_id),
                liked=liked,
                likes=comment.likes,
            )
            return comment, liked
