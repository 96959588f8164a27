"""Comment entity.

Comments hang off a post or off another comment, to unlimited depth.
The parent is identified by a reference kind plus the parent's ID; the
nested ``comments`` list is never stored and is filled in at read time
by the comment-tree fetcher.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from agora.domain.model.common import DomainModel, ensure_unique_likes
from agora.domain.value import Author, CommentId, ReferenceKind, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post (``reference == POST``) or a reply to
    another comment (``reference == COMMENT``).
    """

    id: CommentId
    reference: ReferenceKind
    reference_id: UUID  # PostId or CommentId, depending on reference
    author: Author
    content: str = Field(min_length=1, max_length=10000)
    likes: int = Field(default=0, ge=0)
    liked_user_ids: list[UserId] = Field(default_factory=list)
    comments: list["Comment"] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def author_id(self) -> UserId:
        """ID of the comment's author."""
        return self.author.id

    @field_validator("liked_user_ids")
    @classmethod
    def validate_unique_likes(cls, v: list[UserId]) -> list[UserId]:
        """Each user appears at most once in the liked-by set."""
        return ensure_unique_likes(v)

    def count_tree(self) -> int:
        """Count this comment plus every reply below it."""
        total, pending = 0, [self]
        while pending:
            comment = pending.pop()
            total += 1
            pending.extend(comment.comments)
        return total
