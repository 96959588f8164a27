"""Post aggregate root.

Posts are the root content unit of the chatroom. Their comment trees
are attached transiently at read time and are not part of the stored
record.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from agora.domain.model.comment import Comment
from agora.domain.model.common import DomainModel, ensure_unique_likes
from agora.domain.value import Author, PostId, PostType, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author: Author
    content: str = Field(min_length=1, max_length=10000)
    type: PostType = PostType.TEXT
    likes: int = Field(default=0, ge=0)
    liked_user_ids: list[UserId] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def author_id(self) -> UserId:
        """ID of the post's author."""
        return self.author.id

    @field_validator("liked_user_ids")
    @classmethod
    def validate_unique_likes(cls, v: list[UserId]) -> list[UserId]:
        """Each user appears at most once in the liked-by set."""
        return ensure_unique_likes(v)
