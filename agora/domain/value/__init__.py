"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    AnnouncementId,
    CommentId,
    PostId,
    SuggestionId,
    UserId,
)
from agora.domain.value.types import (
    AnnouncementType,
    Author,
    PostType,
    ReferenceKind,
    Role,
    SuggestionStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "AnnouncementId",
    "SuggestionId",
    # Types
    "AnnouncementType",
    "Author",
    "PostType",
    "ReferenceKind",
    "Role",
    "SuggestionStatus",
]
