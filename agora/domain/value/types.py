"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from agora.domain.value.common import ValueObject
from agora.domain.value.identifiers import UserId


class Role(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class PostType(str, Enum):
    """Kind of content a post carries."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    FILE = "file"


class ReferenceKind(str, Enum):
    """What a comment is attached to.

    Top-level comments reference a post; replies reference another comment.
    """

    POST = "post"
    COMMENT = "comment"


class AnnouncementType(str, Enum):
    """Kind of notice administrators publish."""

    NEWS = "news"
    EVENT = "event"
    ANNOUNCEMENT = "announcement"


class SuggestionStatus(str, Enum):
    """Review state of a user suggestion.

    New suggestions start as ``PENDING``; administrators move them on.
    """

    PENDING = "pending"
    REVIEWED = "reviewed"
    APPROVED = "approved"
    IMPLEMENTED = "implemented"
    REJECTED = "rejected"


class Author(ValueObject):
    """Author snapshot embedded in posts and comments.

    Taken from the user record when the content is created.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
