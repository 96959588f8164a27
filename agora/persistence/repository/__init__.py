"""PostgreSQL repository implementations."""

from .announcement import PostgresAnnouncementRepository
from .comment import PostgresCommentRepository, PostgresCommentRepositoryFactory
from .post import PostgresPostRepository
from .suggestion import PostgresSuggestionRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresAnnouncementRepository",
    "PostgresCommentRepository",
    "PostgresCommentRepositoryFactory",
    "PostgresPostRepository",
    "PostgresSuggestionRepository",
    "PostgresUserRepository",
]
