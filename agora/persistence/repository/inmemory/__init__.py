"""In-memory repository implementations for testing."""

from .announcement import InMemoryAnnouncementRepository
from .comment import InMemoryCommentRepository, InMemoryCommentRepositoryFactory
from .post import InMemoryPostRepository
from .suggestion import InMemorySuggestionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnnouncementRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentRepositoryFactory",
    "InMemoryPostRepository",
    "InMemorySuggestionRepository",
    "InMemoryUserRepository",
]
