"""Repository interfaces for Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.announcement import AnnouncementRepository
from agora.domain.repository.comment import (
    CommentRepository,
    CommentRepositoryFactory,
)
from agora.domain.repository.post import PostRepository
from agora.domain.repository.suggestion import SuggestionRepository
from agora.domain.repository.unit_of_work import UnitOfWork
from agora.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "CommentRepositoryFactory",
    "AnnouncementRepository",
    "SuggestionRepository",
    "UnitOfWork",
]
