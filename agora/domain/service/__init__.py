"""Domain services."""

from .announcement_service import AnnouncementService
from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentJob, CommentTreeFetcher
from .event_publisher import EventPublisher
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .post_service import PostService
from .suggestion_service import SuggestionService
from .user_service import UserService

__all__ = [
    "AnnouncementService",
    "CommentJob",
    "CommentService",
    "CommentTreeFetcher",
    "EventPublisher",
    "JWTService",
    "ModerationService",
    "PostService",
    "Service",
    "SuggestionService",
    "UserService",
]
