"""Domain model entities for Agora."""

from agora.domain.model.announcement import Announcement
from agora.domain.model.comment import Comment
from agora.domain.model.event import (
    ChatroomEvent,
    DeleteCommentEvent,
    DeletePostEvent,
    EventType,
    LikeCommentEvent,
    LikePostEvent,
    NewCommentEvent,
    NewPostEvent,
)
from agora.domain.model.post import Post
from agora.domain.model.suggestion import Suggestion
from agora.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Announcement",
    "Suggestion",
    "ChatroomEvent",
    "EventType",
    "NewPostEvent",
    "DeletePostEvent",
    "NewCommentEvent",
    "DeleteCommentEvent",
    "LikePostEvent",
    "LikeCommentEvent",
]
