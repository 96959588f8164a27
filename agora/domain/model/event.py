"""Chatroom domain events.

Every successful chatroom mutation produces exactly one event, which is
pushed to every live connection. Events form a closed set of kinds, each
with its own payload shape; on the wire they keep the ``{"type", "payload"}``
envelope that clients already understand.
"""

from enum import Enum
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import Field

from agora.domain.model.comment import Comment
from agora.domain.model.common import DomainModel
from agora.domain.model.post import Post
from agora.domain.value import CommentId, PostId, ReferenceKind, UserId
from agora.domain.value.common import ValueObject


class EventType(str, Enum):
    """Discriminator tag sent as the ``type`` field."""

    NEW_POST = "new_post"
    DELETE_POST = "delete_post"
    NEW_COMMENT = "new_comment"
    DELETE_COMMENT = "delete_comment"
    LIKE_POST = "like_post"
    LIKE_COMMENT = "like_comment"


class DomainEvent(DomainModel):
    """Base for all chatroom events."""

    type: EventType

    def to_wire(self) -> str:
        """Serialize the event to a single JSON text frame."""
        return self.model_dump_json()


class DeletePostPayload(ValueObject):
    post_id: PostId


class NewCommentPayload(ValueObject):
    comment: Comment
    reference: ReferenceKind
    reference_id: UUID


class DeleteCommentPayload(ValueObject):
    comment_id: CommentId
    reference: ReferenceKind
    reference_id: UUID


class LikePostPayload(ValueObject):
    post: Post
    post_id: PostId
    user_id: UserId
    liked: bool


class LikeCommentPayload(ValueObject):
    comment_id: CommentId
    reference: ReferenceKind
    reference_id: UUID
    user_id: UserId
    liked: bool


class NewPostEvent(DomainEvent):
    type: Literal[EventType.NEW_POST] = EventType.NEW_POST
    payload: Post


class DeletePostEvent(DomainEvent):
    type: Literal[EventType.DELETE_POST] = EventType.DELETE_POST
    payload: DeletePostPayload


class NewCommentEvent(DomainEvent):
    type: Literal[EventType.NEW_COMMENT] = EventType.NEW_COMMENT
    payload: NewCommentPayload


class DeleteCommentEvent(DomainEvent):
    type: Literal[EventType.DELETE_COMMENT] = EventType.DELETE_COMMENT
    payload: DeleteCommentPayload


class LikePostEvent(DomainEvent):
    type: Literal[EventType.LIKE_POST] = EventType.LIKE_POST
    payload: LikePostPayload


class LikeCommentEvent(DomainEvent):
    type: Literal[EventType.LIKE_COMMENT] = EventType.LIKE_COMMENT
    payload: LikeCommentPayload


ChatroomEvent = Annotated[
    Union[
        NewPostEvent,
        DeletePostEvent,
        NewCommentEvent,
        DeleteCommentEvent,
        LikePostEvent,
        LikeCommentEvent,
    ],
    Field(discriminator="type"),
]
