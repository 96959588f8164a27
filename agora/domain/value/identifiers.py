"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
AnnouncementId = NewType("AnnouncementId", UUID)
SuggestionId = NewType("SuggestionId", UUID)
