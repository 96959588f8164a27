"""Suggestion entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import Author, SuggestionId, SuggestionStatus, UserId


class Suggestion(DomainModel):
    """A member's idea for improving the community, and its review state."""

    id: SuggestionId
    author: Author
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, max_length=10000)
    status: SuggestionStatus = SuggestionStatus.PENDING
    admin_notes: Optional[str] = None
    reviewed_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    reviewed_at: Optional[datetime] = None
