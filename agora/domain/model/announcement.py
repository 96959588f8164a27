"""Announcement entity.

News, events and notices written by administrators. Members only ever see
published announcements.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import AnnouncementId, AnnouncementType, Author


class Announcement(DomainModel):
    """Announcement entity."""

    id: AnnouncementId
    author: Author
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=20000)
    type: AnnouncementType = AnnouncementType.ANNOUNCEMENT
    attachments: list[str] = Field(default_factory=list)
    published: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    published_at: Optional[datetime] = None
