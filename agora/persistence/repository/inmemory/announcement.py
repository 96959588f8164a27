"""In-memory announcement repository for testing."""

from typing import List, Optional, Tuple

from agora.domain.model.announcement import Announcement
from agora.domain.repository.announcement import AnnouncementRepository
from agora.domain.value import AnnouncementId
from agora.persistence.pagination import page_window


class InMemoryAnnouncementRepository(AnnouncementRepository):
    """In-memory implementation of AnnouncementRepository for testing."""

    def __init__(self) -> None:
        self._announcements: dict[AnnouncementId, Announcement] = {}

    async def find_by_id(
        self, announcement_id: AnnouncementId
    ) -> Optional[Announcement]:
        """Find an announcement by ID."""
        return self._announcements.get(announcement_id)

    async def list_announcements(
        self, published_only: bool = True, page: int = 0, limit: int = 0
    ) -> Tuple[List[Announcement], int]:
        """List announcements, newest first."""
        announcements = [
            a
            for a in self._announcements.values()
            if a.published or not published_only
        ]
        announcements.sort(key=lambda a: a.created_at, reverse=True)
        window = page_window(page, limit)
        if window is None:
            return announcements, len(announcements)
        offset, size = window
        return announcements[offset : offset + size], len(announcements)

    async def save(self, announcement: Announcement) -> Announcement:
        """Save or update an announcement."""
        self._announcements[announcement.id] = announcement
        return announcement

    async def delete(self, announcement_id: AnnouncementId) -> bool:
        """Delete an announcement."""
        return self._announcements.pop(announcement_id, None) is not None
