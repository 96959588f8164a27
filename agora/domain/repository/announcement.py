"""Announcement repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from agora.domain.model.announcement import Announcement
from agora.domain.value import AnnouncementId


class AnnouncementRepository(ABC):
    """Repository for administrator announcements."""

    @abstractmethod
    async def find_by_id(
        self, announcement_id: AnnouncementId
    ) -> Optional[Announcement]:
        """Find an announcement by ID, published or not.

        Args:
            announcement_id: The announcement's unique identifier

        Returns:
            The announcement if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_announcements(
        self, published_only: bool = True, page: int = 0, limit: int = 0
    ) -> Tuple[List[Announcement], int]:
        """List announcements, newest first.

        Args:
            published_only: Leave out drafts
            page: 1-based page number
            limit: Page size, 0 for everything

        Returns:
            The page of announcements and the total number matching
        """
        pass

    @abstractmethod
    async def save(self, announcement: Announcement) -> Announcement:
        """Save an announcement (create or update)."""
        pass

    @abstractmethod
    async def delete(self, announcement_id: AnnouncementId) -> bool:
        """Delete an announcement.

        Returns:
            True if an announcement was deleted, False otherwise
        """
        pass
