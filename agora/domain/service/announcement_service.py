"""Announcement domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError, ValidationError
from agora.domain.model.announcement import Announcement
from agora.domain.model.user import User
from agora.domain.repository import AnnouncementRepository
from agora.domain.value import AnnouncementId, AnnouncementType, Author

from .base import Service


def _require_text(value: Optional[str], field: str) -> None:
    if value is not None and not value.strip():
        raise ValidationError(f"{field} is required")


class AnnouncementService(Service):
    """Domain service for administrator announcements.

    Only administrators write announcements. Drafts are invisible to
    everyone else; ``published_at`` is stamped the first time an
    announcement goes out and kept if it is later pulled back.
    """

    def __init__(self, announcement_repository: AnnouncementRepository) -> None:
        """Initialize announcement service.

        Args:
            announcement_repository: Announcement repository
        """
        self.announcement_repository = announcement_repository

    async def create_announcement(
        self,
        author: User,
        title: str,
        content: str,
        announcement_type: AnnouncementType = AnnouncementType.ANNOUNCEMENT,
        attachments: Optional[list[str]] = None,
        published: bool = False,
    ) -> Announcement:
        """Create an announcement.

        Raises:
            NotAuthorizedError: If the author is not an administrator
            ValidationError: If title or content is blank
        """
        with logfire.span(
            "announcement_service.create_announcement",
            author_id=str(author.id),
            published=published,
        ):
            self.ensure_admin(author, "create", "Announcement", "*")
            _require_text(title, "Title")
            _require_text(content, "Content")

            now = datetime.now()
            announcement = Announcement(
                id=AnnouncementId(uuid4()),
                author=Author(id=author.id, name=author.name),
                title=title,
                content=content,
                type=announcement_type,
                attachments=attachments or [],
                published=published,
                created_at=now,
                updated_at=now,
                published_at=now if published else None,
            )
            saved = await self.announcement_repository.save(announcement)
            logfire.info("Announcement created", announcement_id=str(saved.id))
            return saved

    async def get_announcement(
        self, announcement_id: AnnouncementId, include_drafts: bool = False
    ) -> Announcement:
        """Get an announcement by ID.

        Raises:
            NotFoundError: If it does not exist, or is a draft and
                ``include_drafts`` is False
        """
        with logfire.span(
            "announcement_service.get_announcement",
            announcement_id=str(announcement_id),
        ):
            announcement = await self.announcement_repository.find_by_id(
                announcement_id
            )
            if not announcement or not (announcement.published or include_drafts):
                logfire.warn(
                    "Announcement not found", announcement_id=str(announcement_id)
                )
                raise NotFoundError("Announcement", str(announcement_id))
            return announcement

    async def list_announcements(
        self, published_only: bool, page: int, limit: int
    ) -> tuple[list[Announcement], int]:
        """List announcements, newest first."""
        with logfire.span(
            "announcement_service.list_announcements",
            published_only=published_only,
            page=page,
            limit=limit,
        ):
            return await self.announcement_repository.list_announcements(
                published_only=published_only, page=page, limit=limit
            )

    async def update_announcement(
        self,
        announcement: Announcement,
        actor: User,
        title: Optional[str] = None,
        content: Optional[str] = None,
        announcement_type: Optional[AnnouncementType] = None,
        attachments: Optional[list[str]] = None,
        published: Optional[bool] = None,
    ) -> Announcement:
        """Apply a partial update; None leaves a field unchanged.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            ValidationError: If a new title or content is blank
        """
        with logfire.span(
            "announcement_service.update_announcement",
            announcement_id=str(announcement.id),
            actor_id=str(actor.id),
        ):
            self.ensure_admin(actor, "update", "Announcement", str(announcement.id))
            _require_text(title, "Title")
            _require_text(content, "Content")

            now = datetime.now()
            changes: dict[str, object] = {"updated_at": now}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content
            if announcement_type is not None:
                changes["type"] = announcement_type
            if attachments is not None:
                changes["attachments"] = attachments
            if published is not None:
                changes["published"] = published
                if published and announcement.published_at is None:
                    changes["published_at"] = now

            updated = announcement.model_copy(update=changes)
            return await self.announcement_repository.save(updated)

    async def delete_announcement(
        self, announcement_id: AnnouncementId, actor: User
    ) -> None:
        """Delete an announcement.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If it does not exist
        """
        with logfire.span(
            "announcement_service.delete_announcement",
            announcement_id=str(announcement_id),
            actor_id=str(actor.id),
        ):
            self.ensure_admin(actor, "delete", "Announcement", str(announcement_id))
            if not await self.announcement_repository.delete(announcement_id):
                raise NotFoundError("Announcement", str(announcement_id))
            logfire.info(
                "Announcement deleted", announcement_id=str(announcement_id)
            )
