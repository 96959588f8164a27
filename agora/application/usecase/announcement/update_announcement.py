"""Update announcement use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.repository import UnitOfWork
from agora.domain.service import AnnouncementService, UserService
from agora.domain.value import AnnouncementId, AnnouncementType, UserId

from .create_announcement import AnnouncementResponse


class UpdateAnnouncementRequest(BaseModel):
    """Update announcement request; unset fields are left alone."""

    announcement_id: str  # UUID string
    actor_id: str  # User ID from authenticated user
    title: Optional[str] = None
    content: Optional[str] = None
    type: Optional[AnnouncementType] = None
    attachments: Optional[list[str]] = None
    published: Optional[bool] = None


class UpdateAnnouncementUseCase(BaseUseCase):
    """Use case for editing, publishing or unpublishing an announcement."""

    def __init__(
        self,
        announcement_service: AnnouncementService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.announcement_service = announcement_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: UpdateAnnouncementRequest
    ) -> AnnouncementResponse:
        """Apply the update and commit it.

        Raises:
            NotFoundError: If the actor or announcement does not exist
            NotAuthorizedError: If the actor is not an administrator
            ValidationError: If a new title or content is blank
        """
        with logfire.span(
            "update_announcement.execute",
            announcement_id=request.announcement_id,
            actor_id=request.actor_id,
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            announcement_id = AnnouncementId(
                parse_id(request.announcement_id, "announcement_id")
            )
            self.announcement_service.ensure_admin(
                actor, "update", "Announcement", str(announcement_id)
            )
            announcement = await self.announcement_service.get_announcement(
                announcement_id, include_drafts=True
            )

            updated = await self.announcement_service.update_announcement(
                announcement,
                actor,
                title=request.title,
                content=request.content,
                announcement_type=request.type,
                attachments=request.attachments,
                published=request.published,
            )
            await self.unit_of_work.commit()
            return AnnouncementResponse(announcement=updated)
