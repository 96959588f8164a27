"""Get announcement use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.service import AnnouncementService, UserService
from agora.domain.value import AnnouncementId, UserId

from .create_announcement import AnnouncementResponse


class GetAnnouncementRequest(BaseModel):
    """Get announcement request.

    Drafts are only returned with ``include_drafts`` set by an administrator.
    """

    announcement_id: str  # UUID string
    include_drafts: bool = False
    actor_id: Optional[str] = None


class GetAnnouncementUseCase(BaseUseCase):
    """Use case for reading one announcement."""

    def __init__(
        self, announcement_service: AnnouncementService, user_service: UserService
    ) -> None:
        self.announcement_service = announcement_service
        self.user_service = user_service

    async def execute(self, request: GetAnnouncementRequest) -> AnnouncementResponse:
        """Get the announcement.

        Raises:
            NotFoundError: If it does not exist or is a hidden draft
            NotAuthorizedError: If drafts are asked for by a non-administrator
        """
        with logfire.span(
            "get_announcement.execute", announcement_id=request.announcement_id
        ):
            announcement_id = AnnouncementId(
                parse_id(request.announcement_id, "announcement_id")
            )
            if request.include_drafts:
                actor = await self.user_service.get_user(
                    UserId(parse_id(request.actor_id or "", "actor_id"))
                )
                self.announcement_service.ensure_admin(
                    actor, "read", "Announcement", str(announcement_id)
                )

            announcement = await self.announcement_service.get_announcement(
                announcement_id, include_drafts=request.include_drafts
            )
            return AnnouncementResponse(announcement=announcement)
