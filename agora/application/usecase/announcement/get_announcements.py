"""Get announcements use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, count_pages, parse_id
from agora.domain.model import Announcement
from agora.domain.service import AnnouncementService, UserService
from agora.domain.value import UserId


class GetAnnouncementsRequest(BaseModel):
    """Get announcements request.

    ``include_drafts`` is for the admin console and requires ``actor_id``
    to name an administrator.
    """

    include_drafts: bool = False
    actor_id: Optional[str] = None
    page: int = Field(default=1, ge=0)
    limit: int = Field(default=10, ge=0, le=100)


class GetAnnouncementsResponse(BaseModel):
    """One page of announcements."""

    announcements: list[Announcement]
    total: int
    page: int
    limit: int
    total_pages: int


class GetAnnouncementsUseCase(BaseUseCase):
    """Use case for listing announcements, newest first."""

    def __init__(
        self, announcement_service: AnnouncementService, user_service: UserService
    ) -> None:
        self.announcement_service = announcement_service
        self.user_service = user_service

    async def execute(
        self, request: GetAnnouncementsRequest
    ) -> GetAnnouncementsResponse:
        """List a page of announcements.

        Raises:
            NotAuthorizedError: If drafts are asked for by a non-administrator
        """
        with logfire.span(
            "get_announcements.execute",
            include_drafts=request.include_drafts,
            page=request.page,
            limit=request.limit,
        ):
            if request.include_drafts:
                actor = await self.user_service.get_user(
                    UserId(parse_id(request.actor_id or "", "actor_id"))
                )
                self.announcement_service.ensure_admin(
                    actor, "list drafts of", "Announcement", "*"
                )

            announcements, total = await self.announcement_service.list_announcements(
                published_only=not request.include_drafts,
                page=request.page,
                limit=request.limit,
            )
            return GetAnnouncementsResponse(
                announcements=announcements,
                total=total,
                page=request.page,
                limit=request.limit,
                total_pages=count_pages(total, request.limit),
            )
