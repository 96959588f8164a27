"""Create announcement use case."""

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import Announcement
from agora.domain.repository import UnitOfWork
from agora.domain.service import AnnouncementService, UserService
from agora.domain.value import AnnouncementType, UserId


class CreateAnnouncementRequest(BaseModel):
    """Create announcement request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    type: AnnouncementType = AnnouncementType.ANNOUNCEMENT
    attachments: list[str] = Field(default_factory=list)
    published: bool = False


class AnnouncementResponse(BaseModel):
    """A single announcement."""

    announcement: Announcement


class CreateAnnouncementUseCase(BaseUseCase):
    """Use case for publishing or drafting an announcement."""

    def __init__(
        self,
        announcement_service: AnnouncementService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create announcement use case.

        Args:
            announcement_service: Announcement domain service
            user_service: User domain service
            unit_of_work: Request transaction
        """
        self.announcement_service = announcement_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: CreateAnnouncementRequest
    ) -> AnnouncementResponse:
        """Create the announcement and commit it.

        Raises:
            NotFoundError: If the author does not exist
            NotAuthorizedError: If the author is not an administrator
            ValidationError: If title or content is blank
        """
        with logfire.span(
            "create_announcement.execute", author_id=request.author_id
        ):
            author = await self.user_service.get_user(
                UserId(parse_id(request.author_id, "author_id"))
            )
            announcement = await self.announcement_service.create_announcement(
                author,
                title=request.title,
                content=request.content,
                announcement_type=request.type,
                attachments=request.attachments,
                published=request.published,
            )
            await self.unit_of_work.commit()
            return AnnouncementResponse(announcement=announcement)
