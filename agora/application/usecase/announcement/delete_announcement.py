"""Delete announcement use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.repository import UnitOfWork
from agora.domain.service import AnnouncementService, UserService
from agora.domain.value import AnnouncementId, UserId


class DeleteAnnouncementRequest(BaseModel):
    """Delete announcement request."""

    announcement_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class DeleteAnnouncementResponse(BaseModel):
    """Delete announcement response."""

    announcement_id: str


class DeleteAnnouncementUseCase(BaseUseCase):
    """Use case for removing an announcement."""

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
        self, request: DeleteAnnouncementRequest
    ) -> DeleteAnnouncementResponse:
        """Delete the announcement and commit.

        Raises:
            NotFoundError: If the actor or announcement does not exist
            NotAuthorizedError: If the actor is not an administrator
        """
        with logfire.span(
            "delete_announcement.execute",
            announcement_id=request.announcement_id,
            actor_id=request.actor_id,
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            announcement_id = AnnouncementId(
                parse_id(request.announcement_id, "announcement_id")
            )
            await self.announcement_service.delete_announcement(announcement_id, actor)
            await self.unit_of_work.commit()
            return DeleteAnnouncementResponse(announcement_id=str(announcement_id))
