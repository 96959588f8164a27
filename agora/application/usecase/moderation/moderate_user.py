"""Moderate user use case."""

from typing import Literal

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import User
from agora.domain.repository import UnitOfWork
from agora.domain.service import ModerationService, UserService
from agora.domain.value import UserId

ModerationAction = Literal["ban", "unban", "promote", "demote"]


class ModerateUserRequest(BaseModel):
    """Moderate user request."""

    actor_id: str  # User ID from authenticated user
    user_id: str  # UUID string
    action: ModerationAction


class ModerateUserResponse(BaseModel):
    """The account after the change."""

    user: User


class ModerateUserUseCase(BaseUseCase):
    """Use case for banning, unbanning, promoting and demoting users."""

    def __init__(
        self,
        moderation_service: ModerationService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize moderate user use case.

        Args:
            moderation_service: Moderation domain service
            user_service: User domain service
            unit_of_work: Request transaction
        """
        self.moderation_service = moderation_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: ModerateUserRequest) -> ModerateUserResponse:
        """Apply the moderation action and commit it.

        Raises:
            NotFoundError: If the actor or target does not exist
            NotAuthorizedError: If the actor is not an administrator
            ConflictError: If the action does not apply to the target
        """
        with logfire.span(
            "moderate_user.execute",
            action=request.action,
            actor_id=request.actor_id,
            user_id=request.user_id,
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            user_id = UserId(parse_id(request.user_id, "user_id"))

            actions = {
                "ban": self.moderation_service.ban_user,
                "unban": self.moderation_service.unban_user,
                "promote": self.moderation_service.promote_user,
                "demote": self.moderation_service.demote_user,
            }
            user = await actions[request.action](actor, user_id)
            await self.unit_of_work.commit()
            return ModerateUserResponse(user=user)
