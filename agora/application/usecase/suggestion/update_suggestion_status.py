"""Update suggestion status use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.repository import UnitOfWork
from agora.domain.service import SuggestionService, UserService
from agora.domain.value import SuggestionId, SuggestionStatus, UserId

from .create_suggestion import SuggestionResponse


class UpdateSuggestionStatusRequest(BaseModel):
    """Update suggestion status request."""

    suggestion_id: str  # UUID string
    actor_id: str  # User ID from authenticated user
    status: SuggestionStatus
    admin_notes: Optional[str] = None


class UpdateSuggestionStatusUseCase(BaseUseCase):
    """Use case for an administrator's review of a suggestion."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.suggestion_service = suggestion_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: UpdateSuggestionStatusRequest
    ) -> SuggestionResponse:
        """Record the review and commit it.

        Raises:
            NotFoundError: If the actor or suggestion does not exist
            NotAuthorizedError: If the actor is not an administrator
        """
        with logfire.span(
            "update_suggestion_status.execute",
            suggestion_id=request.suggestion_id,
            status=request.status.value,
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            suggestion = await self.suggestion_service.get_suggestion(
                SuggestionId(parse_id(request.suggestion_id, "suggestion_id"))
            )
            reviewed = await self.suggestion_service.update_status(
                suggestion, actor, request.status, admin_notes=request.admin_notes
            )
            await self.unit_of_work.commit()
            return SuggestionResponse(suggestion=reviewed)
