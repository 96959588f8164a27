"""Get suggestion use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.service import SuggestionService, UserService
from agora.domain.value import SuggestionId, UserId

from .create_suggestion import SuggestionResponse


class GetSuggestionRequest(BaseModel):
    """Get suggestion request."""

    suggestion_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class GetSuggestionUseCase(BaseUseCase):
    """Use case for reading one suggestion, as its author or an admin."""

    def __init__(
        self, suggestion_service: SuggestionService, user_service: UserService
    ) -> None:
        self.suggestion_service = suggestion_service
        self.user_service = user_service

    async def execute(self, request: GetSuggestionRequest) -> SuggestionResponse:
        """Get the suggestion.

        Raises:
            NotFoundError: If the actor or suggestion does not exist
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "get_suggestion.execute", suggestion_id=request.suggestion_id
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            suggestion = await self.suggestion_service.get_suggestion(
                SuggestionId(parse_id(request.suggestion_id, "suggestion_id"))
            )
            self.suggestion_service.ensure_author_or_admin(
                actor, suggestion.author.id, "read", "Suggestion", str(suggestion.id)
            )
            return SuggestionResponse(suggestion=suggestion)
