"""Create suggestion use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase, parse_id
from agora.domain.model import Suggestion
from agora.domain.repository import UnitOfWork
from agora.domain.service import SuggestionService, UserService
from agora.domain.value import UserId


class CreateSuggestionRequest(BaseModel):
    """Create suggestion request."""

    author_id: str  # User ID from authenticated user
    title: str
    description: str


class SuggestionResponse(BaseModel):
    """A single suggestion."""

    suggestion: Suggestion


class CreateSuggestionUseCase(BaseUseCase):
    """Use case for submitting a suggestion."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        user_service: UserService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create suggestion use case.

        Args:
            suggestion_service: Suggestion domain service
            user_service: User domain service
            unit_of_work: Request transaction
        """
        self.suggestion_service = suggestion_service
        self.user_service = user_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateSuggestionRequest) -> SuggestionResponse:
        """Create the suggestion and commit it.

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If title or description is blank
        """
        with logfire.span("create_suggestion.execute", author_id=request.author_id):
            author = await self.user_service.get_user(
                UserId(parse_id(request.author_id, "author_id"))
            )
            suggestion = await self.suggestion_service.create_suggestion(
                author, title=request.title, description=request.description
            )
            await self.unit_of_work.commit()
            return SuggestionResponse(suggestion=suggestion)
