"""Get suggestions use case."""

from typing import Literal, Optional

import logfire
from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase, count_pages, parse_id
from agora.domain.model import Suggestion
from agora.domain.service import SuggestionService, UserService
from agora.domain.value import SuggestionStatus, UserId


class GetSuggestionsRequest(BaseModel):
    """Get suggestions request.

    ``scope == "mine"`` lists the actor's own suggestions; ``"all"`` is the
    review queue and is for administrators only.
    """

    actor_id: str  # User ID from authenticated user
    scope: Literal["mine", "all"] = "mine"
    status: Optional[SuggestionStatus] = None
    page: int = Field(default=1, ge=0)
    limit: int = Field(default=20, ge=0, le=100)


class GetSuggestionsResponse(BaseModel):
    """One page of suggestions."""

    suggestions: list[Suggestion]
    total: int
    page: int
    limit: int
    total_pages: int


class GetSuggestionsUseCase(BaseUseCase):
    """Use case for listing suggestions, newest first."""

    def __init__(
        self, suggestion_service: SuggestionService, user_service: UserService
    ) -> None:
        self.suggestion_service = suggestion_service
        self.user_service = user_service

    async def execute(self, request: GetSuggestionsRequest) -> GetSuggestionsResponse:
        """List a page of suggestions.

        Raises:
            NotAuthorizedError: If a non-administrator asks for every suggestion
        """
        with logfire.span(
            "get_suggestions.execute",
            actor_id=request.actor_id,
            scope=request.scope,
            status=request.status.value if request.status else None,
        ):
            actor = await self.user_service.get_user(
                UserId(parse_id(request.actor_id, "actor_id"))
            )
            author_id = actor.id
            if request.scope == "all":
                self.suggestion_service.ensure_admin(
                    actor, "list", "Suggestion", "*"
                )
                author_id = None

            suggestions, total = await self.suggestion_service.list_suggestions(
                status=request.status,
                author_id=author_id,
                page=request.page,
                limit=request.limit,
            )
            return GetSuggestionsResponse(
                suggestions=suggestions,
                total=total,
                page=request.page,
                limit=request.limit,
                total_pages=count_pages(total, request.limit),
            )
