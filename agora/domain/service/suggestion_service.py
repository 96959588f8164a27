"""Suggestion domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError, ValidationError
from agora.domain.model.suggestion import Suggestion
from agora.domain.model.user import User
from agora.domain.repository import SuggestionRepository
from agora.domain.value import Author, SuggestionId, SuggestionStatus, UserId

from .base import Service


class SuggestionService(Service):
    """Domain service for member suggestions and their review."""

    def __init__(self, suggestion_repository: SuggestionRepository) -> None:
        """Initialize suggestion service.

        Args:
            suggestion_repository: Suggestion repository
        """
        self.suggestion_repository = suggestion_repository

    async def create_suggestion(
        self, author: User, title: str, description: str
    ) -> Suggestion:
        """Record a new suggestion in the pending state.

        Raises:
            ValidationError: If title or description is blank
        """
        with logfire.span(
            "suggestion_service.create_suggestion", author_id=str(author.id)
        ):
            if not title or not title.strip():
                raise ValidationError("Title is required")
            if not description or not description.strip():
                raise ValidationError("Description is required")

            now = datetime.now()
            suggestion = Suggestion(
                id=SuggestionId(uuid4()),
                author=Author(id=author.id, name=author.name),
                title=title,
                description=description,
                status=SuggestionStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            saved = await self.suggestion_repository.save(suggestion)
            logfire.info("Suggestion created", suggestion_id=str(saved.id))
            return saved

    async def get_suggestion(self, suggestion_id: SuggestionId) -> Suggestion:
        """Get a suggestion by ID.

        Raises:
            NotFoundError: If it does not exist
        """
        with logfire.span(
            "suggestion_service.get_suggestion", suggestion_id=str(suggestion_id)
        ):
            suggestion = await self.suggestion_repository.find_by_id(suggestion_id)
            if not suggestion:
                logfire.warn("Suggestion not found", suggestion_id=str(suggestion_id))
                raise NotFoundError("Suggestion", str(suggestion_id))
            return suggestion

    async def list_suggestions(
        self,
        status: Optional[SuggestionStatus] = None,
        author_id: Optional[UserId] = None,
        page: int = 0,
        limit: int = 0,
    ) -> tuple[list[Suggestion], int]:
        """List suggestions, newest first."""
        with logfire.span(
            "suggestion_service.list_suggestions",
            status=status.value if status else None,
            page=page,
            limit=limit,
        ):
            return await self.suggestion_repository.list_suggestions(
                status=status, author_id=author_id, page=page, limit=limit
            )

    async def update_status(
        self,
        suggestion: Suggestion,
        reviewer: User,
        status: SuggestionStatus,
        admin_notes: Optional[str] = None,
    ) -> Suggestion:
        """Record an administrator's review.

        Notes are kept unless new ones are given.

        Raises:
            NotAuthorizedError: If the reviewer is not an administrator
        """
        with logfire.span(
            "suggestion_service.update_status",
            suggestion_id=str(suggestion.id),
            status=status.value,
        ):
            self.ensure_admin(reviewer, "review", "Suggestion", str(suggestion.id))
            if admin_notes is None:
                admin_notes = suggestion.admin_notes
            now = datetime.now()
            reviewed = suggestion.model_copy(
                update={
                    "status": status,
                    "admin_notes": admin_notes,
                    "reviewed_by": reviewer.id,
                    "reviewed_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.suggestion_repository.save(reviewed)
            logfire.info(
                "Suggestion reviewed",
                suggestion_id=str(suggestion.id),
                status=status.value,
                reviewer_id=str(reviewer.id),
            )
            return saved
