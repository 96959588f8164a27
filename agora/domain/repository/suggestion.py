"""Suggestion repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from agora.domain.model.suggestion import Suggestion
from agora.domain.value import SuggestionId, SuggestionStatus, UserId


class SuggestionRepository(ABC):
    """Repository for member suggestions."""

    @abstractmethod
    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID.

        Args:
            suggestion_id: The suggestion's unique identifier

        Returns:
            The suggestion if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_suggestions(
        self,
        status: Optional[SuggestionStatus] = None,
        author_id: Optional[UserId] = None,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Suggestion], int]:
        """List suggestions, newest first.

        Args:
            status: Only suggestions in this state, if given
            author_id: Only suggestions by this user, if given
            page: 1-based page number
            limit: Page size, 0 for everything

        Returns:
            The page of suggestions and the total number matching
        """
        pass

    @abstractmethod
    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save a suggestion (create or update)."""
        pass
