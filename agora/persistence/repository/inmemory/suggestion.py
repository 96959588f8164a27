"""In-memory suggestion repository for testing."""

from typing import List, Optional, Tuple

from agora.domain.model.suggestion import Suggestion
from agora.domain.repository.suggestion import SuggestionRepository
from agora.domain.value import SuggestionId, SuggestionStatus, UserId
from agora.persistence.pagination import page_window


class InMemorySuggestionRepository(SuggestionRepository):
    """In-memory implementation of SuggestionRepository for testing."""

    def __init__(self) -> None:
        self._suggestions: dict[SuggestionId, Suggestion] = {}

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        return self._suggestions.get(suggestion_id)

    async def list_suggestions(
        self,
        status: Optional[SuggestionStatus] = None,
        author_id: Optional[UserId] = None,
        page: int = 0,
        limit: int = 0,
    ) -> Tuple[List[Suggestion], int]:
        """List suggestions, newest first."""
        suggestions = [
            s
            for s in self._suggestions.values()
            if (status is None or s.status == status)
            and (author_id is None or s.author.id == author_id)
        ]
        suggestions.sort(key=lambda s: s.created_at, reverse=True)
        window = page_window(page, limit)
        if window is None:
            return suggestions, len(suggestions)
        offset, size = window
        return suggestions[offset : offset + size], len(suggestions)

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save or update a suggestion."""
        self._suggestions[suggestion.id] = suggestion
        return suggestion
