"""Suggestion use cases."""

from .create_suggestion import (
    CreateSuggestionRequest,
    CreateSuggestionUseCase,
    SuggestionResponse,
)
from .get_suggestion import GetSuggestionRequest, GetSuggestionUseCase
from .get_suggestions import (
    GetSuggestionsRequest,
    GetSuggestionsResponse,
    GetSuggestionsUseCase,
)
from .update_suggestion_status import (
    UpdateSuggestionStatusRequest,
    UpdateSuggestionStatusUseCase,
)

__all__ = [
    "CreateSuggestionRequest",
    "CreateSuggestionUseCase",
    "GetSuggestionRequest",
    "GetSuggestionUseCase",
    "GetSuggestionsRequest",
    "GetSuggestionsResponse",
    "GetSuggestionsUseCase",
    "SuggestionResponse",
    "UpdateSuggestionStatusRequest",
    "UpdateSuggestionStatusUseCase",
]
