"""Member suggestion routes; reviews live under ``/admin/suggestions``."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.suggestion import (
    CreateSuggestionRequest,
    CreateSuggestionUseCase,
    GetSuggestionRequest,
    GetSuggestionsRequest,
    GetSuggestionsResponse,
    GetSuggestionsUseCase,
    GetSuggestionUseCase,
    SuggestionResponse,
)
from agora.domain.service import JWTService
from agora.domain.value import SuggestionStatus
from agora.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/suggestions", tags=["suggestions"], route_class=DishkaRoute
)


class SuggestionAPIRequest(BaseModel):
    """API request for submitting a suggestion."""

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, max_length=10000)


@router.post(
    "", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_suggestion(
    request: SuggestionAPIRequest,
    create_suggestion_use_case: FromDishka[CreateSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SuggestionResponse:
    """Submit a suggestion for review."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await create_suggestion_use_case.execute(
        CreateSuggestionRequest(
            author_id=user_id, title=request.title, description=request.description
        )
    )


@router.get("/mine", response_model=GetSuggestionsResponse)
async def list_my_suggestions(
    get_suggestions_use_case: FromDishka[GetSuggestionsUseCase],
    jwt_service: FromDishka[JWTService],
    suggestion_status: Optional[SuggestionStatus] = Query(
        default=None, alias="status"
    ),
    page: int = Query(default=1, ge=0),
    limit: int = Query(default=20, ge=0, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetSuggestionsResponse:
    """List the caller's own suggestions and how they were reviewed."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_suggestions_use_case.execute(
        GetSuggestionsRequest(
            actor_id=user_id, status=suggestion_status, page=page, limit=limit
        )
    )


@router.get("/{suggestion_id}", response_model=SuggestionResponse)
async def get_suggestion(
    suggestion_id: str,
    get_suggestion_use_case: FromDishka[GetSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SuggestionResponse:
    """Get one of the caller's suggestions."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_suggestion_use_case.execute(
        GetSuggestionRequest(suggestion_id=suggestion_id, actor_id=user_id)
    )
