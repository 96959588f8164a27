"""Moderation routes.

The delete flows are the chatroom's own; the author-or-admin rule in the
domain lets administrators remove anyone's content. Everything else here
is refused with 403 for non-administrators by the domain services.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.announcement import (
    AnnouncementResponse,
    CreateAnnouncementRequest,
    CreateAnnouncementUseCase,
    DeleteAnnouncementRequest,
    DeleteAnnouncementResponse,
    DeleteAnnouncementUseCase,
    GetAnnouncementRequest,
    GetAnnouncementsRequest,
    GetAnnouncementsResponse,
    GetAnnouncementsUseCase,
    GetAnnouncementUseCase,
    UpdateAnnouncementRequest,
    UpdateAnnouncementUseCase,
)
from agora.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from agora.application.usecase.moderation import (
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModerateUserRequest,
    ModerateUserResponse,
    ModerateUserUseCase,
    ModerationAction,
)
from agora.application.usecase.post import (
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
)
from agora.application.usecase.suggestion import (
    GetSuggestionRequest,
    GetSuggestionsRequest,
    GetSuggestionsResponse,
    GetSuggestionsUseCase,
    GetSuggestionUseCase,
    SuggestionResponse,
    UpdateSuggestionStatusRequest,
    UpdateSuggestionStatusUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import AnnouncementType, Role, SuggestionStatus
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AnnouncementAPIRequest(BaseModel):
    """API request for creating an announcement."""

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=20000)
    type: AnnouncementType = AnnouncementType.ANNOUNCEMENT
    attachments: list[str] = Field(default_factory=list)
    published: bool = False


class AnnouncementUpdateAPIRequest(BaseModel):
    """API request for a partial announcement update."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = Field(default=None, min_length=1, max_length=20000)
    type: Optional[AnnouncementType] = None
    attachments: Optional[list[str]] = None
    published: Optional[bool] = None


class SuggestionStatusAPIRequest(BaseModel):
    """API request for reviewing a suggestion."""

    status: SuggestionStatus
    admin_notes: Optional[str] = Field(default=None, max_length=10000)


# ============================================================================
# Content
# ============================================================================


@router.delete("/posts/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Remove a post and its comment tree."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, actor_id=user_id)
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Remove a comment and its replies."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, actor_id=user_id)
    )


# ============================================================================
# Users
# ============================================================================


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    banned: Optional[bool] = Query(default=None),
    role: Optional[Role] = Query(default=None),
    page: int = Query(default=1, ge=0),
    limit: int = Query(default=20, ge=0, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListUsersResponse:
    """List accounts, e.g. ``?banned=true`` or ``?role=admin``."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await list_users_use_case.execute(
        ListUsersRequest(
            actor_id=user_id, banned=banned, role=role, page=page, limit=limit
        )
    )


async def _moderate(
    use_case: ModerateUserUseCase,
    jwt_service: JWTService,
    target_id: str,
    action: ModerationAction,
    auth_token: str | None,
    authorization: str | None,
) -> ModerateUserResponse:
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await use_case.execute(
        ModerateUserRequest(actor_id=user_id, user_id=target_id, action=action)
    )


@router.post("/users/{user_id}/ban", response_model=ModerateUserResponse)
async def ban_user(
    user_id: str,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModerateUserResponse:
    """Ban a user; they can no longer post, comment or like."""
    return await _moderate(
        moderate_user_use_case, jwt_service, user_id, "ban", auth_token, authorization
    )


@router.post("/users/{user_id}/unban", response_model=ModerateUserResponse)
async def unban_user(
    user_id: str,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModerateUserResponse:
    """Lift a ban."""
    return await _moderate(
        moderate_user_use_case, jwt_service, user_id, "unban", auth_token, authorization
    )


@router.post("/users/{user_id}/promote", response_model=ModerateUserResponse)
async def promote_user(
    user_id: str,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModerateUserResponse:
    """Make a user an administrator."""
    return await _moderate(
        moderate_user_use_case,
        jwt_service,
        user_id,
        "promote",
        auth_token,
        authorization,
    )


@router.post("/users/{user_id}/demote", response_model=ModerateUserResponse)
async def demote_user(
    user_id: str,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModerateUserResponse:
    """Take administrator rights away."""
    return await _moderate(
        moderate_user_use_case,
        jwt_service,
        user_id,
        "demote",
        auth_token,
        authorization,
    )


# ============================================================================
# Announcements
# ============================================================================


@router.get("/info", response_model=GetAnnouncementsResponse)
async def list_announcements(
    get_announcements_use_case: FromDishka[GetAnnouncementsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=0),
    limit: int = Query(default=10, ge=0, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetAnnouncementsResponse:
    """List announcements including drafts."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_announcements_use_case.execute(
        GetAnnouncementsRequest(
            include_drafts=True, actor_id=user_id, page=page, limit=limit
        )
    )


@router.get("/info/{announcement_id}", response_model=AnnouncementResponse)
async def get_announcement(
    announcement_id: str,
    get_announcement_use_case: FromDishka[GetAnnouncementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AnnouncementResponse:
    """Get an announcement, draft or not."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_announcement_use_case.execute(
        GetAnnouncementRequest(
            announcement_id=announcement_id, include_drafts=True, actor_id=user_id
        )
    )


@router.post(
    "/info",
    response_model=AnnouncementResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_announcement(
    request: AnnouncementAPIRequest,
    create_announcement_use_case: FromDishka[CreateAnnouncementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AnnouncementResponse:
    """Create an announcement, published or as a draft."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await create_announcement_use_case.execute(
        CreateAnnouncementRequest(author_id=user_id, **request.model_dump())
    )


@router.put("/info/{announcement_id}", response_model=AnnouncementResponse)
async def update_announcement(
    announcement_id: str,
    request: AnnouncementUpdateAPIRequest,
    update_announcement_use_case: FromDishka[UpdateAnnouncementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AnnouncementResponse:
    """Edit an announcement; omitted fields are unchanged."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await update_announcement_use_case.execute(
        UpdateAnnouncementRequest(
            announcement_id=announcement_id,
            actor_id=user_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/info/{announcement_id}", response_model=DeleteAnnouncementResponse)
async def delete_announcement(
    announcement_id: str,
    delete_announcement_use_case: FromDishka[DeleteAnnouncementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteAnnouncementResponse:
    """Delete an announcement."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await delete_announcement_use_case.execute(
        DeleteAnnouncementRequest(announcement_id=announcement_id, actor_id=user_id)
    )


# ============================================================================
# Suggestions
# ============================================================================


@router.get("/suggestions", response_model=GetSuggestionsResponse)
async def list_suggestions(
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
    """List everyone's suggestions, optionally by status."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_suggestions_use_case.execute(
        GetSuggestionsRequest(
            actor_id=user_id,
            scope="all",
            status=suggestion_status,
            page=page,
            limit=limit,
        )
    )


@router.get("/suggestions/{suggestion_id}", response_model=SuggestionResponse)
async def get_suggestion(
    suggestion_id: str,
    get_suggestion_use_case: FromDishka[GetSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SuggestionResponse:
    """Get one suggestion."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_suggestion_use_case.execute(
        GetSuggestionRequest(suggestion_id=suggestion_id, actor_id=user_id)
    )


@router.put("/suggestions/{suggestion_id}/status", response_model=SuggestionResponse)
async def update_suggestion_status(
    suggestion_id: str,
    request: SuggestionStatusAPIRequest,
    update_suggestion_status_use_case: FromDishka[UpdateSuggestionStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SuggestionResponse:
    """Record a review decision on a suggestion."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await update_suggestion_status_use_case.execute(
        UpdateSuggestionStatusRequest(
            suggestion_id=suggestion_id,
            actor_id=user_id,
            status=request.status,
            admin_notes=request.admin_notes,
        )
    )
