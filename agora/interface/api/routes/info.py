"""Public announcement routes. Only published announcements are visible."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from agora.application.usecase.announcement import (
    AnnouncementResponse,
    GetAnnouncementRequest,
    GetAnnouncementsRequest,
    GetAnnouncementsResponse,
    GetAnnouncementsUseCase,
    GetAnnouncementUseCase,
)

router = APIRouter(prefix="/info", tags=["info"], route_class=DishkaRoute)


@router.get("", response_model=GetAnnouncementsResponse)
async def list_announcements(
    get_announcements_use_case: FromDishka[GetAnnouncementsUseCase],
    page: int = Query(default=1, ge=0),
    limit: int = Query(default=10, ge=0, le=100),
) -> GetAnnouncementsResponse:
    """List published announcements, newest first."""
    return await get_announcements_use_case.execute(
        GetAnnouncementsRequest(page=page, limit=limit)
    )


@router.get("/{announcement_id}", response_model=AnnouncementResponse)
async def get_announcement(
    announcement_id: str,
    get_announcement_use_case: FromDishka[GetAnnouncementUseCase],
) -> AnnouncementResponse:
    """Get a published announcement."""
    return await get_announcement_use_case.execute(
        GetAnnouncementRequest(announcement_id=announcement_id)
    )
