"""Announcement use cases."""

from .create_announcement import (
    AnnouncementResponse,
    CreateAnnouncementRequest,
    CreateAnnouncementUseCase,
)
from .delete_announcement import (
    DeleteAnnouncementRequest,
    DeleteAnnouncementResponse,
    DeleteAnnouncementUseCase,
)
from .get_announcement import GetAnnouncementRequest, GetAnnouncementUseCase
from .get_announcements import (
    GetAnnouncementsRequest,
    GetAnnouncementsResponse,
    GetAnnouncementsUseCase,
)
from .update_announcement import (
    UpdateAnnouncementRequest,
    UpdateAnnouncementUseCase,
)

__all__ = [
    "AnnouncementResponse",
    "CreateAnnouncementRequest",
    "CreateAnnouncementUseCase",
    "DeleteAnnouncementRequest",
    "DeleteAnnouncementResponse",
    "DeleteAnnouncementUseCase",
    "GetAnnouncementRequest",
    "GetAnnouncementUseCase",
    "GetAnnouncementsRequest",
    "GetAnnouncementsResponse",
    "GetAnnouncementsUseCase",
    "UpdateAnnouncementRequest",
    "UpdateAnnouncementUseCase",
]
