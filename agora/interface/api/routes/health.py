"""Liveness route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from agora.adapter.realtime import ConnectionRegistry
from agora.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    git_sha: str
    connections: int  # Live chatroom WebSockets in this process


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    registry: FromDishka[ConnectionRegistry],
) -> HealthResponse:
    """Report that the process is up, which build it runs and how busy it is."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        connections=await registry.connection_count(),
    )
