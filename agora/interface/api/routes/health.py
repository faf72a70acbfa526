"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from agora.application.background import BackgroundTasks
from agora.config import Settings
from agora.domain.clock import Clock

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    environment: str
    git_sha: str
    pending_analysis_tasks: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    clock: FromDishka[Clock],
    background_tasks: FromDishka[BackgroundTasks],
) -> HealthResponse:
    """Liveness check. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        timestamp=clock.now(),
        environment=settings.environment,
        git_sha=settings.git_sha,
        pending_analysis_tasks=background_tasks.pending,
    )
