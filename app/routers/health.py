"""
Health-check router.
"""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.schemas.search import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(status="ok", version=settings.app_version)
