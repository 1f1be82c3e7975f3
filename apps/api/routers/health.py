"""Health check router — liveness only; the engine has no backing services."""

from fastapi import APIRouter, Depends

from apps.api.core.config import Settings
from apps.api.deps import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_liveness(settings: Settings = Depends(get_app_settings)):
    """Liveness probe — returns 200 if the API process is running."""
    return {"status": "healthy", "service": "api", "version": settings.APP_VERSION}
