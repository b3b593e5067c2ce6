"""Health and readiness check routes."""

from fastapi import APIRouter, Depends

from config import Settings
from routes.most_viewed import get_service, get_settings
from services.most_viewed import MostViewedService

router = APIRouter()

SERVICE_NAME = "most-viewed-relay"


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha}


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    service: MostViewedService = Depends(get_service),
) -> dict:
    """Readiness plus cache state. Does not call CAPI."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "commit": settings.git_sha,
        "cached_editions": sorted(service.cached_editions),
        "cache_entries": len(service.cache),
        "cache_ttl_seconds": service.cache.ttl_seconds,
    }
