"""Most-viewed relay route."""

from fastapi import APIRouter, Depends, Request

from config import Settings
from services.most_viewed import MostViewedService
from services.reshape import render

router = APIRouter()


def get_service(request: Request) -> MostViewedService:
    return request.app.state.most_viewed


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/most-viewed/{code:path}")
async def most_viewed(
    code: str,
    service: MostViewedService = Depends(get_service),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Most-viewed list for an edition code, e.g. ``uk``.

    Upstream failures surface as a bare 500 (see errors.py).
    """
    resp = await service.fetch(code)
    return render(resp, settings.response_format)
