"""Liveness and readiness check routes."""

from fastapi import APIRouter, Depends

from config import Settings
from dependencies import get_settings

router = APIRouter()


@router.get("/")
async def root() -> dict:
    return {"ok": True, "message": "NASA proxy running"}


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "nasa-explorer-api", "commit": settings.git_sha}
