"""Readiness check route."""

from fastapi import APIRouter

from config import settings

router = APIRouter()


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "places-api", "commit": settings.git_sha}
