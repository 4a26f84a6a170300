"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from matrix2d import __version__
from matrix2d.engine.registry import get_registry
from matrix2d.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )


@router.get("/transforms")
async def transforms() -> dict[str, str]:
    """Accepted transform names and what they do."""
    out: dict[str, str] = {}
    for spec in get_registry().all():
        for name in (spec.name, *spec.aliases):
            out[name] = spec.description
    return out
