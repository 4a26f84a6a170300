"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from matrix2d.api import animate, compose, decompose, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(compose.router)
api_router.include_router(decompose.router)
api_router.include_router(animate.router)
