"""FastAPI dependency injection."""

from __future__ import annotations

from matrix2d.config import settings


def get_settings():
    return settings
