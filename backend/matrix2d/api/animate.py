"""POST /api/animate — sample a keyframed transform list over many frames."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from matrix2d.config import Settings
from matrix2d.dependencies import get_settings
from matrix2d.engine.animation import Keyframes, build_animation, sample
from matrix2d.models.requests import AnimateRequest, KeyframeSpec
from matrix2d.models.responses import AnimateResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_engine(record: dict[str, float | KeyframeSpec]) -> dict[str, float | Keyframes]:
    return {
        name: Keyframes(value.start, value.end) if isinstance(value, KeyframeSpec) else value
        for name, value in record.items()
    }


@router.post("/animate", response_model=AnimateResponse)
async def animate(req: AnimateRequest, settings: Settings = Depends(get_settings)) -> AnimateResponse:
    if req.frames > settings.max_animation_frames:
        raise HTTPException(
            status_code=422,
            detail=f"frames must be <= {settings.max_animation_frames}",
        )
    try:
        animation = build_animation([_to_engine(t) for t in req.transforms])
    except ValueError as e:
        logger.warning("Rejected transform list: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    frames = sample(animation, req.frames)
    return AnimateResponse(
        frames=len(frames),
        progress=frames.progress.tolist(),
        matrices=frames.matrices.tolist(),
        decomposition={name: values.tolist() for name, values in frames.decomposition.items()},
        graph_nodes=animation.node_count,
    )
