"""API response models. Non-finite floats serialize as null."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class _NumericResponse(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="null")


class Decomposition(_NumericResponse):
    translateX: float | None
    translateY: float | None
    rotateZ: float | None
    scaleX: float | None
    scaleY: float | None
    scale: float | None
    skewX: float | None


class ComposeResponse(_NumericResponse):
    matrix: list[list[float | None]]
    decomposition: Decomposition | None = None


class DecomposeResponse(_NumericResponse):
    decomposition: Decomposition
    transforms: list[dict[str, float | None]] = Field(default_factory=list)


class AnimateResponse(_NumericResponse):
    frames: int
    progress: list[float]
    matrices: list[list[list[float | None]]]
    decomposition: dict[str, list[float | None]]
    graph_nodes: int = 0
