"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ComposeRequest(BaseModel):
    transforms: list[dict[str, float]] = Field(
        ...,
        description='Ordered single-key records, e.g. [{"translateX": 5}, {"rotate": 0.5}]',
    )
    decompose: bool = Field(default=False, description="Also return the decomposition of the result")


class DecomposeRequest(BaseModel):
    matrix: list[list[float]] = Field(..., description="3x3 affine matrix, row-major")


class KeyframeSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start: float = Field(..., alias="from")
    end: float = Field(..., alias="to")


class AnimateRequest(BaseModel):
    transforms: list[dict[str, float | KeyframeSpec]] = Field(
        ...,
        description='Values are numbers or {"from": a, "to": b} keyframes',
    )
    frames: int = Field(default=60, ge=1, description="Number of evenly spaced samples")
