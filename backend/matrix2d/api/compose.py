"""POST /api/compose — fold a transform list into one matrix."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from matrix2d.engine.composer import compose as compose_transforms
from matrix2d.engine.concrete import FLOAT
from matrix2d.engine.decomposer import decompose as decompose_matrix
from matrix2d.models.requests import ComposeRequest
from matrix2d.models.responses import ComposeResponse, Decomposition

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/compose", response_model=ComposeResponse)
async def compose(req: ComposeRequest) -> ComposeResponse:
    try:
        matrix = compose_transforms(req.transforms, ops=FLOAT)
    except ValueError as e:
        logger.warning("Rejected transform list: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    decomposition = None
    if req.decompose:
        decomposition = Decomposition(**decompose_matrix(matrix, ops=FLOAT).as_dict())

    return ComposeResponse(
        matrix=[[float(x) for x in row] for row in matrix],
        decomposition=decomposition,
    )
