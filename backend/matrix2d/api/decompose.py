"""POST /api/decompose — recover transform components from a matrix."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from matrix2d.engine.concrete import FLOAT
from matrix2d.engine.decomposer import decompose as decompose_matrix
from matrix2d.engine.matrix import from_array
from matrix2d.models.requests import DecomposeRequest
from matrix2d.models.responses import DecomposeResponse, Decomposition

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/decompose", response_model=DecomposeResponse)
async def decompose(req: DecomposeRequest) -> DecomposeResponse:
    try:
        matrix = from_array(req.matrix)
    except ValueError as e:
        logger.warning("Rejected matrix: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = decompose_matrix(matrix, ops=FLOAT)
    return DecomposeResponse(
        decomposition=Decomposition(**result.as_dict()),
        transforms=result.as_transforms(),
    )
