"""3×3 matrix algebra over operands. No knowledge of transforms.

Matrices are row-major tuples of three rows; the third column holds the
translation.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np
from numpy.typing import NDArray

from matrix2d.engine.arithmetic import Arithmetic, Operand, get_arithmetic

Vec3 = Tuple[Operand, Operand, Operand]
Matrix3 = Tuple[Vec3, Vec3, Vec3]

IDENTITY: Matrix3 = (
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
)


def dot3(row: Vec3, col: Vec3, ops: Arithmetic | None = None) -> Operand:
    ops = get_arithmetic(ops)
    return ops.add(
        ops.multiply(row[0], col[0]),
        ops.multiply(row[1], col[1]),
        ops.multiply(row[2], col[2]),
    )


def matrix_vec_mul3(m: Matrix3, v: Vec3, ops: Arithmetic | None = None) -> Vec3:
    return (dot3(m[0], v, ops), dot3(m[1], v, ops), dot3(m[2], v, ops))


def columns(m: Matrix3) -> tuple[Vec3, Vec3, Vec3]:
    return (
        (m[0][0], m[1][0], m[2][0]),
        (m[0][1], m[1][1], m[2][1]),
        (m[0][2], m[1][2], m[2][2]),
    )


def multiply3(m1: Matrix3, m2: Matrix3, ops: Arithmetic | None = None) -> Matrix3:
    """Standard product m1 × m2."""
    cols = columns(m2)
    return (
        (dot3(m1[0], cols[0], ops), dot3(m1[0], cols[1], ops), dot3(m1[0], cols[2], ops)),
        (dot3(m1[1], cols[0], ops), dot3(m1[1], cols[1], ops), dot3(m1[1], cols[2], ops)),
        (dot3(m1[2], cols[0], ops), dot3(m1[2], cols[1], ops), dot3(m1[2], cols[2], ops)),
    )


def to_array(m: Matrix3) -> NDArray[np.float64]:
    """Concrete matrix → (3, 3) array. Per-frame entries give shape (3, 3, n)."""
    return np.array(_broadcast(m), dtype=np.float64)


def _broadcast(m: Matrix3) -> list[list[Any]]:
    shapes = [np.shape(x) for row in m for x in row]
    target = np.broadcast_shapes(*shapes)
    return [[np.broadcast_to(np.asarray(x, dtype=np.float64), target) for x in row] for row in m]


def from_array(a: Any) -> Matrix3:
    """(3, 3) array-like → Matrix3 of floats."""
    arr = np.asarray(a, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {arr.shape}")
    return tuple(tuple(float(x) for x in row) for row in arr)  # type: ignore[return-value]
