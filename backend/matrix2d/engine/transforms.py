"""Canonical 3×3 matrix for each transform kind.

Row-major, translation in the third column. Importing this module registers
the nine accepted names.
"""

from __future__ import annotations

from matrix2d.engine.arithmetic import Arithmetic, Operand
from matrix2d.engine.matrix import Matrix3
from matrix2d.engine.registry import transform_kind


@transform_kind(name="translateX", description="Move along x")
def translate_x_matrix(x: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (1, 0, x),
        (0, 1, 0),
        (0, 0, 1),
    )


@transform_kind(name="translateY", description="Move along y")
def translate_y_matrix(y: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (1, 0, 0),
        (0, 1, y),
        (0, 0, 1),
    )


@transform_kind(name="scale", description="Uniform scale")
def scale_matrix(s: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (s, 0, 0),
        (0, s, 0),
        (0, 0, 1),
    )


@transform_kind(name="scaleX", description="Scale along x")
def scale_x_matrix(s: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (s, 0, 0),
        (0, 1, 0),
        (0, 0, 1),
    )


@transform_kind(name="scaleY", description="Scale along y")
def scale_y_matrix(s: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (1, 0, 0),
        (0, s, 0),
        (0, 0, 1),
    )


@transform_kind(name="skewX", description="Shear x by tan(angle)")
def skew_x_matrix(s: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (1, ops.tan(s), 0),
        (0, 1, 0),
        (0, 0, 1),
    )


@transform_kind(name="skewY", description="Shear y by tan(angle)")
def skew_y_matrix(s: Operand, ops: Arithmetic) -> Matrix3:
    return (
        (1, 0, 0),
        (ops.tan(s), 1, 0),
        (0, 0, 1),
    )


@transform_kind(name="rotateZ", aliases=("rotate",), description="Rotate by angle (radians)")
def rotate_z_matrix(r: Operand, ops: Arithmetic) -> Matrix3:
    cos_r = ops.cos(r)
    sin_r = ops.sin(r)
    return (
        (cos_r, ops.negate(sin_r), 0),
        (sin_r, cos_r, 0),
        (0, 0, 1),
    )
