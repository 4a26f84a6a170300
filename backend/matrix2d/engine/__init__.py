"""matrix2d affine transform engine."""

from matrix2d.engine.arithmetic import Arithmetic, AutoArithmetic
from matrix2d.engine.composer import InvalidTransformError, Transform, compose
from matrix2d.engine.concrete import ArrayArithmetic, FloatArithmetic
from matrix2d.engine.decomposer import DecomposedResult, decompose
from matrix2d.engine.matrix import IDENTITY, Matrix3, Vec3, dot3, matrix_vec_mul3, multiply3
from matrix2d.engine.registry import UnknownTransformError, get_registry, transform_kind
from matrix2d.engine.symbolic import Node, SymbolicArithmetic, evaluate, variable

__all__ = [
    "Arithmetic",
    "AutoArithmetic",
    "FloatArithmetic",
    "ArrayArithmetic",
    "SymbolicArithmetic",
    "Node",
    "variable",
    "evaluate",
    "Vec3",
    "Matrix3",
    "IDENTITY",
    "dot3",
    "matrix_vec_mul3",
    "multiply3",
    "transform_kind",
    "get_registry",
    "UnknownTransformError",
    "InvalidTransformError",
    "Transform",
    "compose",
    "DecomposedResult",
    "decompose",
]
