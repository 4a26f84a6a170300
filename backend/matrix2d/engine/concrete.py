"""Concrete arithmetic — eager evaluation on floats and on numpy arrays.

Both follow IEEE-754: division by zero, sqrt of a negative and trig of an
infinity produce inf/NaN instead of raising. numpy does the work in both
cases so the float path and the per-frame array path agree bit for bit.
"""

from __future__ import annotations

from functools import reduce

import numpy as np
from numpy.typing import NDArray

from matrix2d.engine.arithmetic import Arithmetic, Operand


def is_array(x: object) -> bool:
    return isinstance(x, np.ndarray) and x.ndim > 0


def _f(x: Operand) -> np.float64:
    return np.float64(x)


class FloatArithmetic(Arithmetic):
    """Plain real numbers. ``select`` is an eager ternary."""

    name = "float"

    def add(self, *xs: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(reduce(np.add, (_f(x) for x in xs), np.float64(0.0)))

    def multiply(self, *xs: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(reduce(np.multiply, (_f(x) for x in xs), np.float64(1.0)))

    def subtract(self, a: Operand, b: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.subtract(_f(a), _f(b)))

    def divide(self, a: Operand, b: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.divide(_f(a), _f(b)))

    def power(self, base: Operand, exponent: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.power(_f(base), _f(exponent)))

    def sqrt(self, x: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.sqrt(_f(x)))

    def sin(self, x: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.sin(_f(x)))

    def cos(self, x: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.cos(_f(x)))

    def tan(self, x: Operand) -> float:
        with np.errstate(all="ignore"):
            return float(np.tan(_f(x)))

    def atan2(self, y: Operand, x: Operand) -> float:
        return float(np.arctan2(_f(y), _f(x)))

    def equals(self, a: Operand, b: Operand) -> bool:
        return bool(_f(a) == _f(b))

    def select(self, cond: Operand, if_true: Operand, if_false: Operand) -> Operand:
        return if_true if bool(cond) else if_false


def _arr(x: Operand) -> NDArray[np.float64]:
    return np.asarray(x, dtype=np.float64)


class ArrayArithmetic(Arithmetic):
    """Elementwise arithmetic over numpy arrays; scalars broadcast."""

    name = "array"

    def add(self, *xs: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return reduce(np.add, (_arr(x) for x in xs), _arr(0.0))

    def multiply(self, *xs: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return reduce(np.multiply, (_arr(x) for x in xs), _arr(1.0))

    def subtract(self, a: Operand, b: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.subtract(_arr(a), _arr(b))

    def divide(self, a: Operand, b: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.divide(_arr(a), _arr(b))

    def power(self, base: Operand, exponent: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.power(_arr(base), _arr(exponent))

    def sqrt(self, x: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.sqrt(_arr(x))

    def sin(self, x: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.sin(_arr(x))

    def cos(self, x: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.cos(_arr(x))

    def tan(self, x: Operand) -> NDArray[np.float64]:
        with np.errstate(all="ignore"):
            return np.tan(_arr(x))

    def atan2(self, y: Operand, x: Operand) -> NDArray[np.float64]:
        return np.arctan2(_arr(y), _arr(x))

    def equals(self, a: Operand, b: Operand) -> NDArray[np.bool_]:
        return np.equal(_arr(a), _arr(b))

    def select(self, cond: Operand, if_true: Operand, if_false: Operand) -> NDArray[np.float64]:
        return np.where(np.asarray(cond, dtype=bool), _arr(if_true), _arr(if_false))


FLOAT = FloatArithmetic()
ARRAY = ArrayArithmetic()
