"""Operand arithmetic — the primitive operations every matrix computation goes through.

An operand is a concrete number, a numpy array (one value per frame) or a
symbolic Node. Matrix and transform code is written once against the
``Arithmetic`` interface; ``AutoArithmetic`` picks the implementation per call
from the operand types, so concrete sub-expressions fold eagerly even inside
a symbolic graph.
"""

from __future__ import annotations

import abc
from typing import Any

# float, numpy array or symbolic Node
Operand = Any


class Arithmetic(abc.ABC):
    """The primitive operations over one operand representation."""

    name: str = "abstract"

    @abc.abstractmethod
    def add(self, *xs: Operand) -> Operand: ...

    @abc.abstractmethod
    def multiply(self, *xs: Operand) -> Operand: ...

    @abc.abstractmethod
    def subtract(self, a: Operand, b: Operand) -> Operand: ...

    @abc.abstractmethod
    def divide(self, a: Operand, b: Operand) -> Operand: ...

    @abc.abstractmethod
    def power(self, base: Operand, exponent: Operand) -> Operand: ...

    @abc.abstractmethod
    def sqrt(self, x: Operand) -> Operand: ...

    @abc.abstractmethod
    def sin(self, x: Operand) -> Operand: ...

    @abc.abstractmethod
    def cos(self, x: Operand) -> Operand: ...

    @abc.abstractmethod
    def tan(self, x: Operand) -> Operand: ...

    @abc.abstractmethod
    def atan2(self, y: Operand, x: Operand) -> Operand: ...

    @abc.abstractmethod
    def equals(self, a: Operand, b: Operand) -> Operand: ...

    @abc.abstractmethod
    def select(self, cond: Operand, if_true: Operand, if_false: Operand) -> Operand: ...

    def negate(self, x: Operand) -> Operand:
        return self.multiply(-1, x)


class AutoArithmetic(Arithmetic):
    """Dispatches each call on its operands: Node → symbolic, ndarray → array, else float."""

    name = "auto"

    def __init__(self) -> None:
        self._backends: tuple[Any, ...] | None = None

    def _load_backends(self) -> tuple[Any, ...]:
        # deferred: the implementations import this module
        from matrix2d.engine.concrete import ARRAY, FLOAT, is_array
        from matrix2d.engine.symbolic import SYMBOLIC, Node

        self._backends = (FLOAT, ARRAY, SYMBOLIC, Node, is_array)
        return self._backends

    def resolve(self, *operands: Operand) -> Arithmetic:
        float_ops, array_ops, symbolic_ops, node_type, is_array = self._backends or self._load_backends()

        found_array = False
        for x in operands:
            if isinstance(x, node_type):
                return symbolic_ops
            if is_array(x):
                found_array = True
        return array_ops if found_array else float_ops

    def add(self, *xs: Operand) -> Operand:
        return self.resolve(*xs).add(*xs)

    def multiply(self, *xs: Operand) -> Operand:
        return self.resolve(*xs).multiply(*xs)

    def subtract(self, a: Operand, b: Operand) -> Operand:
        return self.resolve(a, b).subtract(a, b)

    def divide(self, a: Operand, b: Operand) -> Operand:
        return self.resolve(a, b).divide(a, b)

    def power(self, base: Operand, exponent: Operand) -> Operand:
        return self.resolve(base, exponent).power(base, exponent)

    def sqrt(self, x: Operand) -> Operand:
        return self.resolve(x).sqrt(x)

    def sin(self, x: Operand) -> Operand:
        return self.resolve(x).sin(x)

    def cos(self, x: Operand) -> Operand:
        return self.resolve(x).cos(x)

    def tan(self, x: Operand) -> Operand:
        return self.resolve(x).tan(x)

    def atan2(self, y: Operand, x: Operand) -> Operand:
        return self.resolve(y, x).atan2(y, x)

    def equals(self, a: Operand, b: Operand) -> Operand:
        return self.resolve(a, b).equals(a, b)

    def select(self, cond: Operand, if_true: Operand, if_false: Operand) -> Operand:
        return self.resolve(cond, if_true, if_false).select(cond, if_true, if_false)


AUTO = AutoArithmetic()


def get_arithmetic(ops: Arithmetic | None = None) -> Arithmetic:
    return ops if ops is not None else AUTO


# Module-level primitives (operand-type dispatch)


def add(*xs: Operand) -> Operand:
    return AUTO.add(*xs)


def multiply(*xs: Operand) -> Operand:
    return AUTO.multiply(*xs)


def subtract(a: Operand, b: Operand) -> Operand:
    return AUTO.subtract(a, b)


def divide(a: Operand, b: Operand) -> Operand:
    return AUTO.divide(a, b)


def power(base: Operand, exponent: Operand) -> Operand:
    return AUTO.power(base, exponent)


def sqrt(x: Operand) -> Operand:
    return AUTO.sqrt(x)


def sin(x: Operand) -> Operand:
    return AUTO.sin(x)


def cos(x: Operand) -> Operand:
    return AUTO.cos(x)


def tan(x: Operand) -> Operand:
    return AUTO.tan(x)


def atan2(y: Operand, x: Operand) -> Operand:
    return AUTO.atan2(y, x)


def equals(a: Operand, b: Operand) -> Operand:
    return AUTO.equals(a, b)


def select(cond: Operand, if_true: Operand, if_false: Operand) -> Operand:
    return AUTO.select(cond, if_true, if_false)
