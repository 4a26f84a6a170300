"""Transform composer — fold an ordered transform list into one affine matrix."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

import matrix2d.engine.transforms  # noqa: F401  (registers the transform kinds)
from matrix2d.engine.arithmetic import Arithmetic, Operand, get_arithmetic
from matrix2d.engine.concrete import is_array
from matrix2d.engine.matrix import IDENTITY, Matrix3, multiply3
from matrix2d.engine.registry import get_registry

logger = logging.getLogger(__name__)


class InvalidTransformError(ValueError):
    """A transform descriptor is not a single-key record."""


@dataclass(frozen=True, eq=False)
class Transform:
    """One transform list entry: a registered kind and its single parameter.

    Array values compare by content; symbolic values compare by identity.
    """

    name: str
    value: Operand

    def __post_init__(self) -> None:
        # unknown kinds fail here, before any matrix is built
        get_registry().get(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        if self.name != other.name:
            return False
        if is_array(self.value) or is_array(other.value):
            return bool(np.array_equal(self.value, other.value))
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> Transform:
        """``{"rotate": 0.5}`` → ``Transform("rotate", 0.5)``."""
        if not isinstance(record, Mapping):
            raise InvalidTransformError(f"Transform must be a mapping, got {type(record).__name__}")
        if len(record) != 1:
            raise InvalidTransformError(f"Transform must have exactly one key, got {sorted(record)}")
        ((name, value),) = record.items()
        return cls(name, value)

    def as_mapping(self) -> dict[str, Operand]:
        return {self.name: self.value}

    def matrix(self, ops: Arithmetic | None = None) -> Matrix3:
        return get_registry().get(self.name).build(self.value, get_arithmetic(ops))


TransformLike = Union[Transform, Mapping[str, Any]]


def translate_x(x: Operand) -> Transform:
    return Transform("translateX", x)


def translate_y(y: Operand) -> Transform:
    return Transform("translateY", y)


def scale(s: Operand) -> Transform:
    return Transform("scale", s)


def scale_x(s: Operand) -> Transform:
    return Transform("scaleX", s)


def scale_y(s: Operand) -> Transform:
    return Transform("scaleY", s)


def skew_x(angle: Operand) -> Transform:
    return Transform("skewX", angle)


def skew_y(angle: Operand) -> Transform:
    return Transform("skewY", angle)


def rotate_z(angle: Operand) -> Transform:
    return Transform("rotateZ", angle)


def rotate(angle: Operand) -> Transform:
    return Transform("rotate", angle)


def parse_transforms(transforms: Iterable[TransformLike]) -> list[Transform]:
    return [t if isinstance(t, Transform) else Transform.from_mapping(t) for t in transforms]


def compose(transforms: Iterable[TransformLike], ops: Arithmetic | None = None) -> Matrix3:
    """Multiply the transforms' matrices left to right, starting from the identity.

    Accepts ``Transform`` objects or single-key mappings. Every entry is
    validated before any multiplication happens.
    """
    ops = get_arithmetic(ops)
    parsed = parse_transforms(transforms)

    acc = IDENTITY
    for t in parsed:
        acc = multiply3(acc, t.matrix(ops), ops)

    logger.debug("Composed %d transforms with %s arithmetic", len(parsed), ops.name)
    return acc
