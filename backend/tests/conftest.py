"""Shared test fixtures."""

from __future__ import annotations

import math

import numpy as np
import pytest

from matrix2d.engine.matrix import Matrix3, to_array


# Transform lists reused across the suite

ROTATION_ANGLES = [0.0, 0.3, 1.2, -2.0, 3.0]

MIXED_TRANSFORMS = [
    {"translateX": 12.0},
    {"translateY": -4.5},
    {"rotate": 0.7},
    {"scaleX": 1.5},
    {"skewX": 0.25},
    {"scaleY": 0.8},
    {"skewY": -0.4},
    {"rotateZ": -0.2},
]

FLIP_TRANSFORMS = [
    {"scaleX": -1.0},
    {"translateX": 3.0},
]

SKEW_TRANSFORMS = [
    {"skewX": math.pi / 6},
    {"skewY": math.pi / 8},
]


def assert_matrix_close(actual: Matrix3, expected, atol: float = 1e-9) -> None:
    np.testing.assert_allclose(to_array(actual), np.asarray(expected, dtype=np.float64), atol=atol)


def rotation(angle: float) -> np.ndarray:
    return np.array([[math.cos(angle), -math.sin(angle)], [math.sin(angle), math.cos(angle)]])


@pytest.fixture
def mixed_transforms() -> list[dict[str, float]]:
    return list(MIXED_TRANSFORMS)


@pytest.fixture
def flip_transforms() -> list[dict[str, float]]:
    return list(FLIP_TRANSFORMS)


@pytest.fixture
def skew_transforms() -> list[dict[str, float]]:
    return list(SKEW_TRANSFORMS)
