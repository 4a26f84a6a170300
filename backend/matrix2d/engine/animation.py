"""Animation sampling — build the transform graph once, evaluate it for every frame.

Parameters given as ``Keyframes`` interpolate linearly over a progress
variable in [0, 1]. Composition and decomposition run a single time on the
symbolic graph; sampling evaluates that graph on a numpy array of progress
values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from matrix2d.engine.arithmetic import Operand
from matrix2d.engine.composer import Transform, TransformLike, compose, parse_transforms
from matrix2d.engine.concrete import ARRAY
from matrix2d.engine.config import EngineConfig
from matrix2d.engine.decomposer import DecomposedResult, decompose
from matrix2d.engine.matrix import Matrix3, to_array
from matrix2d.engine.symbolic import Node, evaluate, graph_size, variable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keyframes:
    """A parameter moving linearly from ``start`` to ``end``."""

    start: float
    end: float

    def at(self, progress: Node) -> Node:
        return self.start + (self.end - self.start) * progress


@dataclass(frozen=True)
class Animation:
    progress: str
    transforms: tuple[Transform, ...]
    matrix: Matrix3
    decomposition: DecomposedResult

    @property
    def node_count(self) -> int:
        return graph_size((self.matrix, self.decomposition))


@dataclass(frozen=True)
class AnimationFrames:
    progress: NDArray[np.float64]
    # shape (frames, 3, 3)
    matrices: NDArray[np.float64]
    decomposition: dict[str, NDArray[np.float64]]

    def __len__(self) -> int:
        return len(self.progress)


def build_animation(transforms: Iterable[TransformLike], config: EngineConfig | None = None) -> Animation:
    config = config or EngineConfig()
    progress = variable(config.progress_variable)

    resolved: list[Transform] = []
    for t in parse_transforms(transforms):
        value = t.value.at(progress) if isinstance(t.value, Keyframes) else t.value
        resolved.append(Transform(t.name, value))

    matrix = compose(resolved)
    animation = Animation(
        progress=config.progress_variable,
        transforms=tuple(resolved),
        matrix=matrix,
        decomposition=decompose(matrix, config=config),
    )
    logger.debug("Built animation over %d transforms (%d graph nodes)", len(resolved), animation.node_count)
    return animation


def _per_frame(value: Operand, frames: int) -> NDArray[np.float64]:
    return np.broadcast_to(np.asarray(value, dtype=np.float64), (frames,)).copy()


def sample(animation: Animation, frames: int) -> AnimationFrames:
    """Evaluate the animation at ``frames`` evenly spaced progress values."""
    if frames < 1:
        raise ValueError(f"frames must be >= 1, got {frames}")
    progress = np.linspace(0.0, 1.0, frames) if frames > 1 else np.zeros(1)

    matrix, result = evaluate(
        (animation.matrix, animation.decomposition),
        {animation.progress: progress},
        arithmetic=ARRAY,
    )
    entries = [[_per_frame(x, frames) for x in row] for row in matrix]
    matrices = np.moveaxis(to_array(tuple(tuple(row) for row in entries)), -1, 0)

    decomposition = {
        name: _per_frame(value, frames)
        for name, value in result.as_dict().items()
    }
    logger.debug("Sampled %d frames", frames)
    return AnimationFrames(progress=progress, matrices=matrices, decomposition=decomposition)
