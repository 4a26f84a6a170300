"""Matrix decomposer — recover translate/rotate/scale/skew from a composed affine matrix.

Closed-form split of the linear part into rotation · scale · rotation, after
https://math.stackexchange.com/questions/13150/extracting-rotation-scale-values-from-2d-transformation-matrix

With R(t) the counter-clockwise rotation and S = diag(scaleX, scaleY), the
linear part satisfies

    [[a, c], [b, d]] == R(skewX) · S · R(rotateZ)

so a pure rotation splits evenly between ``rotate_z`` and ``skew_x``. The
bottom row is never read. Degenerate inputs produce inf/NaN rather than
errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from matrix2d.engine.arithmetic import Arithmetic, Operand, get_arithmetic
from matrix2d.engine.config import EngineConfig
from matrix2d.engine.matrix import Matrix3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecomposedResult:
    translate_x: Operand
    translate_y: Operand
    rotate_z: Operand
    scale_x: Operand
    scale_y: Operand
    scale: Operand
    skew_x: Operand

    def as_dict(self) -> dict[str, Operand]:
        """camelCase keys, as a transform-list consumer names them."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}

    def as_transforms(self) -> list[dict[str, Operand]]:
        """A transform list that composes back to the decomposed matrix.

        The outer rotation is carried by ``skew_x`` and the inner one by
        ``rotate_z``, so both appear as rotations.
        """
        return [
            {"translateX": self.translate_x},
            {"translateY": self.translate_y},
            {"rotateZ": self.skew_x},
            {"scaleX": self.scale_x},
            {"scaleY": self.scale_y},
            {"rotateZ": self.rotate_z},
        ]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def decompose(m: Matrix3, ops: Arithmetic | None = None, config: EngineConfig | None = None) -> DecomposedResult:
    ops = get_arithmetic(ops)
    config = config or EngineConfig()

    a = m[0][0]
    b = m[1][0]
    c = m[0][1]
    d = m[1][1]

    e = ops.divide(ops.add(a, d), 2)
    f = ops.divide(ops.subtract(a, d), 2)
    g = ops.divide(ops.add(c, b), 2)
    h = ops.divide(ops.subtract(c, b), 2)

    q = ops.sqrt(ops.add(ops.power(e, 2), ops.power(h, 2)))
    r = ops.sqrt(ops.add(ops.power(f, 2), ops.power(g, 2)))
    scale_x = ops.add(q, r)
    scale_y = ops.subtract(q, r)

    a1 = ops.atan2(g, f)
    a2 = ops.atan2(h, e)
    theta = ops.divide(ops.subtract(a2, a1), 2)
    phi = ops.divide(ops.add(a2, a1), 2)

    result = DecomposedResult(
        translate_x=m[0][2],
        translate_y=m[1][2],
        rotate_z=ops.negate(phi),
        scale_x=scale_x,
        scale_y=scale_y,
        scale=ops.select(ops.equals(scale_x, scale_y), scale_x, config.scale_fallback),
        skew_x=ops.negate(theta),
    )
    logger.debug("Decomposed matrix with %s arithmetic", ops.name)
    return result
