"""Transform-kind registry — every transform kind is a matrix builder registered via decorator.

Usage:
    @transform_kind(name="skewX", description="Shear along x by tan(angle)")
    def skew_x_matrix(value: Operand, ops: Arithmetic) -> Matrix3:
        return ((1, ops.tan(value), 0), (0, 1, 0), (0, 0, 1))

Adding a new kind = one decorated builder. Lookups of unregistered names fail
closed with ``UnknownTransformError``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from matrix2d.engine.arithmetic import Arithmetic, Operand
    from matrix2d.engine.matrix import Matrix3

logger = logging.getLogger(__name__)

MatrixBuilder = Callable[["Operand", "Arithmetic"], "Matrix3"]


class UnknownTransformError(ValueError):
    """A transform descriptor names a kind that is not registered."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown transform: {name!r}")
        self.name = name


@dataclass
class TransformKindSpec:
    name: str
    build: MatrixBuilder
    aliases: tuple[str, ...] = ()
    description: str = ""


@dataclass
class TransformKindRegistry:
    """Name → builder lookup; aliases resolve to the same spec."""

    _kinds: dict[str, TransformKindSpec] = field(default_factory=dict)
    _names: dict[str, str] = field(default_factory=dict)

    def register(self, spec: TransformKindSpec) -> None:
        for name in (spec.name, *spec.aliases):
            if name in self._names:
                raise ValueError(f"Duplicate transform name: {name}")
        self._kinds[spec.name] = spec
        for name in (spec.name, *spec.aliases):
            self._names[name] = spec.name
        logger.debug("Registered transform kind %s (aliases: %s)", spec.name, ", ".join(spec.aliases) or "-")

    def get(self, name: str) -> TransformKindSpec:
        try:
            return self._kinds[self._names[name]]
        except (KeyError, TypeError):
            raise UnknownTransformError(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._names

    def names(self) -> list[str]:
        """Every accepted name, aliases included."""
        return sorted(self._names)

    def all(self) -> list[TransformKindSpec]:
        return sorted(self._kinds.values(), key=lambda s: s.name)

    @property
    def count(self) -> int:
        return len(self._names)


# Module-level singleton
_registry = TransformKindRegistry()


def get_registry() -> TransformKindRegistry:
    return _registry


def transform_kind(
    *,
    name: str,
    aliases: tuple[str, ...] = (),
    description: str = "",
):
    """Decorator to register a matrix builder for a transform kind."""

    def decorator(fn: MatrixBuilder) -> MatrixBuilder:
        spec = TransformKindSpec(
            name=name,
            build=fn,
            aliases=aliases,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
