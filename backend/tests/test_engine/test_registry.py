"""Tests for the transform-kind registry."""

import pytest

import matrix2d.engine.transforms  # noqa: F401
from matrix2d.engine.concrete import FLOAT
from matrix2d.engine.matrix import IDENTITY
from matrix2d.engine.registry import (
    TransformKindRegistry,
    TransformKindSpec,
    UnknownTransformError,
    get_registry,
)


def _noop(value, ops):
    return IDENTITY


def test_register_and_get():
    reg = TransformKindRegistry()
    spec = TransformKindSpec(name="shift", build=_noop)
    reg.register(spec)
    assert reg.get("shift") is spec
    assert reg.count == 1


def test_aliases_resolve_to_same_spec():
    reg = TransformKindRegistry()
    spec = TransformKindSpec(name="turn", build=_noop, aliases=("spin",))
    reg.register(spec)
    assert reg.get("spin") is spec
    assert reg.names() == ["spin", "turn"]
    assert reg.all() == [spec]


def test_duplicate_name_rejected():
    reg = TransformKindRegistry()
    reg.register(TransformKindSpec(name="turn", build=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformKindSpec(name="other", build=_noop, aliases=("turn",)))


def test_unknown_name_fails_closed():
    reg = TransformKindRegistry()
    with pytest.raises(UnknownTransformError) as exc:
        reg.get("translateZ")
    assert isinstance(exc.value, ValueError)
    assert exc.value.name == "translateZ"


def test_unhashable_name_is_unknown():
    with pytest.raises(UnknownTransformError):
        get_registry().get(["rotate"])


def test_nine_names_registered():
    reg = get_registry()
    assert reg.names() == sorted([
        "translateX",
        "translateY",
        "scale",
        "scaleX",
        "scaleY",
        "skewX",
        "skewY",
        "rotateZ",
        "rotate",
    ])
    assert reg.count == 9
    assert "rotate" in reg
    assert "perspective" not in reg


def test_rotate_is_alias_of_rotate_z():
    reg = get_registry()
    assert reg.get("rotate") is reg.get("rotateZ")
    assert reg.get("rotate").build(0.4, FLOAT) == reg.get("rotateZ").build(0.4, FLOAT)
