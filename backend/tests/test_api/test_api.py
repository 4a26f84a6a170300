"""Tests for API endpoints."""

from __future__ import annotations

import math

import pytest
from fastapi.testclient import TestClient

from matrix2d.main import app
from tests.conftest import MIXED_TRANSFORMS


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 9


def test_transforms_listing():
    response = client.get("/api/transforms")
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "translateX", "translateY", "scale", "scaleX", "scaleY", "skewX", "skewY", "rotateZ", "rotate",
    }
    assert data["rotate"] == data["rotateZ"]


def test_compose_order():
    response = client.post("/api/compose", json={"transforms": [{"scale": 2}, {"translateX": 5}]})
    assert response.status_code == 200
    assert response.json()["matrix"] == [[2.0, 0.0, 10.0], [0.0, 2.0, 0.0], [0.0, 0.0, 1.0]]
    assert response.json()["decomposition"] is None


def test_compose_empty_is_identity():
    response = client.post("/api/compose", json={"transforms": []})
    assert response.status_code == 200
    assert response.json()["matrix"] == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]


def test_compose_with_decomposition():
    response = client.post(
        "/api/compose",
        json={"transforms": [{"translateX": 7}, {"translateY": -3}, {"scale": 4}], "decompose": True},
    )
    assert response.status_code == 200
    decomposition = response.json()["decomposition"]
    assert decomposition["translateX"] == pytest.approx(7.0)
    assert decomposition["translateY"] == pytest.approx(-3.0)
    assert decomposition["scale"] == pytest.approx(4.0)


def test_compose_unknown_transform():
    response = client.post("/api/compose", json={"transforms": [{"translateZ": 1}]})
    assert response.status_code == 422
    assert "Unknown transform" in response.json()["detail"]


@pytest.mark.parametrize("record", [{}, {"translateX": 1, "rotate": 2}])
def test_compose_malformed_record(record):
    response = client.post("/api/compose", json={"transforms": [record]})
    assert response.status_code == 422


def test_decompose_round_trip():
    composed = client.post("/api/compose", json={"transforms": MIXED_TRANSFORMS}).json()["matrix"]
    response = client.post("/api/decompose", json={"matrix": composed})
    assert response.status_code == 200
    data = response.json()
    assert len(data["transforms"]) == 6

    rebuilt = client.post("/api/compose", json={"transforms": data["transforms"]}).json()["matrix"]
    for row, expected in zip(rebuilt, composed):
        assert row == pytest.approx(expected, abs=1e-9)


def test_decompose_non_uniform_scale_uses_fallback():
    response = client.post("/api/decompose", json={"matrix": [[3, 0, 0], [0, 2, 0], [0, 0, 1]]})
    assert response.status_code == 200
    decomposition = response.json()["decomposition"]
    assert decomposition["scaleX"] == pytest.approx(3.0)
    assert decomposition["scaleY"] == pytest.approx(2.0)
    assert decomposition["scale"] == 1.0


def test_decompose_rejects_wrong_shape():
    response = client.post("/api/decompose", json={"matrix": [[1, 0], [0, 1]]})
    assert response.status_code == 422


def test_animate():
    response = client.post(
        "/api/animate",
        json={"transforms": [{"rotate": {"from": 0, "to": math.pi}}, {"scale": 2}], "frames": 3},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["frames"] == 3
    assert data["progress"] == [0.0, 0.5, 1.0]
    assert len(data["matrices"]) == 3
    assert data["matrices"][2][0][0] == pytest.approx(-2.0)
    assert data["decomposition"]["scaleX"] == pytest.approx([2.0, 2.0, 2.0])
    assert data["graph_nodes"] > 0


def test_animate_frame_limit():
    response = client.post("/api/animate", json={"transforms": [], "frames": 100_000})
    assert response.status_code == 422


def test_animate_unknown_transform():
    response = client.post("/api/animate", json={"transforms": [{"perspective": 1}], "frames": 2})
    assert response.status_code == 422


def test_decompose_overflow_serializes_as_null():
    response = client.post("/api/decompose", json={"matrix": [[1e308, 0, 0], [0, 1e308, 0], [0, 0, 1]]})
    assert response.status_code == 200
    decomposition = response.json()["decomposition"]
    assert decomposition["scaleX"] is None
    assert decomposition["scaleY"] is None
    assert decomposition["scale"] is None
    assert decomposition["translateX"] == 0.0


def test_compose_overflow_serializes_as_null():
    response = client.post("/api/compose", json={"transforms": [{"scale": 1e308}, {"scale": 1e308}]})
    assert response.status_code == 200
    matrix = response.json()["matrix"]
    assert matrix[0][0] is None
    assert matrix[1][1] is None
    assert matrix[2] == [0.0, 0.0, 1.0]


def test_animate_overflow_serializes_as_null():
    response = client.post(
        "/api/animate",
        json={"transforms": [{"scale": {"from": 1e308, "to": 1e308}}], "frames": 2},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["decomposition"]["scaleX"] == [None, None]
    assert data["matrices"][0][0][0] == pytest.approx(1e308)
