"""Pytest configuration and shared fixtures for clustering tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from sketchcad.domain.value_objects import Bed, Region


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def square_region() -> Region:
    """Square region for cluster "0" covering (0, 0)-(10, 10)."""
    return Region(group_key="0", points=((0, 0), (10, 0), (10, 10), (0, 10)))


@pytest.fixture
def four_beds() -> list[Bed]:
    """Four beds with ids 0-3, areas 10-40 and one outline each."""
    return [
        Bed(
            bed_id=i,
            area=area,
            polygons=(((i * 10, 0), (i * 10 + 5, 0), (i * 10 + 5, 5)),),
        )
        for i, area in enumerate((10, 20, 30, 40))
    ]


@pytest.fixture
def four_points() -> list[tuple[float, float]]:
    """Projection points: the first two inside the square region."""
    return [(2, 2), (5, 5), (20, 20), (30, 5)]


# =============================================================================
# Session file fixtures
# =============================================================================


@pytest.fixture
def session_data() -> dict[str, Any]:
    """A valid session document with two clusters."""
    return {
        "schema_version": "1.0",
        "beds": [
            {"bed_id": 0, "area": 10, "polygons": [[[0, 0], [4, 0], [4, 3]]]},
            {"bed_id": 1, "area": 20, "polygons": [[[5, 5], [9, 5], [9, 8]]]},
            {"bed_id": 2, "area": 30, "polygons": [[[10, 10], [14, 10], [14, 13]]]},
            {"bed_id": 3, "area": 40, "polygons": []},
        ],
        "points": [[1, 1], [2, 2], [21, 21], [50, 50]],
        "regions": [
            {"group_key": "0", "points": [[0, 0], [3, 0], [3, 3], [0, 3]]},
            {"group_key": 1, "points": [[20, 20], [22, 20], [22, 22], [20, 22]]},
        ],
        "export": {"type": "detailed"},
    }


@pytest.fixture
def session_file(tmp_path: Path, session_data: dict[str, Any]) -> Path:
    """Session document written to a temporary file."""
    path = tmp_path / "session.json"
    path.write_text(json.dumps(session_data), encoding="utf-8")
    return path
