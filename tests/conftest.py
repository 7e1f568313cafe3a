"""Shared pytest fixtures for the geojson-typed test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def valid_feature_collection_path(data_dir: Path) -> Path:
    """Path to a FeatureCollection with a point, a line and a polygon."""
    return data_dir / "01_feature_collection.geojson"


@pytest.fixture()
def invalid_polygon_path(data_dir: Path) -> Path:
    """Path to a Polygon whose exterior ring has only three positions."""
    return data_dir / "02_polygon_short_ring.geojson"


@pytest.fixture()
def not_json_path(data_dir: Path) -> Path:
    """Path to a file that is not JSON at all."""
    return data_dir / "03_not_json.geojson"


# ---------------------------------------------------------------------------
# Sample documents (RFC 7946 appendix A)
# ---------------------------------------------------------------------------


@pytest.fixture()
def point_data() -> dict[str, Any]:
    return {"type": "Point", "coordinates": [100.0, 0.0]}


@pytest.fixture()
def line_string_data() -> dict[str, Any]:
    return {"type": "LineString", "coordinates": [[100.0, 0.0], [101.0, 1.0]]}


@pytest.fixture()
def polygon_data() -> dict[str, Any]:
    """Polygon with one hole."""
    return {
        "type": "Polygon",
        "coordinates": [
            [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
            [[100.8, 0.8], [100.8, 0.2], [100.2, 0.2], [100.2, 0.8], [100.8, 0.8]],
        ],
    }


@pytest.fixture()
def multi_point_data() -> dict[str, Any]:
    return {"type": "MultiPoint", "coordinates": [[100.0, 0.0], [101.0, 1.0]]}


@pytest.fixture()
def multi_line_string_data() -> dict[str, Any]:
    return {
        "type": "MultiLineString",
        "coordinates": [
            [[100.0, 0.0], [101.0, 1.0]],
            [[102.0, 2.0], [103.0, 3.0]],
        ],
    }


@pytest.fixture()
def multi_polygon_data() -> dict[str, Any]:
    return {
        "type": "MultiPolygon",
        "coordinates": [
            [[[102.0, 2.0], [103.0, 2.0], [103.0, 3.0], [102.0, 3.0], [102.0, 2.0]]],
            [
                [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
                [[100.2, 0.2], [100.2, 0.8], [100.8, 0.8], [100.8, 0.2], [100.2, 0.2]],
            ],
        ],
    }


@pytest.fixture()
def geometry_collection_data(point_data: dict[str, Any], line_string_data: dict[str, Any]) -> dict[str, Any]:
    return {"type": "GeometryCollection", "geometries": [point_data, line_string_data]}


@pytest.fixture()
def feature_data() -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [102.0, 0.5]},
        "properties": {"name": "Test Point", "tags": ["a", "b"], "meta": {"rank": 1}},
        "id": "test-001",
    }


@pytest.fixture()
def feature_collection_data() -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [102.0, 0.5]},
                "properties": {"name": "Location 1"},
            },
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [103.0, 1.5]},
                "properties": {"name": "Location 2"},
            },
        ],
    }
