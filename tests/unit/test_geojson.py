"""End-to-end tests for the top-level GeoJSON dispatcher.

Covers:
- Dispatch to every geometry, Feature and FeatureCollection
- Decode / encode round trips over the sample documents
- Totality of ``is_valid_geojson`` over arbitrary input
- Encode rejection of non-GeoJSON values
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import pytest

from geojson_typed import (
    EncodeError,
    Feature,
    FeatureCollection,
    GeoJSONValidationError,
    LengthConstraintError,
    LineString,
    Point,
    Polygon,
    ShapeMismatchError,
    ValidatorConfig,
    ValueConstraintError,
    encode_geojson,
    is_valid_geojson,
    parse_geojson,
)

SAMPLE_FIXTURES = [
    "point_data",
    "multi_point_data",
    "line_string_data",
    "multi_line_string_data",
    "polygon_data",
    "multi_polygon_data",
    "geometry_collection_data",
    "feature_data",
    "feature_collection_data",
]


class TestDispatch:
    """The ``type`` member selects the decoder."""

    @pytest.mark.parametrize("fixture_name", SAMPLE_FIXTURES)
    def test_round_trip(self, fixture_name: str, request: pytest.FixtureRequest) -> None:
        data = request.getfixturevalue(fixture_name)
        value = parse_geojson(data)
        assert value.type == data["type"]
        assert encode_geojson(value) == data
        assert parse_geojson(encode_geojson(value)) == value

    def test_point_with_altitude(self) -> None:
        value = parse_geojson({"type": "Point", "coordinates": [102.0, 0.5, 10.0]})
        assert isinstance(value, Point)
        assert value.coordinates == (102.0, 0.5, 10.0)

    def test_feature_with_null_geometry(self) -> None:
        value = parse_geojson({"type": "Feature", "geometry": None, "properties": None})
        assert isinstance(value, Feature)
        assert value.geometry is None
        assert value.properties is None

    def test_sample_file(self, valid_feature_collection_path: Path) -> None:
        data = json.loads(valid_feature_collection_path.read_text(encoding="utf-8"))
        value = parse_geojson(data)
        assert isinstance(value, FeatureCollection)
        assert value.bbox == (100.0, 0.0, 105.0, 1.0)
        assert [type(f.geometry) for f in value.features] == [Point, LineString, Polygon]
        assert value.features[2].id == 3
        assert encode_geojson(value) == data

    def test_integers_preserved(self) -> None:
        value = parse_geojson({"type": "Point", "coordinates": [1, 2]})
        assert value.coordinates == (1, 2)  # type: ignore[union-attr]
        assert all(isinstance(n, int) for n in value.coordinates)  # type: ignore[union-attr]

    def test_tuple_input_accepted(self) -> None:
        assert is_valid_geojson({"type": "LineString", "coordinates": ((0, 0), (1, 1))})

    def test_unknown_members_ignored(self, point_data: dict[str, Any]) -> None:
        point_data["crs"] = {"type": "name"}
        value = parse_geojson(point_data)
        assert "crs" not in encode_geojson(value)


class TestRejection:
    """Invalid documents report a path-annotated first error."""

    def test_short_exterior_ring(self, invalid_polygon_path: Path) -> None:
        data = json.loads(invalid_polygon_path.read_text(encoding="utf-8"))
        with pytest.raises(LengthConstraintError) as exc_info:
            parse_geojson(data)
        error = exc_info.value
        assert error.path_str == "coordinates[0]"
        assert error.shape == "Polygon"
        assert error.expected == "at least 4 items"
        assert error.actual == "3 items"

    def test_lowercase_type(self) -> None:
        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_geojson({"type": "point", "coordinates": [0, 0]})
        assert exc_info.value.actual == '"point"'
        assert '"FeatureCollection"' in exc_info.value.expected

    def test_missing_type(self) -> None:
        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_geojson({"coordinates": [0, 0]})
        assert exc_info.value.path == ("type",)

    def test_not_an_object(self) -> None:
        with pytest.raises(ShapeMismatchError) as exc_info:
            parse_geojson([1, 2])
        assert exc_info.value.path == ()
        assert exc_info.value.actual == "array"

    def test_deep_error_path(self, feature_collection_data: dict[str, Any]) -> None:
        feature_collection_data["features"][0]["geometry"] = {
            "type": "MultiPolygon",
            "coordinates": [[[[0, 0], [1, 0], [1, 1], [0, "x"]]]],
        }
        with pytest.raises(GeoJSONValidationError) as exc_info:
            parse_geojson(feature_collection_data)
        error = exc_info.value
        assert error.path_str == "features[0].geometry.coordinates[0][0][3][1]"
        assert error.shape == "MultiPolygon"
        assert error.to_error_dict()["code"] == "ELEMENT_TYPE_MISMATCH"

    def test_non_finite_rejected_when_configured(self) -> None:
        data = {"type": "Point", "coordinates": [math.nan, 0.0]}
        assert is_valid_geojson(data)
        config = ValidatorConfig(reject_non_finite_numbers=True)
        with pytest.raises(ValueConstraintError) as exc_info:
            parse_geojson(data, config=config)
        assert exc_info.value.path_str == "coordinates[0]"

    def test_unclosed_ring_rejected_when_configured(self) -> None:
        data = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1]]]}
        assert is_valid_geojson(data)
        assert not is_valid_geojson(data, config=ValidatorConfig(enforce_ring_closure=True))


def _deep_list(levels: int) -> list[Any]:
    value: list[Any] = []
    for _ in range(levels):
        value = [value]
    return value


def _cyclic_properties() -> dict[str, Any]:
    loop: list[Any] = []
    loop.append(loop)
    return {"type": "Feature", "geometry": None, "properties": {"x": loop}}


GARBAGE: list[object] = [
    None,
    True,
    0,
    1.5,
    "Point",
    b"{}",
    [],
    {},
    {"type": None},
    {"type": 1},
    {"type": ["Point"]},
    {"type": "Point"},
    {"type": "Point", "coordinates": None},
    {"type": "Point", "coordinates": [True, False]},
    {"type": "Point", "coordinates": [[0, 0]]},
    {"type": "Polygon", "coordinates": _deep_list(500)},
    _cyclic_properties(),
    {"type": "FeatureCollection", "features": [None]},
    {"type": "GeometryCollection", "geometries": {"type": "Point"}},
    object(),
]


class TestTotality:
    """``is_valid_geojson`` answers for any input and never raises."""

    @pytest.mark.parametrize("data", GARBAGE)
    def test_garbage_is_invalid(self, data: object) -> None:
        assert is_valid_geojson(data) is False

    @pytest.mark.parametrize("data", GARBAGE)
    def test_parse_raises_validation_error(self, data: object) -> None:
        with pytest.raises(GeoJSONValidationError):
            parse_geojson(data)

    def test_deep_properties_are_valid(self) -> None:
        data = {"type": "Feature", "geometry": None, "properties": {"x": _deep_list(500)}}
        assert is_valid_geojson(data) is True


class TestEncode:
    """Encoding accepts only decoded GeoJSON values."""

    @pytest.mark.parametrize("value", [None, {"type": "Point", "coordinates": [0, 0]}, (0, 0), "Point"])
    def test_rejects_non_models(self, value: object) -> None:
        with pytest.raises(EncodeError):
            encode_geojson(value)  # type: ignore[arg-type]

    def test_encoded_is_json_serialisable(self, feature_data: dict[str, Any]) -> None:
        encoded = encode_geojson(parse_geojson(feature_data))
        assert json.loads(json.dumps(encoded)) == feature_data
