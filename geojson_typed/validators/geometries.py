"""Validators for the seven GeoJSON geometry types and the Geometry union.

Each leaf geometry is checked in three steps:

1. the input is an object whose ``type`` is the exact literal discriminant;
2. ``coordinates`` matches the shape's nested-array contract;
3. ``bbox``, when present, is a valid bounding box.

Unknown members are ignored. GeometryCollection members are dispatched
through the same registry as the Geometry union, so the recursive
definition (Geometry -> GeometryCollection -> Geometry) is resolved by
lookup at dispatch time. Members that are themselves GeometryCollections
are rejected unless ``allow_nested_geometry_collections`` is set.
"""

from __future__ import annotations

from collections.abc import Mapping

from geojson_typed.core import constants
from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import Path
from geojson_typed.models.geometries import (
    GEOMETRY_CLASSES,
    BasicGeometry,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_typed.validators._base import (
    Reader,
    array_of,
    check_collection_depth,
    conforms,
    decode,
    encode,
    read_discriminant,
    read_items,
    require,
    shape_context,
)
from geojson_typed.validators.primitives import read_bbox_member, read_linear_ring, read_position

# ---------------------------------------------------------------------------
# Coordinate contracts
# ---------------------------------------------------------------------------

_read_positions = array_of(read_position)
_read_line = array_of(read_position, min_items=constants.MIN_LINE_STRING_LENGTH)
_read_lines = array_of(_read_line)
_read_rings = array_of(read_linear_ring, min_items=constants.MIN_POLYGON_RINGS)
_read_polygons = array_of(_read_rings)


def _coordinate_geometry(cls: type[BasicGeometry], coordinates_reader: Reader[object]) -> Reader[BasicGeometry]:
    """Build the reader for a geometry made of ``coordinates`` and ``bbox``."""

    def read(value: object, path: Path, config: ValidatorConfig) -> BasicGeometry:
        with shape_context(cls.type):
            read_discriminant(value, path, (cls.type,))
            data: Mapping[str, object] = value  # type: ignore[assignment]
            coordinates = coordinates_reader(
                require(data, constants.COORDINATES_KEY, path),
                (*path, constants.COORDINATES_KEY),
                config,
            )
            return cls(coordinates=coordinates, bbox=read_bbox_member(data, path, config))  # type: ignore[arg-type]

    read.__name__ = read.__qualname__ = f"read_{cls.__name__}"
    return read


read_point = _coordinate_geometry(Point, read_position)
read_multi_point = _coordinate_geometry(MultiPoint, _read_positions)
read_line_string = _coordinate_geometry(LineString, _read_line)
read_multi_line_string = _coordinate_geometry(MultiLineString, _read_lines)
read_polygon = _coordinate_geometry(Polygon, _read_rings)
read_multi_polygon = _coordinate_geometry(MultiPolygon, _read_polygons)


def read_geometry_collection(value: object, path: Path, config: ValidatorConfig) -> GeometryCollection:
    with shape_context(constants.GEOMETRY_COLLECTION):
        read_discriminant(value, path, (constants.GEOMETRY_COLLECTION,))
        check_collection_depth(path, config)
        data: Mapping[str, object] = value  # type: ignore[assignment]
        member_reader = read_geometry if config.allow_nested_geometry_collections else read_basic_geometry
        geometries = read_items(
            require(data, constants.GEOMETRIES_KEY, path),
            (*path, constants.GEOMETRIES_KEY),
            config,
            member_reader,
        )
        return GeometryCollection(geometries=geometries, bbox=read_bbox_member(data, path, config))


# ---------------------------------------------------------------------------
# Union dispatch
# ---------------------------------------------------------------------------

_GEOMETRY_READERS: dict[str, Reader[Geometry]] = {
    constants.POINT: read_point,
    constants.MULTI_POINT: read_multi_point,
    constants.LINE_STRING: read_line_string,
    constants.MULTI_LINE_STRING: read_multi_line_string,
    constants.POLYGON: read_polygon,
    constants.MULTI_POLYGON: read_multi_polygon,
    constants.GEOMETRY_COLLECTION: read_geometry_collection,
}


def read_basic_geometry(value: object, path: Path, config: ValidatorConfig) -> BasicGeometry:
    """Dispatch on ``type`` over the six leaf geometries only."""
    tag = read_discriminant(value, path, constants.BASIC_GEOMETRY_TYPES)
    return _GEOMETRY_READERS[tag](value, path, config)  # type: ignore[return-value]


def read_geometry(value: object, path: Path, config: ValidatorConfig) -> Geometry:
    """Dispatch on ``type`` over all seven geometry types.

    The discriminant selects exactly one branch; that branch's error is
    raised unchanged when the payload is invalid.
    """
    tag = read_discriminant(value, path, constants.GEOMETRY_TYPES)
    return _GEOMETRY_READERS[tag](value, path, config)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_point(data: object, *, config: ValidatorConfig | None = None) -> Point:
    """Decode a Point.

    Raises:
        GeoJSONValidationError: If *data* is not a valid Point.
    """
    return decode(read_point, data, config, constants.POINT)  # type: ignore[return-value]


def parse_multi_point(data: object, *, config: ValidatorConfig | None = None) -> MultiPoint:
    """Decode a MultiPoint.

    Raises:
        GeoJSONValidationError: If *data* is not a valid MultiPoint.
    """
    return decode(read_multi_point, data, config, constants.MULTI_POINT)  # type: ignore[return-value]


def parse_line_string(data: object, *, config: ValidatorConfig | None = None) -> LineString:
    """Decode a LineString of at least two positions.

    Raises:
        GeoJSONValidationError: If *data* is not a valid LineString.
    """
    return decode(read_line_string, data, config, constants.LINE_STRING)  # type: ignore[return-value]


def parse_multi_line_string(data: object, *, config: ValidatorConfig | None = None) -> MultiLineString:
    """Decode a MultiLineString.

    Raises:
        GeoJSONValidationError: If *data* is not a valid MultiLineString.
    """
    return decode(read_multi_line_string, data, config, constants.MULTI_LINE_STRING)  # type: ignore[return-value]


def parse_polygon(data: object, *, config: ValidatorConfig | None = None) -> Polygon:
    """Decode a Polygon of one exterior ring and optional holes.

    Raises:
        GeoJSONValidationError: If *data* is not a valid Polygon.
    """
    return decode(read_polygon, data, config, constants.POLYGON)  # type: ignore[return-value]


def parse_multi_polygon(data: object, *, config: ValidatorConfig | None = None) -> MultiPolygon:
    """Decode a MultiPolygon.

    Raises:
        GeoJSONValidationError: If *data* is not a valid MultiPolygon.
    """
    return decode(read_multi_polygon, data, config, constants.MULTI_POLYGON)  # type: ignore[return-value]


def parse_geometry_collection(
    data: object, *, config: ValidatorConfig | None = None
) -> GeometryCollection:
    """Decode a GeometryCollection.

    Raises:
        GeoJSONValidationError: If *data* is not a valid GeometryCollection,
            including when a member is itself a GeometryCollection and
            nesting is not allowed.
    """
    return decode(read_geometry_collection, data, config, constants.GEOMETRY_COLLECTION)


def parse_geometry(data: object, *, config: ValidatorConfig | None = None) -> Geometry:
    """Decode any of the seven geometry types, selected by ``type``.

    Raises:
        GeoJSONValidationError: If ``type`` is not a geometry type, or the
            payload is invalid for the type it names.
    """
    return decode(read_geometry, data, config, "Geometry")


def is_valid_point(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_point, data, config)


def is_valid_multi_point(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_multi_point, data, config)


def is_valid_line_string(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_line_string, data, config)


def is_valid_multi_line_string(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_multi_line_string, data, config)


def is_valid_polygon(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_polygon, data, config)


def is_valid_multi_polygon(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_multi_polygon, data, config)


def is_valid_geometry_collection(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_geometry_collection, data, config)


def is_valid_geometry(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_geometry, data, config)


def encode_point(value: Point) -> dict[str, object]:
    return encode(value, Point, constants.POINT)


def encode_multi_point(value: MultiPoint) -> dict[str, object]:
    return encode(value, MultiPoint, constants.MULTI_POINT)


def encode_line_string(value: LineString) -> dict[str, object]:
    return encode(value, LineString, constants.LINE_STRING)


def encode_multi_line_string(value: MultiLineString) -> dict[str, object]:
    return encode(value, MultiLineString, constants.MULTI_LINE_STRING)


def encode_polygon(value: Polygon) -> dict[str, object]:
    return encode(value, Polygon, constants.POLYGON)


def encode_multi_polygon(value: MultiPolygon) -> dict[str, object]:
    return encode(value, MultiPolygon, constants.MULTI_POLYGON)


def encode_geometry_collection(value: GeometryCollection) -> dict[str, object]:
    return encode(value, GeometryCollection, constants.GEOMETRY_COLLECTION)


def encode_geometry(value: Geometry) -> dict[str, object]:
    """Encode any geometry back into plain GeoJSON data."""
    return encode(value, GEOMETRY_CLASSES, "Geometry")
