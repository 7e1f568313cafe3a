"""Typed GeoJSON (RFC 7946) validation, decoding and encoding.

Validates generic parsed-JSON trees against the GeoJSON object shapes and
decodes them into immutable typed values, or raises a path-annotated
validation error.

Usage::

    from geojson_typed import is_valid_geojson, parse_geojson

    point = parse_geojson({"type": "Point", "coordinates": [102.0, 0.5]})
    assert point.type == "Point"
"""

__version__ = "0.1.0"

from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import (
    ConfigValidationError,
    ElementTypeMismatchError,
    EncodeError,
    FieldMissingError,
    FieldTypeMismatchError,
    GeoJSONError,
    GeoJSONValidationError,
    LengthConstraintError,
    NestingDepthError,
    ShapeMismatchError,
    ValueConstraintError,
)
from geojson_typed.models import (
    BoundingBox,
    Feature,
    FeatureCollection,
    GeoJSON,
    Geometry,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)
from geojson_typed.validators import (
    encode_feature,
    encode_feature_collection,
    encode_geojson,
    encode_geometry,
    encode_geometry_collection,
    encode_line_string,
    encode_multi_line_string,
    encode_multi_point,
    encode_multi_polygon,
    encode_point,
    encode_polygon,
    is_valid_bounding_box,
    is_valid_feature,
    is_valid_feature_collection,
    is_valid_geojson,
    is_valid_geometry,
    is_valid_geometry_collection,
    is_valid_line_string,
    is_valid_linear_ring,
    is_valid_multi_line_string,
    is_valid_multi_point,
    is_valid_multi_polygon,
    is_valid_point,
    is_valid_polygon,
    is_valid_position,
    parse_feature,
    parse_feature_collection,
    parse_geojson,
    parse_geometry,
    parse_geometry_collection,
    parse_line_string,
    parse_multi_line_string,
    parse_multi_point,
    parse_multi_polygon,
    parse_point,
    parse_polygon,
    validate_bounding_box,
    validate_linear_ring,
    validate_position,
)

__all__ = [
    "BoundingBox",
    "ConfigValidationError",
    "ElementTypeMismatchError",
    "EncodeError",
    "Feature",
    "FeatureCollection",
    "FieldMissingError",
    "FieldTypeMismatchError",
    "GeoJSON",
    "GeoJSONError",
    "GeoJSONValidationError",
    "Geometry",
    "GeometryCollection",
    "LengthConstraintError",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NestingDepthError",
    "Point",
    "Polygon",
    "Position",
    "ShapeMismatchError",
    "ValidatorConfig",
    "ValueConstraintError",
    "__version__",
    "encode_feature",
    "encode_feature_collection",
    "encode_geojson",
    "encode_geometry",
    "encode_geometry_collection",
    "encode_line_string",
    "encode_multi_line_string",
    "encode_multi_point",
    "encode_multi_polygon",
    "encode_point",
    "encode_polygon",
    "is_valid_bounding_box",
    "is_valid_feature",
    "is_valid_feature_collection",
    "is_valid_geojson",
    "is_valid_geometry",
    "is_valid_geometry_collection",
    "is_valid_line_string",
    "is_valid_linear_ring",
    "is_valid_multi_line_string",
    "is_valid_multi_point",
    "is_valid_multi_polygon",
    "is_valid_point",
    "is_valid_polygon",
    "is_valid_position",
    "parse_feature",
    "parse_feature_collection",
    "parse_geojson",
    "parse_geometry",
    "parse_geometry_collection",
    "parse_line_string",
    "parse_multi_line_string",
    "parse_multi_point",
    "parse_multi_polygon",
    "parse_point",
    "parse_polygon",
    "validate_bounding_box",
    "validate_linear_ring",
    "validate_position",
]
