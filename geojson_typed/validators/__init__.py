"""GeoJSON validators, decoders and encoders.

Modules, leaves first:
- **primitives**: Position, BoundingBox, LinearRing
- **geometries**: the six leaf geometries, GeometryCollection, Geometry union
- **features**: Feature, FeatureCollection
- **geojson**: top-level GeoJSON union

Every public type ``T`` has ``parse_<t>`` (raises ``GeoJSONValidationError``),
``is_valid_<t>`` (never raises) and ``encode_<t>`` (inverse of parse).
"""

from geojson_typed.validators.features import (
    encode_feature,
    encode_feature_collection,
    is_valid_feature,
    is_valid_feature_collection,
    parse_feature,
    parse_feature_collection,
)
from geojson_typed.validators.geojson import encode_geojson, is_valid_geojson, parse_geojson
from geojson_typed.validators.geometries import (
    encode_geometry,
    encode_geometry_collection,
    encode_line_string,
    encode_multi_line_string,
    encode_multi_point,
    encode_multi_polygon,
    encode_point,
    encode_polygon,
    is_valid_geometry,
    is_valid_geometry_collection,
    is_valid_line_string,
    is_valid_multi_line_string,
    is_valid_multi_point,
    is_valid_multi_polygon,
    is_valid_point,
    is_valid_polygon,
    parse_geometry,
    parse_geometry_collection,
    parse_line_string,
    parse_multi_line_string,
    parse_multi_point,
    parse_multi_polygon,
    parse_point,
    parse_polygon,
)
from geojson_typed.validators.primitives import (
    is_valid_bounding_box,
    is_valid_linear_ring,
    is_valid_position,
    validate_bounding_box,
    validate_linear_ring,
    validate_position,
)

__all__ = [
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
