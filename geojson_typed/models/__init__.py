"""Typed, immutable GeoJSON values.

Defines the data structures produced by the validators:
- Primitives: Position, BoundingBox, LinearRing and the JSON value type
- Geometries: Point, MultiPoint, LineString, MultiLineString, Polygon,
  MultiPolygon, GeometryCollection
- Features: Feature, FeatureCollection
"""

from geojson_typed.models.features import Feature, FeatureCollection, GeoJSON
from geojson_typed.models.geometries import (
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
from geojson_typed.models.primitives import BoundingBox, JSONValue, LinearRing, Position

__all__ = [
    "BasicGeometry",
    "BoundingBox",
    "Feature",
    "FeatureCollection",
    "GeoJSON",
    "Geometry",
    "GeometryCollection",
    "JSONValue",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Position",
]
