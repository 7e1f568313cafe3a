"""GeoJSON discriminants and array bounds — single source of truth.

References:
    RFC 7946 section 1.1 (GeoJSON types), 3.1.1 (Position),
    3.1.6 (Polygon linear rings), 5 (Bounding Box)
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Discriminants (the ``type`` member)
# ---------------------------------------------------------------------------

POINT = "Point"
MULTI_POINT = "MultiPoint"
LINE_STRING = "LineString"
MULTI_LINE_STRING = "MultiLineString"
POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"
GEOMETRY_COLLECTION = "GeometryCollection"
FEATURE = "Feature"
FEATURE_COLLECTION = "FeatureCollection"

BASIC_GEOMETRY_TYPES: tuple[str, ...] = (
    POINT,
    MULTI_POINT,
    LINE_STRING,
    MULTI_LINE_STRING,
    POLYGON,
    MULTI_POLYGON,
)
"""Leaf geometry types, in the order GeometryCollection members are tried."""

GEOMETRY_TYPES: tuple[str, ...] = (*BASIC_GEOMETRY_TYPES, GEOMETRY_COLLECTION)

GEOJSON_TYPES: tuple[str, ...] = (*GEOMETRY_TYPES, FEATURE, FEATURE_COLLECTION)

# ---------------------------------------------------------------------------
# Array length bounds
# ---------------------------------------------------------------------------

MIN_POSITION_LENGTH = 2
"""Longitude and latitude; altitude and further elements are optional."""

MIN_BBOX_LENGTH = 4
MAX_BBOX_LENGTH = 6

MIN_LINEAR_RING_LENGTH = 4
"""Three distinct positions plus the closing position."""

MIN_LINE_STRING_LENGTH = 2

MIN_POLYGON_RINGS = 1
"""The exterior ring; any further rings are holes."""

# ---------------------------------------------------------------------------
# Member names
# ---------------------------------------------------------------------------

TYPE_KEY = "type"
COORDINATES_KEY = "coordinates"
GEOMETRIES_KEY = "geometries"
GEOMETRY_KEY = "geometry"
PROPERTIES_KEY = "properties"
FEATURES_KEY = "features"
BBOX_KEY = "bbox"
ID_KEY = "id"
