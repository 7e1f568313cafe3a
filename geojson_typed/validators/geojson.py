"""Top-level GeoJSON dispatcher — the main entry point.

Reads the ``type`` member once: geometry discriminants go to the Geometry
union, ``"Feature"`` and ``"FeatureCollection"`` to their own validators.
Anything else is a ``ShapeMismatchError`` listing the accepted types.
"""

from __future__ import annotations

from geojson_typed.core import constants
from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import Path
from geojson_typed.models.features import Feature, FeatureCollection, GeoJSON
from geojson_typed.models.geometries import GEOMETRY_CLASSES
from geojson_typed.validators._base import conforms, decode, encode, read_discriminant
from geojson_typed.validators.features import read_feature, read_feature_collection
from geojson_typed.validators.geometries import read_geometry

GEOJSON_CLASSES: tuple[type, ...] = (*GEOMETRY_CLASSES, Feature, FeatureCollection)


def read_geojson(value: object, path: Path, config: ValidatorConfig) -> GeoJSON:
    tag = read_discriminant(value, path, constants.GEOJSON_TYPES)
    if tag == constants.FEATURE:
        return read_feature(value, path, config)
    if tag == constants.FEATURE_COLLECTION:
        return read_feature_collection(value, path, config)
    return read_geometry(value, path, config)


def parse_geojson(data: object, *, config: ValidatorConfig | None = None) -> GeoJSON:
    """Decode any GeoJSON object into its typed value.

    Args:
        data: Parsed JSON (``dict``/``list``/``str``/numbers/``None``).
        config: Validator options; defaults to ``ValidatorConfig()``.

    Returns:
        A frozen ``Point``, ``MultiPoint``, ``LineString``,
        ``MultiLineString``, ``Polygon``, ``MultiPolygon``,
        ``GeometryCollection``, ``Feature`` or ``FeatureCollection``.

    Raises:
        GeoJSONValidationError: The first violation found. Inspect
            ``path``, ``expected``, ``actual`` and ``shape`` (or call
            ``to_error_dict()``) to build a diagnostic.
    """
    return decode(read_geojson, data, config, "GeoJSON")


def is_valid_geojson(data: object, *, config: ValidatorConfig | None = None) -> bool:
    """Return whether *data* is valid GeoJSON. Never raises for bad input."""
    return conforms(read_geojson, data, config)


def encode_geojson(value: GeoJSON) -> dict[str, object]:
    """Encode a decoded value back into plain GeoJSON data.

    ``parse_geojson(encode_geojson(v)) == v`` for every decoded ``v``.

    Raises:
        EncodeError: If *value* is not one of the GeoJSON model classes.
    """
    return encode(value, GEOJSON_CLASSES, "GeoJSON")
