"""Validators for Feature and FeatureCollection.

A Feature has two required-but-nullable members (``geometry`` and
``properties``) and two optional ones (``id`` and ``bbox``). Optional means
the member may be left out; an explicit ``null`` there is rejected.
"""

from __future__ import annotations

from collections.abc import Mapping

from geojson_typed.core import constants
from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import Path
from geojson_typed.models.features import Feature, FeatureCollection
from geojson_typed.models.geometries import Geometry
from geojson_typed.models.primitives import JSONValue
from geojson_typed.validators._base import (
    conforms,
    decode,
    encode,
    is_number,
    read_discriminant,
    read_items,
    read_json_value,
    require,
    shape_context,
    type_mismatch,
)
from geojson_typed.validators.geometries import read_geometry
from geojson_typed.validators.primitives import read_bbox_member


def _read_geometry_member(value: object, path: Path, config: ValidatorConfig) -> Geometry | None:
    if value is None:
        return None
    return read_geometry(value, path, config)


def _read_properties(
    value: object, path: Path, config: ValidatorConfig
) -> Mapping[str, JSONValue] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise type_mismatch(path, "an object or null", value)
    return read_json_value(value, path, config)


def _read_id(value: object, path: Path) -> str | int | float:
    if isinstance(value, str) or is_number(value):
        return value  # type: ignore[return-value]
    raise type_mismatch(path, "a string or number", value)


def read_feature(value: object, path: Path, config: ValidatorConfig) -> Feature:
    with shape_context(constants.FEATURE):
        read_discriminant(value, path, (constants.FEATURE,))
        data: Mapping[str, object] = value  # type: ignore[assignment]
        geometry = _read_geometry_member(
            require(data, constants.GEOMETRY_KEY, path),
            (*path, constants.GEOMETRY_KEY),
            config,
        )
        properties = _read_properties(
            require(data, constants.PROPERTIES_KEY, path),
            (*path, constants.PROPERTIES_KEY),
            config,
        )
        feature_id = None
        if constants.ID_KEY in data:
            feature_id = _read_id(data[constants.ID_KEY], (*path, constants.ID_KEY))
        return Feature(
            geometry=geometry,
            properties=properties,
            id=feature_id,
            bbox=read_bbox_member(data, path, config),
        )


def read_feature_collection(value: object, path: Path, config: ValidatorConfig) -> FeatureCollection:
    with shape_context(constants.FEATURE_COLLECTION):
        read_discriminant(value, path, (constants.FEATURE_COLLECTION,))
        data: Mapping[str, object] = value  # type: ignore[assignment]
        features = read_items(
            require(data, constants.FEATURES_KEY, path),
            (*path, constants.FEATURES_KEY),
            config,
            read_feature,
        )
        return FeatureCollection(features=features, bbox=read_bbox_member(data, path, config))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_feature(data: object, *, config: ValidatorConfig | None = None) -> Feature:
    """Decode a Feature.

    ``geometry`` and ``properties`` must be present; either may be ``null``.

    Raises:
        GeoJSONValidationError: If *data* is not a valid Feature.
    """
    return decode(read_feature, data, config, constants.FEATURE)


def parse_feature_collection(
    data: object, *, config: ValidatorConfig | None = None
) -> FeatureCollection:
    """Decode a FeatureCollection, preserving feature order.

    Raises:
        GeoJSONValidationError: If *data* is not a valid FeatureCollection
            or any of its features is invalid.
    """
    return decode(read_feature_collection, data, config, constants.FEATURE_COLLECTION)


def is_valid_feature(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_feature, data, config)


def is_valid_feature_collection(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_feature_collection, data, config)


def encode_feature(value: Feature) -> dict[str, object]:
    return encode(value, Feature, constants.FEATURE)


def encode_feature_collection(value: FeatureCollection) -> dict[str, object]:
    return encode(value, FeatureCollection, constants.FEATURE_COLLECTION)
