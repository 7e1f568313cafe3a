"""Typed Feature and FeatureCollection objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from geojson_typed.core import constants
from geojson_typed.models.geometries import Geometry
from geojson_typed.models.primitives import BoundingBox, JSONValue, to_plain


@dataclass(frozen=True, slots=True)
class Feature:
    """A spatially bounded entity: a geometry plus free-form properties.

    Attributes:
        geometry: The feature's geometry, or ``None`` for an unlocated feature.
        properties: Read-only mapping of property values, or ``None``.
        id: Optional identifier (string or number); ``None`` when absent.
        bbox: Optional bounding box; ``None`` when absent.
    """

    type: ClassVar[str] = constants.FEATURE

    geometry: Geometry | None
    properties: Mapping[str, JSONValue] | None
    id: str | int | float | None = None
    bbox: BoundingBox | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain GeoJSON mapping.

        ``geometry`` and ``properties`` are always present (possibly
        ``null``); ``id`` and ``bbox`` only when set.
        """
        data: dict[str, object] = {
            constants.TYPE_KEY: self.type,
            constants.GEOMETRY_KEY: None if self.geometry is None else self.geometry.to_dict(),
            constants.PROPERTIES_KEY: None if self.properties is None else to_plain(self.properties),
        }
        if self.id is not None:
            data[constants.ID_KEY] = self.id
        if self.bbox is not None:
            data[constants.BBOX_KEY] = list(self.bbox)
        return data

    @property
    def __geo_interface__(self) -> dict[str, object]:
        return self.to_dict()


@dataclass(frozen=True, slots=True)
class FeatureCollection:
    """An ordered collection of features."""

    type: ClassVar[str] = constants.FEATURE_COLLECTION

    features: tuple[Feature, ...]
    bbox: BoundingBox | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain GeoJSON mapping."""
        data: dict[str, object] = {
            constants.TYPE_KEY: self.type,
            constants.FEATURES_KEY: [feature.to_dict() for feature in self.features],
        }
        if self.bbox is not None:
            data[constants.BBOX_KEY] = list(self.bbox)
        return data

    @property
    def __geo_interface__(self) -> dict[str, object]:
        return self.to_dict()


GeoJSON: TypeAlias = Geometry | Feature | FeatureCollection
