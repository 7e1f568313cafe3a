"""Typed geometry objects.

Each class mirrors one RFC 7946 geometry type. The discriminant is a
class-level ``type`` attribute, so ``Point.type == "Point"`` and every
instance reports its own GeoJSON type without storing it.

Design notes:
- All models are frozen dataclasses; coordinates are nested tuples.
- ``bbox`` is ``None`` when the member was absent; ``to_dict()`` omits it.
- ``__geo_interface__`` exposes the encoded mapping so shapely and other
  libraries implementing the protocol accept these objects directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from geojson_typed.core import constants
from geojson_typed.models.primitives import BoundingBox, LinearRing, Position, to_plain


class _GeometryMixin:
    """Shared encoding for coordinate-carrying geometries."""

    __slots__ = ()

    type: ClassVar[str]

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain GeoJSON mapping."""
        data: dict[str, object] = {
            constants.TYPE_KEY: self.type,
            constants.COORDINATES_KEY: to_plain(self.coordinates),  # type: ignore[attr-defined]
        }
        if self.bbox is not None:  # type: ignore[attr-defined]
            data[constants.BBOX_KEY] = list(self.bbox)  # type: ignore[attr-defined]
        return data

    @property
    def __geo_interface__(self) -> dict[str, object]:
        return self.to_dict()


@dataclass(frozen=True, slots=True)
class Point(_GeometryMixin):
    """A single position."""

    type: ClassVar[str] = constants.POINT

    coordinates: Position
    bbox: BoundingBox | None = None


@dataclass(frozen=True, slots=True)
class MultiPoint(_GeometryMixin):
    """Zero or more positions."""

    type: ClassVar[str] = constants.MULTI_POINT

    coordinates: tuple[Position, ...]
    bbox: BoundingBox | None = None


@dataclass(frozen=True, slots=True)
class LineString(_GeometryMixin):
    """Two or more positions joined in order."""

    type: ClassVar[str] = constants.LINE_STRING

    coordinates: tuple[Position, ...]
    bbox: BoundingBox | None = None


@dataclass(frozen=True, slots=True)
class MultiLineString(_GeometryMixin):
    """Zero or more line strings, each of two or more positions."""

    type: ClassVar[str] = constants.MULTI_LINE_STRING

    coordinates: tuple[tuple[Position, ...], ...]
    bbox: BoundingBox | None = None


@dataclass(frozen=True, slots=True)
class Polygon(_GeometryMixin):
    """An exterior linear ring followed by zero or more holes."""

    type: ClassVar[str] = constants.POLYGON

    coordinates: tuple[LinearRing, ...]
    bbox: BoundingBox | None = None

    @property
    def exterior(self) -> LinearRing:
        """The exterior (first) ring."""
        return self.coordinates[0]

    @property
    def holes(self) -> tuple[LinearRing, ...]:
        """Interior rings, if any."""
        return self.coordinates[1:]


@dataclass(frozen=True, slots=True)
class MultiPolygon(_GeometryMixin):
    """Zero or more polygons, each given as its rings."""

    type: ClassVar[str] = constants.MULTI_POLYGON

    coordinates: tuple[tuple[LinearRing, ...], ...]
    bbox: BoundingBox | None = None


BasicGeometry: TypeAlias = Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """A heterogeneous collection of geometries.

    Members are basic geometries unless the validator was configured with
    ``allow_nested_geometry_collections``.
    """

    type: ClassVar[str] = constants.GEOMETRY_COLLECTION

    geometries: tuple[Geometry, ...]
    bbox: BoundingBox | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain GeoJSON mapping."""
        data: dict[str, object] = {
            constants.TYPE_KEY: self.type,
            constants.GEOMETRIES_KEY: [geometry.to_dict() for geometry in self.geometries],
        }
        if self.bbox is not None:
            data[constants.BBOX_KEY] = list(self.bbox)
        return data

    @property
    def __geo_interface__(self) -> dict[str, object]:
        return self.to_dict()


Geometry: TypeAlias = BasicGeometry | GeometryCollection

GEOMETRY_CLASSES: tuple[type, ...] = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
)
