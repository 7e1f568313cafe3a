"""Validators for Position, BoundingBox and LinearRing.

These shapes have no discriminant: they are arrays of numbers (or of
positions) with length constraints.

- Position     — at least 2 numbers (RFC 7946 section 3.1.1)
- BoundingBox  — 4 or 6 numbers; any length in [4, 6] is accepted (section 5)
- LinearRing   — at least 4 positions (section 3.1.6); closure is checked
  only when ``ValidatorConfig.enforce_ring_closure`` is set
"""

from __future__ import annotations

from collections.abc import Mapping

from geojson_typed.core import constants
from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import Path, ValueConstraintError
from geojson_typed.models.primitives import BoundingBox, LinearRing, Position
from geojson_typed.validators._base import conforms, decode, read_items, read_number

# ---------------------------------------------------------------------------
# Readers (value, path, config)
# ---------------------------------------------------------------------------


def read_position(value: object, path: Path, config: ValidatorConfig) -> Position:
    return read_items(
        value, path, config, read_number, min_items=constants.MIN_POSITION_LENGTH
    )


def read_bounding_box(value: object, path: Path, config: ValidatorConfig) -> BoundingBox:
    return read_items(
        value,
        path,
        config,
        read_number,
        min_items=constants.MIN_BBOX_LENGTH,
        max_items=constants.MAX_BBOX_LENGTH,
    )


def read_linear_ring(value: object, path: Path, config: ValidatorConfig) -> LinearRing:
    ring = read_items(
        value, path, config, read_position, min_items=constants.MIN_LINEAR_RING_LENGTH
    )
    if config.enforce_ring_closure and ring[0] != ring[-1]:
        raise ValueConstraintError(
            path,
            f"a closed ring (last position equal to first {list(ring[0])})",
            f"last position {list(ring[-1])}",
        )
    return ring


def read_bbox_member(
    data: Mapping[str, object], path: Path, config: ValidatorConfig
) -> BoundingBox | None:
    """Validate the optional ``bbox`` member of an object; ``None`` when absent."""
    if constants.BBOX_KEY not in data:
        return None
    return read_bounding_box(data[constants.BBOX_KEY], (*path, constants.BBOX_KEY), config)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_position(data: object, *, config: ValidatorConfig | None = None) -> Position:
    """Validate a position and return it as a tuple of numbers.

    Raises:
        GeoJSONValidationError: If *data* is not an array of at least two numbers.
    """
    return decode(read_position, data, config, "Position")


def validate_bounding_box(data: object, *, config: ValidatorConfig | None = None) -> BoundingBox:
    """Validate a bounding box of four to six numbers.

    Raises:
        GeoJSONValidationError: If *data* is not an array of 4-6 numbers.
    """
    return decode(read_bounding_box, data, config, "BoundingBox")


def validate_linear_ring(data: object, *, config: ValidatorConfig | None = None) -> LinearRing:
    """Validate a linear ring of at least four positions.

    Raises:
        GeoJSONValidationError: If *data* is not an array of at least four
            positions, or is unclosed while closure is enforced.
    """
    return decode(read_linear_ring, data, config, "LinearRing")


def is_valid_position(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_position, data, config)


def is_valid_bounding_box(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_bounding_box, data, config)


def is_valid_linear_ring(data: object, *, config: ValidatorConfig | None = None) -> bool:
    return conforms(read_linear_ring, data, config)
