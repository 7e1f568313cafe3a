"""Primitive GeoJSON value types.

Positions, bounding boxes and linear rings are plain tuples: they have no
discriminant and no members, only numbers in a fixed order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

Position: TypeAlias = tuple[float, ...]
"""``(longitude, latitude[, altitude, ...])`` — at least two numbers."""

BoundingBox: TypeAlias = tuple[float, ...]
"""``(west, south, east, north)`` or ``(west, south, min_z, east, north, max_z)``."""

LinearRing: TypeAlias = tuple[Position, ...]
"""Closed ring of at least four positions (first and last are equivalent)."""

JSONValue: TypeAlias = (
    None | bool | int | float | str | tuple["JSONValue", ...] | Mapping[str, "JSONValue"]
)
"""A frozen JSON value: arrays are tuples, objects are read-only mappings."""


def to_plain(value: object) -> object:
    """Convert a frozen value back into plain ``list``/``dict`` JSON data.

    Walks with an explicit stack, so property values of any depth convert.
    """
    if not isinstance(value, (tuple, Mapping)):
        return value
    root: list[object] | dict[str, object] = {} if isinstance(value, Mapping) else []
    stack = [(value, root)]
    while stack:
        source, target = stack.pop()
        items = source.items() if isinstance(source, Mapping) else enumerate(source)
        for key, item in items:
            child = item
            if isinstance(item, (tuple, Mapping)):
                child = {} if isinstance(item, Mapping) else []
                stack.append((item, child))
            if isinstance(target, dict):
                target[key] = child
            else:
                target.append(child)
    return root
