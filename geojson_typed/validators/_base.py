"""Low-level readers shared by every validator.

Each reader takes the raw value, the path at which it was found and the
active ``ValidatorConfig``; it returns the frozen value or raises the
matching ``GeoJSONValidationError`` subclass.

Input is a generic parsed-JSON tree: ``None``, ``bool``, ``int``, ``float``,
``str``, ``list``/``tuple`` and string-keyed mappings.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from types import MappingProxyType
from typing import TypeVar

from geojson_typed.core import constants
from geojson_typed.core.config import DEFAULT_CONFIG, ValidatorConfig
from geojson_typed.core.exceptions import (
    ElementTypeMismatchError,
    EncodeError,
    FieldMissingError,
    FieldTypeMismatchError,
    GeoJSONValidationError,
    LengthConstraintError,
    NestingDepthError,
    Path,
    PathSegment,
    ShapeMismatchError,
    ValueConstraintError,
)
from geojson_typed.models.primitives import JSONValue

logger = logging.getLogger("geojson_typed.validators")

T = TypeVar("T")

Reader = Callable[[object, Path, ValidatorConfig], T]
"""Signature shared by every validator: ``(value, path, config) -> T``."""


# ---------------------------------------------------------------------------
# Describing values
# ---------------------------------------------------------------------------


def describe(value: object) -> str:
    """Name the JSON kind of *value* for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def is_number(value: object) -> bool:
    """JSON numbers only; ``bool`` is an ``int`` subclass but not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def quote_choices(choices: Sequence[str]) -> str:
    """``"Point"`` or ``one of "Point", "Polygon"``."""
    quoted = ", ".join(f'"{choice}"' for choice in choices)
    return quoted if len(choices) == 1 else f"one of {quoted}"


def type_mismatch(path: Path, expected: str, value: object) -> GeoJSONValidationError:
    """Build the right error for a value of the wrong kind.

    Array elements (path ending in an index) get ``ElementTypeMismatchError``;
    object members and the root get ``FieldTypeMismatchError``.
    """
    if path and isinstance(path[-1], int):
        return ElementTypeMismatchError(path, expected, describe(value))
    return FieldTypeMismatchError(path, expected, describe(value))


@contextmanager
def shape_context(shape: str) -> Iterator[None]:
    """Tag validation errors raised inside the block with *shape*.

    The innermost object being validated wins, so an error deep inside a
    FeatureCollection reports the geometry type that actually failed.
    """
    try:
        yield
    except GeoJSONValidationError as exc:
        if not exc.shape:
            exc.shape = shape
        raise


# ---------------------------------------------------------------------------
# Numbers and arrays
# ---------------------------------------------------------------------------


def read_number(value: object, path: Path, config: ValidatorConfig) -> int | float:
    """Return *value* unchanged if it is a JSON number."""
    if not is_number(value):
        raise type_mismatch(path, "a number", value)
    if config.reject_non_finite_numbers and isinstance(value, float) and not math.isfinite(value):
        raise ValueConstraintError(path, "a finite number", repr(value))
    return value  # type: ignore[return-value]


def _items(count: int) -> str:
    return f"{count} item" if count == 1 else f"{count} items"


def _length_phrase(min_items: int, max_items: int | None) -> str:
    if max_items is None:
        return f"at least {_items(min_items)}"
    if min_items == max_items:
        return f"exactly {_items(min_items)}"
    return f"between {min_items} and {_items(max_items)}"


def read_array(
    value: object,
    path: Path,
    *,
    min_items: int = 0,
    max_items: int | None = None,
) -> Sequence[object]:
    """Check that *value* is an array within the given length bounds."""
    if not is_array(value):
        raise type_mismatch(path, "an array", value)
    count = len(value)  # type: ignore[arg-type]
    if count < min_items or (max_items is not None and count > max_items):
        raise LengthConstraintError(path, _length_phrase(min_items, max_items), _items(count))
    return value  # type: ignore[return-value]


def read_items(
    value: object,
    path: Path,
    config: ValidatorConfig,
    item_reader: Reader[T],
    *,
    min_items: int = 0,
    max_items: int | None = None,
) -> tuple[T, ...]:
    """Read an array and validate every element with *item_reader*."""
    items = read_array(value, path, min_items=min_items, max_items=max_items)
    return tuple(item_reader(item, (*path, index), config) for index, item in enumerate(items))


def array_of(item_reader: Reader[T], *, min_items: int = 0) -> Reader[tuple[T, ...]]:
    """Lift an element reader into a reader for arrays of that element."""

    def read(value: object, path: Path, config: ValidatorConfig) -> tuple[T, ...]:
        return read_items(value, path, config, item_reader, min_items=min_items)

    return read


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


def read_discriminant(value: object, path: Path, accepted: Sequence[str]) -> str:
    """Return the ``type`` member of *value* if it is one of *accepted*.

    Raises:
        ShapeMismatchError: If *value* is not an object, has no ``type``,
            or its ``type`` is not an exact (case-sensitive) match.
    """
    expected = quote_choices(accepted)
    if not isinstance(value, Mapping):
        raise ShapeMismatchError(path, f"a GeoJSON object with type {expected}", describe(value))
    type_path = (*path, constants.TYPE_KEY)
    if constants.TYPE_KEY not in value:
        raise ShapeMismatchError(type_path, expected, "no type member")
    tag = value[constants.TYPE_KEY]
    if not isinstance(tag, str):
        raise ShapeMismatchError(type_path, expected, describe(tag))
    if tag not in accepted:
        raise ShapeMismatchError(type_path, expected, f'"{tag}"')
    return tag


def require(data: Mapping[str, object], key: str, path: Path) -> object:
    """Return member *key*, which must be present (it may be ``null``)."""
    if key not in data:
        raise FieldMissingError((*path, key), "a required member", "nothing")
    return data[key]


# ---------------------------------------------------------------------------
# Free-form JSON values
# ---------------------------------------------------------------------------


def check_collection_depth(path: Path, config: ValidatorConfig) -> None:
    """Bound how deeply GeometryCollections may nest inside each other.

    The level is the number of ``geometries`` members on the path, so a
    collection inside a FeatureCollection gets the same budget as a
    top-level one.
    """
    level = path.count(constants.GEOMETRIES_KEY)
    if level > config.max_nesting_depth:
        raise NestingDepthError(
            path,
            f"at most {config.max_nesting_depth} nested GeometryCollection levels",
            f"{level} levels",
        )


def _is_container(value: object) -> bool:
    return is_array(value) or isinstance(value, Mapping)


def _is_json_scalar(value: object) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def read_json_value(value: object, path: Path, config: ValidatorConfig) -> JSONValue:
    """Deep-freeze an arbitrary JSON value.

    Arrays become tuples and objects become read-only mappings. Values that
    are not JSON (sets, custom objects, non-string member names, containers
    that contain themselves) are rejected. Any nesting depth is accepted:
    the walk keeps its own stack instead of recursing.
    """
    if not _is_container(value):
        if not _is_json_scalar(value):
            raise type_mismatch(path, "a JSON value", value)
        return value  # type: ignore[return-value]

    # Each frame: (member name or index, container, pending items, frozen children).
    stack: list[tuple[PathSegment | None, object, Iterator[tuple[object, object]], list | dict]] = []
    active: set[int] = set()

    def frame_path() -> Path:
        return (*path, *(frame[0] for frame in stack[1:]))

    def push(key: PathSegment | None, container: object) -> None:
        if id(container) in active:
            raise ValueConstraintError(
                (*frame_path(), key), "a JSON value without cycles", "a reference to an enclosing container"
            )
        active.add(id(container))
        if isinstance(container, Mapping):
            stack.append((key, container, iter(container.items()), {}))
        else:
            stack.append((key, container, iter(enumerate(container)), []))  # type: ignore[arg-type]

    push(None, value)
    while True:
        key, container, items, children = stack[-1]
        for child_key, item in items:
            if isinstance(children, dict) and not isinstance(child_key, str):
                raise FieldTypeMismatchError(
                    frame_path(), "string member names", f"{describe(child_key)} key {child_key!r}"
                )
            if _is_container(item):
                push(child_key, item)  # type: ignore[arg-type]
                break
            if not _is_json_scalar(item):
                raise type_mismatch((*frame_path(), child_key), "a JSON value", item)
            if isinstance(children, dict):
                children[child_key] = item
            else:
                children.append(item)
        else:
            stack.pop()
            active.discard(id(container))
            frozen: JSONValue = (
                MappingProxyType(children) if isinstance(children, dict) else tuple(children)
            )
            if not stack:
                return frozen
            parent = stack[-1][3]
            if isinstance(parent, dict):
                parent[key] = frozen
            else:
                parent.append(frozen)


# ---------------------------------------------------------------------------
# Entry-point plumbing for the public parse / is_valid / encode functions
# ---------------------------------------------------------------------------


def decode(reader: Reader[T], data: object, config: ValidatorConfig | None, label: str) -> T:
    """Run *reader* on a whole document.

    Raises:
        GeoJSONValidationError: The first violation found, with its path.
    """
    try:
        return reader(data, (), config or DEFAULT_CONFIG)
    except GeoJSONValidationError as exc:
        logger.debug("Rejected %s input at %s: %s (%s)", label, exc.path_str, exc.code, exc)
        raise


def conforms(reader: Reader[object], data: object, config: ValidatorConfig | None) -> bool:
    """Total predicate: ``True`` if *reader* accepts *data*, never raises."""
    try:
        reader(data, (), config or DEFAULT_CONFIG)
    except GeoJSONValidationError:
        return False
    return True


def encode(value: object, accepted: type | tuple[type, ...], label: str) -> dict[str, object]:
    """Encode a model back into plain JSON data.

    Raises:
        EncodeError: If *value* is not an instance of *accepted*.
    """
    if not isinstance(value, accepted):
        raise EncodeError(label, value)
    return value.to_dict()  # type: ignore[attr-defined]
