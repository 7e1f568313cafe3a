"""Unified exception taxonomy.

Every library exception inherits from ``GeoJSONError`` and carries a
machine-readable ``code`` alongside the human-readable message.

Taxonomy categories
-------------------
- ``GeoJSONValidationError`` — input does not conform to a GeoJSON shape.
  Concrete subclasses name the kind of violation:

  - ``ShapeMismatchError``        — discriminant missing, wrong or unknown.
  - ``FieldMissingError``         — required member absent.
  - ``FieldTypeMismatchError``    — member present with the wrong kind.
  - ``LengthConstraintError``     — array outside its length bounds.
  - ``ElementTypeMismatchError``  — array element with the wrong kind.
  - ``ValueConstraintError``      — opt-in value checks, cyclic property values.
  - ``NestingDepthError``         — GeometryCollections nested too deeply.

- ``ConfigValidationError``  — validator options out of range.
- ``EncodeError``            — encode called with something that is not a model.

Every exception exposes ``to_error_dict()`` for a stable structured error
payload suitable for logging and API responses.
"""

from __future__ import annotations

PathSegment = str | int
"""A member name (``str``) or array index (``int``) inside a GeoJSON tree."""

Path = tuple[PathSegment, ...]

ROOT_PATH_LABEL = "<root>"


def format_path(path: Path) -> str:
    """Render *path* as ``features[0].geometry.coordinates[1]``."""
    if not path:
        return ROOT_PATH_LABEL
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)


class GeoJSONError(Exception):
    """Base exception for all library errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. ``"FIELD_MISSING"``).
    """

    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, code: str = "") -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, GeoJSONValidationError):
            return "validation"
        if isinstance(self, ConfigValidationError):
            return "config"
        if isinstance(self, EncodeError):
            return "encode"
        return "error"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class GeoJSONValidationError(ValueError, GeoJSONError):
    """Raised when input does not conform to the requested GeoJSON shape.

    Attributes:
        path: Location of the violation, as member names and array indices.
        expected: Description of what the validator required.
        actual: Description of what was found.
        shape: GeoJSON type that was being validated when the violation was
            found (e.g. ``"Polygon"``); empty for bare primitives.

    Each violation is reported by the check that failed at *path*. A
    wrong-kind value inside an array is an ``ElementTypeMismatchError``;
    an element of the right kind that breaks its own contract keeps that
    contract's error. A one-number Position inside ``coordinates``, for
    example, is a ``LengthConstraintError`` at ``coordinates[0]``, and an
    unknown member geometry is a ``ShapeMismatchError`` at its ``type``.
    """

    default_code = "VALIDATION_FAILED"

    def __init__(
        self,
        path: Path,
        expected: str,
        actual: str,
        *,
        shape: str = "",
    ) -> None:
        self.path = tuple(path)
        self.expected = expected
        self.actual = actual
        self.shape = shape
        GeoJSONError.__init__(self, f"{format_path(self.path)}: expected {expected}, got {actual}")

    @property
    def path_str(self) -> str:
        """The violation path rendered as a string."""
        return format_path(self.path)

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload including path and expectation."""
        payload = super().to_error_dict()
        payload.update(
            {
                "path": self.path_str,
                "expected": self.expected,
                "actual": self.actual,
                "shape": self.shape,
            }
        )
        return payload


class ShapeMismatchError(GeoJSONValidationError):
    """Discriminant missing, of the wrong type, or not a recognised value."""

    default_code = "SHAPE_MISMATCH"


class FieldMissingError(GeoJSONValidationError):
    """A required member is absent from the object."""

    default_code = "FIELD_MISSING"


class FieldTypeMismatchError(GeoJSONValidationError):
    """A member is present but holds the wrong kind of value."""

    default_code = "FIELD_TYPE_MISMATCH"


class LengthConstraintError(GeoJSONValidationError):
    """An array is outside its required length bounds."""

    default_code = "LENGTH_CONSTRAINT_VIOLATION"


class ElementTypeMismatchError(GeoJSONValidationError):
    """An array element holds the wrong kind of value."""

    default_code = "ELEMENT_TYPE_MISMATCH"


class ValueConstraintError(GeoJSONValidationError):
    """A well-typed value breaks a value constraint (closure, finiteness, cycles)."""

    default_code = "VALUE_CONSTRAINT_VIOLATION"


class NestingDepthError(GeoJSONValidationError):
    """A nested GeometryCollection sits deeper than ``max_nesting_depth``."""

    default_code = "NESTING_TOO_DEEP"


# ---------------------------------------------------------------------------
# Configuration and encoding
# ---------------------------------------------------------------------------


class ConfigValidationError(GeoJSONError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        reason: Human-readable description of the valid range.
    """

    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid configuration {key}={value!r}: {reason}")


class EncodeError(TypeError, GeoJSONError):
    """Raised when an encoder receives a value that is not the expected model."""

    default_code = "ENCODE_UNSUPPORTED_VALUE"

    def __init__(self, expected: str, value: object) -> None:
        self.expected = expected
        self.value = value
        GeoJSONError.__init__(
            self,
            f"Cannot encode {type(value).__name__} as {expected}",
        )
