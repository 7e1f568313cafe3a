"""Validator configuration.

Every option has a default that matches plain RFC 7946 decoding. Services
embedding the validator can load overrides from environment variables with
``ValidatorConfig.from_env()``.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is
    malformed or out of its valid range, so bad configuration is caught
    at startup rather than on the first request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geojson_typed.core.exceptions import ConfigValidationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

MAX_NESTING_DEPTH_LIMIT = 100
"""Upper bound for ``max_nesting_depth``; keeps collection recursion well inside Python's stack."""


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable validator options.

    Attributes:
        allow_nested_geometry_collections: Accept GeometryCollections as
            members of a GeometryCollection. RFC 7946 section 3.1.8 advises
            against nesting, so this is off by default.
        enforce_ring_closure: Require the first and last positions of every
            LinearRing to be equal.
        reject_non_finite_numbers: Reject ``NaN`` and infinities in
            positions and bounding boxes.
        max_nesting_depth: How many GeometryCollections deep a member
            collection may sit. Only used when nesting is allowed; property
            values are accepted at any depth.
    """

    allow_nested_geometry_collections: bool = False
    enforce_ring_closure: bool = False
    reject_non_finite_numbers: bool = False
    max_nesting_depth: int = 64

    def __post_init__(self) -> None:
        _validate(self)

    @classmethod
    def from_env(cls) -> ValidatorConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a boolean variable is not a recognised
                flag, ``GEOJSON_MAX_NESTING_DEPTH`` is not an integer, or a
                value is out of range.
        """
        return cls(
            allow_nested_geometry_collections=_env_flag("GEOJSON_ALLOW_NESTED_COLLECTIONS", False),
            enforce_ring_closure=_env_flag("GEOJSON_ENFORCE_RING_CLOSURE", False),
            reject_non_finite_numbers=_env_flag("GEOJSON_REJECT_NON_FINITE", False),
            max_nesting_depth=_env_int("GEOJSON_MAX_NESTING_DEPTH", 64),
        )


def _env_flag(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    normalised = raw.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/true/yes/on or 0/false/no/off")


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be an integer") from exc


def _validate(config: ValidatorConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    depth = config.max_nesting_depth
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ConfigValidationError("max_nesting_depth", depth, "must be an integer")

    if not 1 <= depth <= MAX_NESTING_DEPTH_LIMIT:
        raise ConfigValidationError(
            "max_nesting_depth",
            depth,
            f"must be between 1 and {MAX_NESTING_DEPTH_LIMIT}",
        )


DEFAULT_CONFIG = ValidatorConfig()
