"""Tests for Position, BoundingBox and LinearRing validation.

Covers:
- Length boundaries (Position 2/1, BoundingBox 4/6/3/7, LinearRing 4/3)
- Element type checks (strings and booleans are not numbers)
- Non-array input
- Opt-in ring closure and finiteness checks
"""

from __future__ import annotations

import math

import pytest

from geojson_typed.core.config import ValidatorConfig
from geojson_typed.core.exceptions import (
    ElementTypeMismatchError,
    FieldTypeMismatchError,
    LengthConstraintError,
    ValueConstraintError,
)
from geojson_typed.validators.primitives import (
    is_valid_bounding_box,
    is_valid_linear_ring,
    is_valid_position,
    validate_bounding_box,
    validate_linear_ring,
    validate_position,
)

SQUARE = [[0, 0], [1, 0], [1, 1], [0, 0]]


class TestPosition:
    """Position: at least two numbers."""

    def test_two_numbers_valid(self) -> None:
        assert validate_position([102.0, 0.5]) == (102.0, 0.5)

    def test_altitude_allowed(self) -> None:
        assert validate_position([1, 2, 3]) == (1, 2, 3)

    def test_no_upper_bound(self) -> None:
        assert is_valid_position([1, 2, 3, 4, 5])

    def test_one_number_invalid(self) -> None:
        with pytest.raises(LengthConstraintError) as exc_info:
            validate_position([1.0])
        assert exc_info.value.expected == "at least 2 items"
        assert exc_info.value.actual == "1 item"

    def test_empty_invalid(self) -> None:
        assert not is_valid_position([])

    def test_tuple_input_accepted(self) -> None:
        assert validate_position((1, 2)) == (1, 2)

    def test_string_input_rejected(self) -> None:
        with pytest.raises(FieldTypeMismatchError) as exc_info:
            validate_position("1,2")
        assert exc_info.value.actual == "string"

    def test_string_element_rejected_with_index(self) -> None:
        with pytest.raises(ElementTypeMismatchError) as exc_info:
            validate_position([1, "2"])
        assert exc_info.value.path == (1,)
        assert exc_info.value.expected == "a number"

    def test_bool_element_rejected(self) -> None:
        assert not is_valid_position([True, 2])

    def test_null_element_rejected(self) -> None:
        assert not is_valid_position([None, 2])

    def test_non_finite_accepted_by_default(self) -> None:
        position = validate_position([math.inf, 0.0])
        assert position[0] == math.inf

    def test_non_finite_rejected_when_configured(self) -> None:
        config = ValidatorConfig(reject_non_finite_numbers=True)
        with pytest.raises(ValueConstraintError) as exc_info:
            validate_position([0.0, math.nan], config=config)
        assert exc_info.value.path == (1,)

    def test_large_int_with_finite_check(self) -> None:
        config = ValidatorConfig(reject_non_finite_numbers=True)
        assert is_valid_position([10**400, 0], config=config)


class TestBoundingBox:
    """BoundingBox: four to six numbers."""

    @pytest.mark.parametrize("length", [4, 5, 6])
    def test_valid_lengths(self, length: int) -> None:
        assert is_valid_bounding_box(list(range(length)))

    @pytest.mark.parametrize("length", [0, 3, 7])
    def test_invalid_lengths(self, length: int) -> None:
        with pytest.raises(LengthConstraintError) as exc_info:
            validate_bounding_box(list(range(length)))
        assert exc_info.value.expected == "between 4 and 6 items"

    def test_returns_tuple(self) -> None:
        assert validate_bounding_box([-10.0, -10.0, 10.0, 10.0]) == (-10.0, -10.0, 10.0, 10.0)

    def test_null_rejected(self) -> None:
        assert not is_valid_bounding_box(None)


class TestLinearRing:
    """LinearRing: at least four positions."""

    def test_four_positions_valid(self) -> None:
        ring = validate_linear_ring(SQUARE)
        assert ring == ((0, 0), (1, 0), (1, 1), (0, 0))

    def test_three_positions_invalid(self) -> None:
        with pytest.raises(LengthConstraintError) as exc_info:
            validate_linear_ring(SQUARE[:3])
        assert exc_info.value.expected == "at least 4 items"
        assert exc_info.value.actual == "3 items"

    def test_nested_position_error_path(self) -> None:
        ring = [[0, 0], [1, 0], [1], [0, 0]]
        with pytest.raises(LengthConstraintError) as exc_info:
            validate_linear_ring(ring)
        assert exc_info.value.path == (2,)

    def test_non_array_position(self) -> None:
        with pytest.raises(ElementTypeMismatchError) as exc_info:
            validate_linear_ring([[0, 0], "x", [1, 1], [0, 0]])
        assert exc_info.value.path == (1,)
        assert exc_info.value.expected == "an array"

    def test_unclosed_ring_accepted_by_default(self) -> None:
        assert is_valid_linear_ring([[0, 0], [1, 0], [1, 1], [0, 1]])

    def test_unclosed_ring_rejected_when_enforced(self) -> None:
        config = ValidatorConfig(enforce_ring_closure=True)
        with pytest.raises(ValueConstraintError, match="closed ring"):
            validate_linear_ring([[0, 0], [1, 0], [1, 1], [0, 1]], config=config)

    def test_closed_ring_accepted_when_enforced(self) -> None:
        config = ValidatorConfig(enforce_ring_closure=True)
        assert is_valid_linear_ring(SQUARE, config=config)
