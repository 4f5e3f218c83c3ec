"""
Tests for header and placement validators
"""

import pytest

from pokepic.errors import InvalidDimensions
from pokepic.utils.validation import (
    validate_dimensions,
    validate_or_raise,
    validate_placement,
)


class TestValidateDimensions:
    def test_valid(self):
        assert validate_dimensions(1, 7) == []
        assert validate_dimensions(7, 1) == []

    def test_reports_every_bad_dimension(self):
        errors = validate_dimensions(0, 8)
        assert len(errors) == 2
        assert "width: 0" in errors[0]
        assert "height: 8" in errors[1]

    def test_rejects_non_integers(self):
        assert len(validate_dimensions(True, 2.0)) == 2


class TestValidatePlacement:
    def test_valid(self):
        assert validate_placement((0, 0), 7, 7) == []
        assert validate_placement((6, 6), 1, 1) == []

    def test_overflow(self):
        errors = validate_placement((1, 1), 7, 7)
        assert len(errors) == 2

    def test_negative(self):
        assert validate_placement((-1, 0), 1, 1) == ["Placement offset is negative: (-1, 0)"]

    def test_not_a_pair(self):
        assert len(validate_placement("x", 1, 1)) == 1
        assert len(validate_placement(None, 1, 1)) == 1


def test_validate_or_raise_joins_messages():
    with pytest.raises(InvalidDimensions, match="width: 0.*height: 9"):
        validate_or_raise(validate_dimensions(0, 9), "dimensions", InvalidDimensions)


def test_validate_or_raise_passes_clean_input():
    validate_or_raise([], "dimensions", InvalidDimensions)
