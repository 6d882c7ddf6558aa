"""
Unit Tests: Numeric coercion helpers (utils/numbers.py)
"""

from decimal import Decimal

import pytest

from utils.numbers import to_number, round_half_up


class TestToNumber:
    """Test to_number()"""

    @pytest.mark.parametrize("value,expected", [
        (12500, 12500.0),
        ("12500.5", 12500.5),
        (" 42 ", 42.0),
        (Decimal("19.99"), 19.99),
    ])
    def test_numeric_values(self, value, expected):
        assert to_number(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [
        None, "", "  ", "abc", True, False, float("nan"), float("inf"), [], {},
    ])
    def test_invalid_values_use_fallback(self, value):
        assert to_number(value, 0) == 0
        assert to_number(value) is None


class TestRoundHalfUp:
    """Test round_half_up()"""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (3.5, 4),
        (2.4, 2),
        (-2.5, -2),
        (999.5, 1000),
    ])
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected
