"""
Unit Tests: Localizator

Tests for utils/localizator.py covering text lookup and NGN amount formatting.
"""

import pytest

from enums.text_entity import TextEntity
from utils.localizator import Localizator


class TestLocalizator:
    """Test Localizator text lookup"""

    def test_get_text(self):
        assert Localizator.get_text(TextEntity.SHIPPING, "standard_schedule") == "Standard shipping"

    def test_explicit_language(self):
        assert Localizator.get_text(TextEntity.SHIPPING, "unknown_vendor", lang="en") == "Unknown Vendor"

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            Localizator.get_text(TextEntity.SHIPPING, "does_not_exist")

    def test_currency_symbol_and_text(self):
        assert Localizator.get_currency_symbol() == "₦"
        assert Localizator.get_currency_text() == "NGN"


class TestFormatAmount:
    """Test Localizator.format_amount()"""

    @pytest.mark.parametrize("amount,expected", [
        (0, "₦0"),
        (950, "₦950"),
        (12500.4, "₦12,500"),
        (999.5, "₦1,000"),
        (1250000, "₦1,250,000"),
    ])
    def test_whole_units_with_thousands_separator(self, amount, expected):
        assert Localizator.format_amount(amount) == expected
