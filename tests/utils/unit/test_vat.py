"""
Unit Tests: VAT helpers (utils/vat.py)
"""

import pytest

from utils.vat import calculate_vat, calculate_total_with_vat, extract_vat_from_total


class TestVat:
    """Test VAT calculations at the Nigerian 7.5% rate"""

    def test_calculate_vat(self):
        assert calculate_vat(20000, 7.5) == pytest.approx(1500)

    def test_calculate_total_with_vat(self):
        assert calculate_total_with_vat(20000, 7.5) == pytest.approx(21500)

    def test_extract_vat_from_total(self):
        subtotal, vat_amount = extract_vat_from_total(21500, 7.5)

        assert subtotal == pytest.approx(20000)
        assert vat_amount == pytest.approx(1500)

    def test_zero_rate(self):
        assert calculate_vat(20000, 0) == 0
        assert extract_vat_from_total(20000, 0) == (20000, 0)
