"""
Unit Tests: WeightService

Tests for services/weight.py covering:
- Explicit product weight vs size-derived weight vs default
- Packaging allowance tiers
- Multi-address per-unit floor
- Total weight additivity

Run with:
    pytest tests/shipment/unit/test_weight_service.py -v
"""

import pytest

from models.cartItem import CartItemDTO, CartProductDTO
from services.weight import WeightService


def make_item(product_id="p1", quantity=1, weight=None, size=None, vendor_id=None):
    return CartItemDTO(
        product_id=product_id,
        quantity=quantity,
        product=CartProductDTO(id=product_id, name=f"Perfume {product_id}", weight=weight, size=size, vendor_id=vendor_id)
    )


class TestGetProductWeight:
    """Test WeightService.get_product_weight()"""

    def test_explicit_weight_wins(self):
        product = CartProductDTO(id="p1", name="A", weight=1.0, size="200ml")

        assert WeightService.get_product_weight(product) == 1.0

    def test_30ml_bottle(self):
        product = CartProductDTO(id="p1", name="A", size="30ml")

        assert WeightService.get_product_weight(product) == pytest.approx(0.18)

    def test_200ml_bottle(self):
        product = CartProductDTO(id="p1", name="A", size="200ml")

        assert WeightService.get_product_weight(product) == pytest.approx(0.7)

    @pytest.mark.parametrize("size,expected", [
        ("50ml", 0.25),
        ("100ml", 0.40),
        ("3.4 oz", 0.40),
        ("101ml", 0.601),
    ])
    def test_packaging_tiers(self, size, expected):
        product = CartProductDTO(id="p1", name="A", size=size)

        assert WeightService.get_product_weight(product) == pytest.approx(expected)

    def test_zero_weight_falls_back_to_size(self):
        product = CartProductDTO(id="p1", name="A", weight=0, size="30ml")

        assert WeightService.get_product_weight(product) == pytest.approx(0.18)

    @pytest.mark.parametrize("product", [
        None,
        CartProductDTO(id="p1", name="A"),
        CartProductDTO(id="p1", name="A", size="Tester"),
        CartProductDTO(id="p1", name="A", size="9" * 400 + "ml"),
    ])
    def test_default_weight(self, product):
        assert WeightService.get_product_weight(product) == 0.5


class TestCalculateTotalWeight:
    """Test WeightService.calculate_total_weight()"""

    def test_explicit_weights_single_address(self):
        items = [make_item("a", 2, weight=0.1), make_item("b", 1, weight=1.0)]

        assert WeightService.calculate_total_weight(items) == pytest.approx(1.2)

    def test_empty_cart(self):
        assert WeightService.calculate_total_weight([]) == 0

    def test_multi_address_floor_applied(self):
        items = [make_item("a", 1, size="30ml")]

        assert WeightService.calculate_total_weight(items, multi_address_mode=True) == pytest.approx(0.5)

    def test_multi_address_floor_per_unit(self):
        items = [make_item("a", 4, weight=0.1)]

        assert WeightService.calculate_total_weight(items, multi_address_mode=True) == pytest.approx(2.0)

    def test_multi_address_heavy_items_unchanged(self):
        items = [make_item("a", 3, weight=1.0)]

        assert WeightService.calculate_total_weight(items, multi_address_mode=True) == pytest.approx(3.0)

    @pytest.mark.parametrize("multi_address_mode", [False, True])
    def test_additive_over_items(self, multi_address_mode):
        a = make_item("a", 2, size="30ml")
        b = make_item("b", 3, weight=1.2)

        total = WeightService.calculate_total_weight([a, b], multi_address_mode)

        assert total == pytest.approx(
            WeightService.calculate_total_weight([a], multi_address_mode)
            + WeightService.calculate_total_weight([b], multi_address_mode)
        )
