"""
Unit Tests: Order item normalization

Tests for utils/order_items.py covering:
- Defaults for empty / malformed lines
- Flat vs nested (checkout) payload shapes and field precedence
- Price and quantity coercion
- Batch normalization of non-list input

Run with:
    pytest tests/order/unit/test_order_items_normalizer.py -v
"""

import pytest

from models.cartItem import CartItemDTO, CartProductDTO
from utils.order_items import normalize_order_item, normalize_order_items


class TestNormalizeOrderItem:
    """Test normalize_order_item()"""

    def test_empty_payload_defaults(self):
        item = normalize_order_item({})

        assert item.name == "Product"
        assert item.product_id == ""
        assert item.price == 0
        assert item.quantity == 1
        assert item.image_url is None
        assert item.vendor_id is None
        assert item.vendor_name is None

    def test_flat_payload(self):
        item = normalize_order_item({
            "product_id": "p1",
            "name": "Oud Wood",
            "price": "45000",
            "quantity": 2,
            "image_url": "https://cdn.example.com/oud.jpg",
            "vendor_id": "v1",
            "vendor_name": "Scent House",
        })

        assert item.product_id == "p1"
        assert item.name == "Oud Wood"
        assert item.price == 45000
        assert item.quantity == 2
        assert item.image_url == "https://cdn.example.com/oud.jpg"
        assert item.vendor_id == "v1"
        assert item.vendor_name == "Scent House"

    def test_nested_checkout_payload(self):
        item = normalize_order_item({
            "quantity": 3,
            "product": {
                "id": "p2",
                "name": "Bleu",
                "price": 38000,
                "image_url": "bleu.jpg",
                "vendor_id": "v2",
                "vendor": {"rep_full_name": "Oud Palace"},
            },
        })

        assert item.product_id == "p2"
        assert item.name == "Bleu"
        assert item.price == 38000
        assert item.quantity == 3
        assert item.image_url == "bleu.jpg"
        assert item.vendor_id == "v2"
        assert item.vendor_name == "Oud Palace"

    def test_top_level_fields_win_over_nested(self):
        item = normalize_order_item({
            "product_id": "top",
            "product_name": "Legacy Name",
            "product": {"id": "nested", "name": "Nested Name"},
        })

        assert item.product_id == "top"
        assert item.name == "Legacy Name"

    @pytest.mark.parametrize("quantity,expected", [
        (0, 1),
        (-5, 1),
        (2.9, 2),
        ("4", 4),
        ("abc", 1),
        (None, 1),
        (float("nan"), 1),
    ])
    def test_quantity_floor(self, quantity, expected):
        item = normalize_order_item({"quantity": quantity})

        assert item.quantity == expected
        assert isinstance(item.quantity, int)

    @pytest.mark.parametrize("price", ["abc", None, float("inf"), -100])
    def test_invalid_price_defaults_to_zero(self, price):
        assert normalize_order_item({"price": price}).price == 0

    @pytest.mark.parametrize("raw", [None, 42, "text", ["a"]])
    def test_non_mapping_payload(self, raw):
        item = normalize_order_item(raw)

        assert item.name == "Product"
        assert item.quantity == 1

    def test_pydantic_cart_item(self):
        cart_item = CartItemDTO(
            product_id="p3",
            quantity=2,
            product=CartProductDTO(id="p3", name="Aventus", vendor_id="v3"),
        )

        item = normalize_order_item(cart_item)

        assert item.product_id == "p3"
        assert item.name == "Aventus"
        assert item.vendor_id == "v3"
        assert item.quantity == 2


class TestNormalizeOrderItems:
    """Test normalize_order_items()"""

    def test_list_preserves_order(self):
        items = normalize_order_items([{"product_id": "a"}, {"product_id": "b"}])

        assert [i.product_id for i in items] == ["a", "b"]

    @pytest.mark.parametrize("raw", [None, {}, "abc", 5])
    def test_non_list_input_returns_empty(self, raw):
        assert normalize_order_items(raw) == []
