"""
Order item normalization.

Checkout and order-creation flows receive cart lines in two shapes:

- flat legacy shape: {"product_id", "name", "price", "quantity", "image_url", "vendor_id", "vendor_name"}
- nested checkout shape: {"product_id", "quantity", "product": {"id", "name", "price", "image_url",
  "vendor_id", "vendor": {"rep_full_name"}}}

Both are flattened into NormalizedOrderItemDTO with safe numeric coercion, so
a malformed line degrades to defaults instead of aborting checkout.
"""

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from models.orderItem import NormalizedOrderItemDTO
from utils.numbers import to_number

DEFAULT_ITEM_NAME = "Product"


def _as_mapping(value: Any) -> Mapping:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return value
    return {}


def _coalesce(*values: Any) -> Any:
    """Return the first value that is not None (empty strings and zeros count as present)."""
    for value in values:
        if value is not None:
            return value
    return None


def normalize_order_item(raw: Any) -> NormalizedOrderItemDTO:
    """
    Flatten one raw cart/order line into the canonical order item.

    Field resolution (first non-null wins):
    - name:        raw.name -> raw.product_name -> raw.product.name -> "Product"
    - product_id:  raw.product_id -> raw.product.id -> ""
    - vendor_id:   raw.vendor_id -> raw.product.vendor_id -> None
    - vendor_name: raw.vendor_name -> raw.product.vendor.rep_full_name -> None
    - image_url:   raw.image_url -> raw.product.image_url -> None
    - price:       raw.price -> raw.product.price, non-numeric or negative -> 0
    - quantity:    raw.quantity floored to an integer, never below 1

    Args:
        raw: Untrusted payload (dict, pydantic model, or anything else)

    Returns:
        NormalizedOrderItemDTO

    Example:
        >>> normalize_order_item({})
        NormalizedOrderItemDTO(product_id='', name='Product', quantity=1, price=0.0, ...)
    """
    raw = _as_mapping(raw)
    product = _as_mapping(raw.get("product"))
    vendor = _as_mapping(product.get("vendor"))

    name = _coalesce(raw.get("name"), raw.get("product_name"), product.get("name"), DEFAULT_ITEM_NAME)
    product_id = _coalesce(raw.get("product_id"), product.get("id"), "")
    vendor_id = _coalesce(raw.get("vendor_id"), product.get("vendor_id"))
    vendor_name = _coalesce(raw.get("vendor_name"), vendor.get("rep_full_name"))
    image_url = _coalesce(raw.get("image_url"), product.get("image_url"))

    price = max(to_number(_coalesce(raw.get("price"), product.get("price"), 0), 0.0), 0.0)
    quantity = max(1, math.floor(to_number(_coalesce(raw.get("quantity"), 1), 1)))

    return NormalizedOrderItemDTO(
        product_id=str(product_id) if product_id else "",
        name=str(name) if name else DEFAULT_ITEM_NAME,
        quantity=quantity,
        price=price,
        image_url=str(image_url) if image_url else None,
        vendor_id=str(vendor_id) if vendor_id else None,
        vendor_name=str(vendor_name) if vendor_name else None,
    )


def normalize_order_items(raw_items: Any) -> list[NormalizedOrderItemDTO]:
    """
    Normalize a batch of raw order lines.

    Anything that is not a list or tuple (including None) yields an empty list.
    """
    if not isinstance(raw_items, (list, tuple)):
        return []
    return [normalize_order_item(item) for item in raw_items]
