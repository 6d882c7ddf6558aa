"""
Cart Weight Estimation Service

Estimates the physical shipping weight of cart items in kilograms.
Perfume is sold by volume, so weight is usually derived from the bottle size:
liquid weight (1 g/ml) plus a packaging allowance for glass and box that grows
with the bottle size.
"""

import logging

from models.cartItem import CartItemDTO, CartProductDTO
from utils.size_notation import parse_size_ml

logger = logging.getLogger(__name__)

# Packaging allowance per bottle size: (max size in ml, allowance in kg).
# Sizes above the last bound use OVERSIZE_PACKAGING_KG.
WEIGHT_TIERS = (
    (30, 0.15),
    (60, 0.20),
    (100, 0.30),
)
OVERSIZE_PACKAGING_KG = 0.50

DEFAULT_WEIGHT_KG = 0.5  # Fallback for products without weight or size data
MULTI_ADDRESS_MIN_WEIGHT_KG = 0.5  # Per-unit floor when a cart ships to several addresses


class WeightService:
    """Service for estimating shipping weight of cart items."""

    @staticmethod
    def get_packaging_allowance(size_ml: float) -> float:
        """
        Get the packaging allowance (glass bottle + box) for a bottle size.

        Example:
            >>> WeightService.get_packaging_allowance(30)
            0.15
            >>> WeightService.get_packaging_allowance(200)
            0.5
        """
        for max_ml, allowance_kg in WEIGHT_TIERS:
            if size_ml <= max_ml:
                return allowance_kg
        return OVERSIZE_PACKAGING_KG

    @staticmethod
    def get_product_weight(product: CartProductDTO | None) -> float:
        """
        Get the estimated per-unit weight of a product in kg.

        Resolution order:
        1. Explicit product.weight (if > 0)
        2. Weight derived from product.size: ml / 1000 + packaging allowance
        3. DEFAULT_WEIGHT_KG

        Args:
            product: Product attached to the cart line (may be missing)

        Returns:
            float: Per-unit weight in kg

        Example:
            >>> WeightService.get_product_weight(CartProductDTO(id="p1", name="Oud", size="30ml"))
            0.18
        """
        if product is None:
            return DEFAULT_WEIGHT_KG

        if product.weight is not None and product.weight > 0:
            return product.weight

        if product.size:
            size_ml = parse_size_ml(product.size)
            if size_ml is not None:
                liquid_weight = size_ml / 1000
                return liquid_weight + WeightService.get_packaging_allowance(size_ml)
            logger.debug(f"[Weight] Unrecognized size '{product.size}' for product {product.id}, using default weight")

        return DEFAULT_WEIGHT_KG

    @staticmethod
    def get_unit_weight(product: CartProductDTO | None, multi_address_mode: bool = False) -> float:
        """
        Get the per-unit shipping weight, applying the multi-address floor.

        When a cart is split across several delivery addresses every unit ships
        in its own parcel, so light items are charged at least
        MULTI_ADDRESS_MIN_WEIGHT_KG. Heavier items are never reduced.
        """
        weight = WeightService.get_product_weight(product)
        if multi_address_mode:
            return max(weight, MULTI_ADDRESS_MIN_WEIGHT_KG)
        return weight

    @staticmethod
    def calculate_total_weight(cart_items: list[CartItemDTO], multi_address_mode: bool = False) -> float:
        """
        Calculate the total shipping weight of a cart in kg.

        Args:
            cart_items: Cart lines
            multi_address_mode: True if the order ships to multiple addresses

        Returns:
            float: Sum of per-unit weight x quantity over all lines (0 for an empty cart)

        Example:
            >>> items = [
            ...     CartItemDTO(product_id="1", quantity=2, product=CartProductDTO(id="1", name="A", weight=0.1)),
            ...     CartItemDTO(product_id="2", quantity=1, product=CartProductDTO(id="2", name="B", weight=1.0)),
            ... ]
            >>> round(WeightService.calculate_total_weight(items), 2)
            1.2
        """
        total = 0.0
        for item in cart_items:
            total += WeightService.get_unit_weight(item.product, multi_address_mode) * item.quantity
        return total
