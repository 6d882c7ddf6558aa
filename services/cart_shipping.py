"""
Cart Shipping Calculation Service

Loads the shipping configuration tables for a cart (weight rate bands, vendor
MOQ rules, vendors, shipping matrix routes) and delegates the calculation to
the pure ShippingService.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from models.cartItem import CartItemDTO
from models.shipping_calculation import ShippingCalculationResultDTO
from repositories.shipping_rate import WeightRateBandRepository, VendorShippingRuleRepository
from repositories.shipping_route import ShippingRouteRepository
from repositories.vendor import VendorRepository
from services.shipping import ShippingService
from utils.shipping_validation import validate_rate_band_coverage

logger = logging.getLogger(__name__)


class CartShippingService:
    """Service for calculating shipping costs in cart context."""

    @staticmethod
    async def calculate_shipping_for_cart(
        cart_items: list[CartItemDTO],
        session: AsyncSession | Session,
        multi_address_mode: bool = False,
        customer_region_id: str | None = None
    ) -> ShippingCalculationResultDTO:
        """
        Calculate shipping for a cart from the current configuration tables.

        Args:
            cart_items: Cart lines
            session: Database session
            multi_address_mode: True if the order ships to multiple addresses
            customer_region_id: Destination region, enables location-based pricing

        Returns:
            ShippingCalculationResultDTO

        Example:
            >>> result = await CartShippingService.calculate_shipping_for_cart(cart_items, session)
            >>> result.weight_based_cost
            2500.0
            >>> result.consolidated_schedule
            'Scent House: Ships in 3 days | Oud Palace: Ships weekly'
        """
        vendor_ids = []
        for item in cart_items:
            vendor_id = item.product.vendor_id if item.product else None
            if vendor_id and vendor_id not in vendor_ids:
                vendor_ids.append(vendor_id)

        logger.info(f"[CartShipping] calculate_shipping_for_cart called with {len(cart_items)} items, "
                    f"{len(vendor_ids)} vendors, region={customer_region_id or 'global'}")

        rate_bands = await WeightRateBandRepository.get_all(session)
        if rate_bands:
            is_valid, error = validate_rate_band_coverage(rate_bands)
            if not is_valid:
                logger.warning(f"[CartShipping] Weight rate bands are incomplete: {error}")

        vendor_rules = await VendorShippingRuleRepository.get_active_by_vendor_ids(vendor_ids, session)
        vendors = await VendorRepository.get_by_ids(vendor_ids, session)

        routes = []
        if customer_region_id:
            routes = await ShippingRouteRepository.get_active_by_destination(customer_region_id, session)

        logger.info(f"[CartShipping] Loaded {len(rate_bands)} bands, {len(vendor_rules)} vendor rules, "
                    f"{len(vendors)} vendors, {len(routes)} routes")

        result = ShippingService.calculate_shipping(
            cart_items,
            rate_bands=rate_bands,
            vendor_rules=vendor_rules,
            vendors=vendors,
            multi_address_mode=multi_address_mode,
            customer_region_id=customer_region_id,
            routes=routes
        )

        logger.info(f"[CartShipping] Result: {result.total_weight:.2f}kg @ {result.weight_based_cost}, "
                    f"schedule='{result.consolidated_schedule}'")
        return result

    @staticmethod
    async def get_weight_based_shipping_cost(total_weight: float, session: AsyncSession | Session) -> float:
        """
        Resolve the weight-based shipping cost from the configured bands.

        Unlike calculate_shipping_for_cart, no default bands are substituted:
        an empty table resolves to 0.
        """
        rate_bands = await WeightRateBandRepository.get_all(session)
        return ShippingService.get_weight_based_shipping_cost(total_weight, rate_bands)

    @staticmethod
    async def get_vendor_shipping_schedule(
        vendor_id: str,
        quantity: int,
        session: AsyncSession | Session
    ) -> str | None:
        """Resolve a vendor's delivery schedule for a quantity from its active rules."""
        vendor_rules = await VendorShippingRuleRepository.get_active_by_vendor_ids([vendor_id], session)
        return ShippingService.get_vendor_shipping_schedule(vendor_id, quantity, vendor_rules)
