"""
Shipping Calculation Service

Pure shipping computations over an immutable snapshot of the configuration
tables (weight rate bands, vendor MOQ rules, vendors, shipping matrix):

- Weight-based cost lookup against weight rate bands
- Vendor delivery schedule selection from MOQ rules
- Full cart shipping calculation (global or location-based pricing)

Nothing here touches the database; CartShippingService loads the tables and
delegates to this service.
"""

import logging

from enums.text_entity import TextEntity
from models.cartItem import CartItemDTO
from models.shipping_calculation import ShippingCalculationResultDTO, VendorScheduleDTO, VendorBreakdownDTO
from models.shipping_rate import WeightRateBandDTO, VendorShippingRuleDTO
from models.shipping_route import ShippingRouteDTO
from models.vendor import VendorDTO
from services.weight import WeightService
from utils.localizator import Localizator

logger = logging.getLogger(__name__)

# Used by calculate_shipping when no weight rate bands are configured
DEFAULT_WEIGHT_RATE_BANDS = (
    WeightRateBandDTO(min_weight=0, max_weight=2, cost=2500),
    WeightRateBandDTO(min_weight=2, max_weight=5, cost=4500),
    WeightRateBandDTO(min_weight=5, max_weight=10, cost=8000),
    WeightRateBandDTO(min_weight=10, max_weight=100, cost=15000),
)

# Carts with at least this many units ship expedited regardless of vendor rules
BULK_ORDER_MIN_QUANTITY = 12

SCHEDULE_SEPARATOR = " | "


class ShippingService:
    """Service for weight/vendor based shipping calculations."""

    @staticmethod
    def _sorted_bands(bands: list[WeightRateBandDTO] | tuple) -> list[WeightRateBandDTO]:
        # Stable sort: overlapping bands with equal min_weight keep their configured order
        return sorted(bands, key=lambda b: b.min_weight)

    @staticmethod
    def get_weight_based_shipping_cost(total_weight: float, bands: list[WeightRateBandDTO]) -> float:
        """
        Resolve the shipping cost for a weight from weight rate bands.

        Algorithm:
        1. Sort bands by min_weight ascending
        2. First band with min_weight <= weight < max_weight wins
        3. Weight at or above the highest band's max_weight uses the highest band's cost
        4. Otherwise (no bands, weight below the lowest band, weight in a gap) -> 0

        Args:
            total_weight: Cart weight in kg
            bands: Configured weight rate bands

        Returns:
            float: Shipping cost (0 if no band applies)

        Example with bands [0-2 → ₦2,500, 2-5 → ₦4,500]:
            - 1.2 kg → ₦2,500
            - 2.0 kg → ₦4,500 (upper bound is exclusive)
            - 7.0 kg → ₦4,500 (above all bands: highest band)
        """
        if not bands:
            logger.warning(f"[Shipping] No weight rate bands configured, weight {total_weight}kg resolves to 0")
            return 0

        sorted_bands = ShippingService._sorted_bands(bands)

        for band in sorted_bands:
            if band.min_weight <= total_weight < band.max_weight:
                return band.cost

        highest_band = sorted_bands[-1]
        if total_weight >= highest_band.max_weight:
            return highest_band.cost

        # TODO: decide with operations whether carts below the lowest band should pay the lowest band's cost
        logger.warning(f"[Shipping] No weight rate band matched {total_weight}kg, shipping cost resolves to 0")
        return 0

    @staticmethod
    def _get_route_fallback_cost(weight: float, bands: list[WeightRateBandDTO]) -> float:
        """
        Weight-band cost used when a vendor has no shipping matrix route.

        Same lookup as get_weight_based_shipping_cost, except that a weight below
        the lowest band is charged the lowest band's cost.
        """
        if not bands:
            return 0

        sorted_bands = ShippingService._sorted_bands(bands)
        if weight < sorted_bands[0].min_weight:
            return sorted_bands[0].cost

        return ShippingService.get_weight_based_shipping_cost(weight, sorted_bands)

    @staticmethod
    def get_vendor_shipping_schedule(
        vendor_id: str,
        quantity: int,
        rules: list[VendorShippingRuleDTO]
    ) -> str | None:
        """
        Select a vendor's delivery schedule for an aggregated cart quantity.

        Among the vendor's active rules with min_quantity <= quantity, the rule with
        the largest min_quantity (highest tier reached) wins.

        Example with rules [1 → "Ships weekly", 6 → "Ships in 3 days"]:
            - quantity 4 → "Ships weekly"
            - quantity 9 → "Ships in 3 days"
            - quantity 0 → None
        """
        applicable_rule = None
        for rule in rules:
            if rule.vendor_id != vendor_id or not rule.is_active:
                continue
            if rule.min_quantity > quantity:
                continue
            if applicable_rule is None or rule.min_quantity > applicable_rule.min_quantity:
                applicable_rule = rule

        return applicable_rule.shipping_schedule if applicable_rule else None

    @staticmethod
    def _group_by_vendor(
        cart_items: list[CartItemDTO],
        multi_address_mode: bool
    ) -> dict[str, dict]:
        """Group cart lines by vendor: {vendor_id: {"quantity": int, "weight": float}}."""
        vendor_groups = {}
        for item in cart_items:
            vendor_id = item.product.vendor_id if item.product else None
            if not vendor_id:
                # Items without a vendor count towards total weight only
                continue
            if vendor_id not in vendor_groups:
                vendor_groups[vendor_id] = {"quantity": 0, "weight": 0.0}
            vendor_groups[vendor_id]["quantity"] += item.quantity
            vendor_groups[vendor_id]["weight"] += (
                WeightService.get_unit_weight(item.product, multi_address_mode) * item.quantity
            )
        return vendor_groups

    @staticmethod
    def calculate_shipping(
        cart_items: list[CartItemDTO],
        rate_bands: list[WeightRateBandDTO] | None = None,
        vendor_rules: list[VendorShippingRuleDTO] | None = None,
        vendors: list[VendorDTO] | None = None,
        multi_address_mode: bool = False,
        customer_region_id: str | None = None,
        routes: list[ShippingRouteDTO] | None = None
    ) -> ShippingCalculationResultDTO:
        """
        Calculate weight, cost and delivery schedules for a cart.

        Global pricing (no customer_region_id):
            Cost = weight band cost of the total cart weight.

        Location-based pricing (customer_region_id given):
            Each vendor ships its own parcel. With an active shipping matrix route
            from the vendor's region to the customer's region the parcel costs
            base_cost + weight x weight_rate, otherwise its weight is priced with the
            weight bands. Cost = sum over vendors. If that sum is 0 while vendor
            breakdowns exist (misconfigured matrix), the total weight is priced
            with the bands. Carts with no vendor-tagged items cost 0.

        Schedules:
            Each vendor's aggregated quantity selects its MOQ rule; vendors without a
            matching rule are omitted. Carts of BULK_ORDER_MIN_QUANTITY units or more
            always ship "Within 2 business days".

        Args:
            cart_items: Cart lines
            rate_bands: Weight rate bands (DEFAULT_WEIGHT_RATE_BANDS if none configured)
            vendor_rules: Active vendor MOQ rules
            vendors: Vendors referenced by the cart (names and regions)
            multi_address_mode: True if the order ships to multiple addresses
            customer_region_id: Destination region for location-based pricing
            routes: Shipping matrix routes

        Returns:
            ShippingCalculationResultDTO
        """
        standard_schedule = Localizator.get_text(TextEntity.SHIPPING, "standard_schedule")
        result = ShippingCalculationResultDTO(consolidated_schedule=standard_schedule)

        if not cart_items:
            return result

        if rate_bands:
            bands = ShippingService._sorted_bands(rate_bands)
        else:
            logger.warning("[Shipping] Using default weight rate bands because none are configured")
            bands = list(DEFAULT_WEIGHT_RATE_BANDS)

        vendor_rules = vendor_rules or []
        vendors_by_id = {vendor.id: vendor for vendor in vendors or []}
        unknown_vendor = Localizator.get_text(TextEntity.SHIPPING, "unknown_vendor")

        result.total_weight = WeightService.calculate_total_weight(cart_items, multi_address_mode)
        total_quantity = sum(item.quantity for item in cart_items)
        vendor_groups = ShippingService._group_by_vendor(cart_items, multi_address_mode)

        logger.info(f"[Shipping] {len(cart_items)} items, {total_quantity} units, "
                    f"{result.total_weight:.2f}kg, {len(vendor_groups)} vendors")

        if customer_region_id:
            result.has_location_based_pricing = True
            routes_by_origin = {
                route.origin_region_id: route
                for route in routes or []
                if route.is_active and route.destination_region_id == customer_region_id
            }

            for vendor_id, group in vendor_groups.items():
                vendor = vendors_by_id.get(vendor_id)
                breakdown = VendorBreakdownDTO(
                    vendor_id=vendor_id,
                    vendor_name=vendor.rep_full_name if vendor else unknown_vendor,
                    vendor_region_id=vendor.shipping_region_id if vendor else None,
                    vendor_region_name=vendor.shipping_region_name if vendor else None,
                    total_weight=group["weight"],
                    item_count=group["quantity"],
                    shipping_cost=0,
                    schedule=standard_schedule
                )

                route = routes_by_origin.get(breakdown.vendor_region_id) if breakdown.vendor_region_id else None
                if route:
                    breakdown.shipping_cost = route.base_cost + group["weight"] * route.weight_rate
                    breakdown.estimated_days = route.estimated_days
                else:
                    breakdown.shipping_cost = ShippingService._get_route_fallback_cost(group["weight"], bands)
                    if breakdown.shipping_cost == 0 and group["weight"] > 0:
                        logger.warning(
                            f"[Shipping] No matrix route for vendor {vendor_id} from region "
                            f"{breakdown.vendor_region_id or 'none'} to {customer_region_id}, "
                            f"and no weight band matched {group['weight']}kg"
                        )

                schedule = ShippingService.get_vendor_shipping_schedule(vendor_id, group["quantity"], vendor_rules)
                if schedule:
                    breakdown.schedule = schedule
                    result.vendor_schedules.append(VendorScheduleDTO(
                        vendor_id=vendor_id,
                        vendor_name=breakdown.vendor_name,
                        quantity=group["quantity"],
                        schedule=schedule,
                        estimated_days=breakdown.estimated_days
                    ))

                result.vendor_breakdown.append(breakdown)

            result.weight_based_cost = sum(b.shipping_cost for b in result.vendor_breakdown)

            if result.weight_based_cost == 0 and result.total_weight > 0 and result.vendor_breakdown:
                result.weight_based_cost = ShippingService._get_route_fallback_cost(result.total_weight, bands)
                logger.warning(
                    f"[Shipping] All vendor shipping costs are 0, using total weight fallback: "
                    f"{result.total_weight:.2f}kg = {result.weight_based_cost}. Check shipping matrix configuration."
                )
        else:
            result.weight_based_cost = ShippingService.get_weight_based_shipping_cost(result.total_weight, bands)

            for vendor_id, group in vendor_groups.items():
                schedule = ShippingService.get_vendor_shipping_schedule(vendor_id, group["quantity"], vendor_rules)
                if schedule:
                    vendor = vendors_by_id.get(vendor_id)
                    result.vendor_schedules.append(VendorScheduleDTO(
                        vendor_id=vendor_id,
                        vendor_name=vendor.rep_full_name if vendor else unknown_vendor,
                        quantity=group["quantity"],
                        schedule=schedule
                    ))

        # Set only when a vendor rule resolved a schedule, not merely when rules exist
        result.has_vendor_rules = len(result.vendor_schedules) > 0
        if result.vendor_schedules:
            result.consolidated_schedule = SCHEDULE_SEPARATOR.join(
                f"{vs.vendor_name}: {vs.schedule}" for vs in result.vendor_schedules
            )

        if total_quantity >= BULK_ORDER_MIN_QUANTITY:
            ShippingService._apply_bulk_order_override(result)

        return result

    @staticmethod
    def _apply_bulk_order_override(result: ShippingCalculationResultDTO) -> None:
        """Expedite every schedule of a bulk order. Costs are left untouched."""
        bulk_schedule = Localizator.get_text(TextEntity.SHIPPING, "bulk_schedule")
        bulk_days = Localizator.get_text(TextEntity.SHIPPING, "bulk_estimated_days")

        result.consolidated_schedule = bulk_schedule
        result.vendor_schedules = [
            vs.model_copy(update={"schedule": bulk_schedule, "estimated_days": bulk_days})
            for vs in result.vendor_schedules
        ]
        result.vendor_breakdown = [
            bd.model_copy(update={"schedule": bulk_schedule, "estimated_days": bulk_days})
            for bd in result.vendor_breakdown
        ]
        logger.info("[Shipping] Bulk order override applied: expedited schedule")
