import logging

from enums.group_buy_status import GroupBuyStatus
from enums.price_tier import PriceTier
from models.product import RawProductDTO, EnrichedProductDTO
from utils.numbers import to_number, round_half_up

logger = logging.getLogger(__name__)

# Inclusive upper bounds of each price tier (NGN), checked in order
PRICE_TIER_THRESHOLDS = (
    (15000, PriceTier.BUDGET),
    (35000, PriceTier.MID),
    (70000, PriceTier.PREMIUM),
)


class PricingService:
    """Service for product price enrichment (best price, savings, margin, tier)."""

    @staticmethod
    def detect_price_tier(price: float | None) -> PriceTier:
        """
        Map a price to its coarse price tier.

        Example:
            >>> PricingService.detect_price_tier(20000)
            <PriceTier.MID: 'Mid'>
            >>> PricingService.detect_price_tier(0)
            <PriceTier.UNKNOWN: 'Unknown'>
        """
        if not price or price <= 0:
            return PriceTier.UNKNOWN

        for max_price, tier in PRICE_TIER_THRESHOLDS:
            if price <= max_price:
                return tier
        return PriceTier.LUXURY

    @staticmethod
    def enrich_product(row: RawProductDTO | dict) -> EnrichedProductDTO:
        """
        Compute the pricing view of a single catalog row.

        Algorithm:
        1. base_price = listed price (non-numeric or negative -> 0)
        2. reference_price = market average -> market lowest -> base_price (first known wins)
        3. best_price = min(base_price, active group-buy discount price if > 0)
        4. savings = max(reference_price - best_price, 0), savings % rounded half-up
        5. margin = best_price - cost_price (None when cost unknown),
           margin % = margin / best_price (None when cost unknown or best_price is 0)
        6. price_tier from best_price

        Example (price ₦20,000, market average ₦25,000, no group buy):
            - reference_price: 25000
            - best_price: 20000
            - savings: 5000 (20 %)
        """
        p = row if isinstance(row, RawProductDTO) else RawProductDTO.model_validate(row)

        base_price = max(to_number(p.price, 0.0), 0.0)

        intelligence = p.price_intelligence
        market_avg = to_number(intelligence.average_market_price) if intelligence else None
        market_low = to_number(intelligence.lowest_market_price) if intelligence else None

        campaign = p.group_buy_campaigns
        group_buy_price = None
        if campaign and campaign.status == GroupBuyStatus.ACTIVE.value:
            group_buy_price = to_number(campaign.discount_price)

        if market_avg is not None:
            reference_price = market_avg
        elif market_low is not None:
            reference_price = market_low
        else:
            reference_price = base_price

        candidates = [base_price]
        if group_buy_price is not None and group_buy_price > 0:
            candidates.append(group_buy_price)
        best_price = min(candidates)

        savings_amount = max(reference_price - best_price, 0)
        savings_percent = round_half_up(savings_amount / reference_price * 100) if reference_price > 0 else 0

        cost = to_number(p.cost_price)
        margin_amount = best_price - cost if cost is not None else None
        margin_percent = None
        if cost is not None and best_price > 0:
            margin_percent = round_half_up((best_price - cost) / best_price * 100)

        return EnrichedProductDTO(
            id=p.id,
            name=p.name,
            brand=p.brand,
            base_price=base_price,
            best_price=best_price,
            reference_price=reference_price,
            savings_amount=savings_amount,
            savings_percent=savings_percent,
            margin_amount=margin_amount,
            margin_percent=margin_percent,
            stock=to_number(p.stock_quantity, 0.0),
            scent_profile=p.scent_profile,
            gender=p.gender,
            price_tier=PricingService.detect_price_tier(best_price)
        )

    @staticmethod
    def enrich_products(rows: list[RawProductDTO | dict]) -> list[EnrichedProductDTO]:
        """
        Enrich catalog rows with pricing data.

        One output per input row, in input order. Rows are never dropped:
        missing prices simply yield zero prices and the UNKNOWN tier.

        Args:
            rows: Catalog rows (DTOs or plain dicts as returned by the product store)

        Returns:
            list[EnrichedProductDTO]
        """
        enriched = [PricingService.enrich_product(row) for row in rows or []]
        logger.debug(f"[Pricing] Enriched {len(enriched)} products, "
                     f"{sum(1 for p in enriched if p.savings_amount > 0)} with savings")
        return enriched
