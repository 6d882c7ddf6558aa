"""
Combo Ranking Service

Builds ranked bundle suggestions (single products and pairs) from enriched
products. Scores weigh savings, margin, stock depth and, for pairs, how well
the two products go together (affinity).
"""

import logging
import math
from itertools import combinations

import config
from models.product import EnrichedProductDTO, ComboDTO, DealSummaryDTO

logger = logging.getLogger(__name__)

# Business-tuned scoring weights. Changing them changes every ranking.
SINGLE_SAVINGS_WEIGHT = 0.6
SINGLE_MARGIN_WEIGHT = 0.3
SINGLE_STOCK_WEIGHT = 0.1

PAIR_SAVINGS_WEIGHT = 0.5
PAIR_MARGIN_WEIGHT = 0.3
PAIR_AFFINITY_WEIGHT = 5
PAIR_STOCK_WEIGHT = 0.2

SAME_SCENT_AFFINITY = 2
SAME_GENDER_AFFINITY = 1
SAME_PRICE_TIER_AFFINITY = 1


class ComboService:
    """Service for generating and ranking product bundles."""

    @staticmethod
    def affinity_score(a: EnrichedProductDTO, b: EnrichedProductDTO) -> int:
        """
        Similarity of two products (0-4).

        - +2 same scent profile (both known)
        - +1 same gender (both known)
        - +1 same price tier
        """
        score = 0
        if a.scent_profile and b.scent_profile and a.scent_profile == b.scent_profile:
            score += SAME_SCENT_AFFINITY
        if a.gender and b.gender and a.gender == b.gender:
            score += SAME_GENDER_AFFINITY
        if a.price_tier == b.price_tier:
            score += SAME_PRICE_TIER_AFFINITY
        return score

    @staticmethod
    def _single_combo(p: EnrichedProductDTO) -> ComboDTO:
        score = (
            p.savings_amount * SINGLE_SAVINGS_WEIGHT
            + (p.margin_amount or 0) * SINGLE_MARGIN_WEIGHT
            + math.log10(max(p.stock, 1)) * SINGLE_STOCK_WEIGHT
        )
        return ComboDTO(
            product_ids=[p.id],
            total_price=p.best_price,
            total_reference_price=p.reference_price,
            total_savings=p.savings_amount,
            score=score
        )

    @staticmethod
    def _pair_combo(a: EnrichedProductDTO, b: EnrichedProductDTO) -> ComboDTO:
        total_savings = a.savings_amount + b.savings_amount
        combo_margin = (a.margin_amount or 0) + (b.margin_amount or 0)
        score = (
            total_savings * PAIR_SAVINGS_WEIGHT
            + combo_margin * PAIR_MARGIN_WEIGHT
            + ComboService.affinity_score(a, b) * PAIR_AFFINITY_WEIGHT
            + math.log10(max(a.stock + b.stock, 1)) * PAIR_STOCK_WEIGHT
        )
        return ComboDTO(
            product_ids=[a.id, b.id],
            total_price=a.best_price + b.best_price,
            total_reference_price=a.reference_price + b.reference_price,
            total_savings=total_savings,
            score=score
        )

    @staticmethod
    def build_combos(
        products: list[EnrichedProductDTO],
        max_pair_sample_size: int | None = None
    ) -> list[ComboDTO]:
        """
        Build single and pairwise combos, sorted best-first.

        Pairs are only drawn from the first max_pair_sample_size products, which
        caps the O(n^2) pair generation on large catalogs. Equal scores keep
        their generation order (singles first, then pairs in input order).

        Args:
            products: Enriched products
            max_pair_sample_size: Pair sampling cap (config.COMBO_MAX_PAIR_SAMPLE_SIZE if None)

        Returns:
            list[ComboDTO]: len(products) singles + C(min(n, cap), 2) pairs

        Example:
            >>> combos = ComboService.build_combos(PricingService.enrich_products(rows), 3)
            >>> combos[0].product_ids
            ['a', 'b']
        """
        if max_pair_sample_size is None:
            max_pair_sample_size = config.COMBO_MAX_PAIR_SAMPLE_SIZE

        singles = [ComboService._single_combo(p) for p in products]

        limited = products[:max(max_pair_sample_size, 0)]
        pairs = [ComboService._pair_combo(a, b) for a, b in combinations(limited, 2)]

        ranked = sorted(singles + pairs, key=lambda c: c.score, reverse=True)
        logger.debug(f"[Combo] Built {len(singles)} singles and {len(pairs)} pairs "
                     f"from {len(products)} products (pair sample {len(limited)})")
        return ranked

    @staticmethod
    def get_deal_summaries(
        combos: list[ComboDTO],
        products: list[EnrichedProductDTO],
        limit: int = 3
    ) -> list[DealSummaryDTO]:
        """
        Attach enriched products to the top combos, ready for narration.

        Combos referring to products missing from `products` are skipped.
        """
        products_by_id = {p.id: p for p in products}
        summaries = []
        for combo in combos:
            if len(summaries) >= limit:
                break
            items = [products_by_id.get(product_id) for product_id in combo.product_ids]
            if any(item is None for item in items):
                logger.warning(f"[Combo] Skipping combo {combo.product_ids}: unknown product")
                continue
            summaries.append(DealSummaryDTO(items=items, combo=combo))
        return summaries
