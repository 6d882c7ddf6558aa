"""
ComboService Unit Tests

Tests bundle generation and ranking (singles + pairs), affinity scoring and
deal summary assembly.

Run with:
    pytest tests/pricing/unit/test_combo_service.py -v
"""

import math

import pytest

from enums.price_tier import PriceTier
from models.product import EnrichedProductDTO
from services.combo import ComboService


def make_product(product_id, savings=0.0, margin=None, stock=0, scent=None, gender=None,
                 tier=PriceTier.MID, best_price=20000):
    return EnrichedProductDTO(
        id=product_id,
        name=f"Perfume {product_id}",
        base_price=best_price,
        best_price=best_price,
        reference_price=best_price + savings,
        savings_amount=savings,
        savings_percent=0,
        margin_amount=margin,
        margin_percent=None,
        stock=stock,
        scent_profile=scent,
        gender=gender,
        price_tier=tier,
    )


class TestAffinityScore:
    """Test ComboService.affinity_score()"""

    def test_full_affinity(self):
        a = make_product("a", scent="woody", gender="unisex")
        b = make_product("b", scent="woody", gender="unisex")

        assert ComboService.affinity_score(a, b) == 4

    def test_missing_attributes_do_not_match(self):
        a = make_product("a", tier=PriceTier.BUDGET)
        b = make_product("b", tier=PriceTier.LUXURY)

        assert ComboService.affinity_score(a, b) == 0

    def test_same_tier_only(self):
        a = make_product("a", scent="woody", gender="male")
        b = make_product("b", scent="floral", gender="female")

        assert ComboService.affinity_score(a, b) == 1


class TestBuildCombos:
    """Test ComboService.build_combos()"""

    def test_counts(self):
        products = [make_product(str(i)) for i in range(5)]

        combos = ComboService.build_combos(products, max_pair_sample_size=3)

        singles = [c for c in combos if len(c.product_ids) == 1]
        pairs = [c for c in combos if len(c.product_ids) == 2]
        assert len(singles) == 5
        assert len(pairs) == 3
        assert all(set(c.product_ids) <= {"0", "1", "2"} for c in pairs)

    def test_default_sample_size(self):
        products = [make_product(str(i)) for i in range(4)]

        assert len(ComboService.build_combos(products)) == 4 + 6

    @pytest.mark.parametrize("cap", [0, 1, -3])
    def test_no_pairs_below_two_samples(self, cap):
        products = [make_product(str(i)) for i in range(3)]

        combos = ComboService.build_combos(products, max_pair_sample_size=cap)

        assert len(combos) == 3

    def test_empty(self):
        assert ComboService.build_combos([]) == []

    def test_single_score(self):
        product = make_product("a", savings=1000, margin=500, stock=100)

        [combo] = ComboService.build_combos([product])

        assert combo.score == pytest.approx(1000 * 0.6 + 500 * 0.3 + 2 * 0.1)
        assert combo.total_savings == 1000
        assert combo.total_reference_price == 21000

    def test_pair_score_and_totals(self):
        a = make_product("a", savings=1000, margin=200, stock=40, scent="woody")
        b = make_product("b", savings=500, stock=60, scent="woody")

        pair = next(c for c in ComboService.build_combos([a, b]) if len(c.product_ids) == 2)

        assert pair.product_ids == ["a", "b"]
        assert pair.total_price == 40000
        assert pair.total_savings == 1500
        # affinity: same scent (2) + same tier (1)
        assert pair.score == pytest.approx(1500 * 0.5 + 200 * 0.3 + 3 * 5 + math.log10(100) * 0.2)

    def test_sorted_by_score_descending(self):
        products = [
            make_product("a", savings=100),
            make_product("b", savings=5000),
            make_product("c", savings=2000, scent="woody"),
        ]

        combos = ComboService.build_combos(products)

        scores = [c.score for c in combos]
        assert scores == sorted(scores, reverse=True)
        assert combos[0].product_ids == ["b", "c"]

    def test_ties_keep_generation_order(self):
        products = [make_product("a"), make_product("b")]

        combos = ComboService.build_combos(products)

        # Pair scores 5 (same tier), singles tie at 0 in input order
        assert [c.product_ids for c in combos] == [["a", "b"], ["a"], ["b"]]


class TestGetDealSummaries:
    """Test ComboService.get_deal_summaries()"""

    def test_attaches_products_in_combo_order(self):
        products = [make_product("a", savings=100), make_product("b", savings=5000)]
        combos = ComboService.build_combos(products)

        summaries = ComboService.get_deal_summaries(combos, products, limit=2)

        assert len(summaries) == 2
        assert [p.id for p in summaries[0].items] == summaries[0].combo.product_ids

    def test_unknown_products_skipped(self):
        products = [make_product("a")]
        combos = ComboService.build_combos([make_product("a"), make_product("ghost")])

        summaries = ComboService.get_deal_summaries(combos, products)

        assert [s.combo.product_ids for s in summaries] == [["a"]]
