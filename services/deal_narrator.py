import logging
import re

from enums.text_entity import TextEntity
from models.product import DealSummaryDTO
from utils.localizator import Localizator

logger = logging.getLogger(__name__)

# Customer copy talks about money saved only, never percentages or store margin
_FORBIDDEN_WORD = re.compile(r"margin", re.IGNORECASE)


class DealNarratorService:

    @staticmethod
    def _display_name(name: str) -> str:
        cleaned = name.replace("%", " percent")
        while _FORBIDDEN_WORD.search(cleaned):
            cleaned = _FORBIDDEN_WORD.sub("", cleaned)
        return " ".join(cleaned.split())

    @staticmethod
    def describe_deal(deal: DealSummaryDTO, lang: str | None = None) -> str:
        """
        Turn a deal into a short customer-facing sentence.

        Only the total price and the naira amount saved are mentioned.

        Example:
            >>> DealNarratorService.describe_deal(deal)
            'Imagine picking Oud Wood today and keeping about ₦5,000 in your pocket. ...'
        """
        items = deal.items
        combo = deal.combo
        total = Localizator.format_amount(combo.total_price, lang=lang)
        savings = Localizator.format_amount(combo.total_savings, lang=lang)

        if len(items) == 1:
            key = "single_with_savings" if combo.total_savings > 0 else "single_plain"
            return Localizator.get_text(TextEntity.DEAL, key, lang=lang).format(
                name=DealNarratorService._display_name(items[0].name), total=total, savings=savings
            )

        if len(items) == 2:
            key = "pair_with_savings" if combo.total_savings > 0 else "pair_plain"
            return Localizator.get_text(TextEntity.DEAL, key, lang=lang).format(
                first=DealNarratorService._display_name(items[0].name),
                second=DealNarratorService._display_name(items[1].name),
                total=total,
                savings=savings
            )

        if not items:
            logger.warning(f"[DealNarrator] Deal {combo.product_ids} has no items, using basket copy")
        return Localizator.get_text(TextEntity.DEAL, "basket", lang=lang).format(total=total)
