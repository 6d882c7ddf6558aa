"""
Cart Incentive Service

Tells the customer how far the cart is from the next store-wide discount
("add ₦12,000 more to unlock 5% off") and which discount is already unlocked.
"""

import logging
import math

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from enums.discount_threshold import ThresholdType, ThresholdTarget
from models.discount_threshold import DiscountThresholdDTO, CartIncentiveResultDTO
from repositories.discount_threshold import DiscountThresholdRepository
from utils.numbers import round_half_up

logger = logging.getLogger(__name__)


class CartIncentiveService:

    @staticmethod
    def evaluate(
        cart_subtotal: float,
        cart_item_count: int,
        thresholds: list[DiscountThresholdDTO]
    ) -> CartIncentiveResultDTO:
        """
        Evaluate cart progress against discount thresholds.

        Only active, global thresholds are considered. When both a value and a
        quantity threshold are still ahead, the one the cart is proportionally
        closer to is reported (value wins ties).

        Args:
            cart_subtotal: Cart subtotal in NGN
            cart_item_count: Number of units in the cart
            thresholds: Configured thresholds (any order)

        Returns:
            CartIncentiveResultDTO
        """
        applicable = sorted(
            (t for t in thresholds if t.is_active and t.target_type == ThresholdTarget.GLOBAL),
            key=lambda t: t.threshold
        )
        value_thresholds = [t for t in applicable if t.type == ThresholdType.VALUE]
        quantity_thresholds = [t for t in applicable if t.type == ThresholdType.QUANTITY]

        next_value = next((t for t in value_thresholds if cart_subtotal < t.threshold), None)
        next_quantity = next((t for t in quantity_thresholds if cart_item_count < t.threshold), None)

        unlocked = [t for t in value_thresholds if cart_subtotal >= t.threshold]
        unlocked += [t for t in quantity_thresholds if cart_item_count >= t.threshold]
        unlocked_threshold = max(unlocked, key=lambda t: t.discount_value) if unlocked else None

        if next_value and next_quantity:
            value_progress = cart_subtotal / next_value.threshold
            quantity_progress = cart_item_count / next_quantity.threshold
            next_threshold = next_value if value_progress >= quantity_progress else next_quantity
        else:
            next_threshold = next_value or next_quantity

        if next_threshold is None:
            return CartIncentiveResultDTO(
                current_progress=cart_item_count,
                progress_percentage=100 if unlocked_threshold else 0,
                all_thresholds=applicable,
                unlocked_threshold=unlocked_threshold
            )

        if next_threshold.type == ThresholdType.VALUE:
            current_progress = cart_subtotal
            amount_to_next = round_half_up((next_threshold.threshold - cart_subtotal) * 100) / 100
            items_to_next = 0
        else:
            current_progress = cart_item_count
            amount_to_next = 0.0
            items_to_next = math.ceil(next_threshold.threshold - cart_item_count)

        return CartIncentiveResultDTO(
            current_progress=current_progress,
            next_threshold=next_threshold,
            amount_to_next=amount_to_next,
            items_to_next=items_to_next,
            progress_percentage=min(current_progress / next_threshold.threshold * 100, 100),
            all_thresholds=applicable,
            unlocked_threshold=unlocked_threshold
        )

    @staticmethod
    async def evaluate_for_cart(
        cart_subtotal: float,
        cart_item_count: int,
        session: AsyncSession | Session
    ) -> CartIncentiveResultDTO:
        """Evaluate a cart against the thresholds currently configured in the database."""
        thresholds = await DiscountThresholdRepository.get_active_global(session)
        result = CartIncentiveService.evaluate(cart_subtotal, cart_item_count, thresholds)
        if result.next_threshold:
            logger.debug(f"[CartIncentive] Next threshold '{result.next_threshold.name}' "
                         f"at {result.progress_percentage:.0f}%")
        return result
