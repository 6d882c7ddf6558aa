"""
Discount Threshold Repository

Handles database operations for cart incentive thresholds.
"""

import logging
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_execute, session_flush
from enums.discount_threshold import ThresholdTarget
from exceptions.cart import InvalidDiscountThresholdException
from models.discount_threshold import DiscountThreshold, DiscountThresholdDTO
from utils.shipping_validation import validate_discount_threshold

logger = logging.getLogger(__name__)


class DiscountThresholdRepository:
    """Repository for discount threshold database operations."""

    @staticmethod
    async def get_active_global(session: AsyncSession | Session) -> list[DiscountThresholdDTO]:
        """
        Get active store-wide thresholds.

        Returns:
            list[DiscountThresholdDTO]: Thresholds sorted by threshold (ascending)
        """
        stmt = (
            select(DiscountThreshold)
            .where(DiscountThreshold.is_active == True)
            .where(DiscountThreshold.target_type == ThresholdTarget.GLOBAL.value)
            .order_by(DiscountThreshold.threshold.asc())
        )
        result = await session_execute(stmt, session)
        return [DiscountThresholdDTO.model_validate(t, from_attributes=True) for t in result.scalars().all()]

    @staticmethod
    async def create(threshold_data: DiscountThresholdDTO, session: AsyncSession | Session) -> DiscountThresholdDTO:
        """
        Create a discount threshold.

        Raises:
            InvalidDiscountThresholdException: If threshold <= 0 or discount_value < 0
        """
        is_valid, error = validate_discount_threshold(threshold_data.threshold, threshold_data.discount_value)
        if not is_valid:
            raise InvalidDiscountThresholdException(threshold_data.name, error)

        threshold = DiscountThreshold(
            name=threshold_data.name,
            type=threshold_data.type.value,
            threshold=threshold_data.threshold,
            discount_type=threshold_data.discount_type.value,
            discount_value=threshold_data.discount_value,
            target_type=threshold_data.target_type.value,
            is_active=threshold_data.is_active
        )
        session.add(threshold)
        await session_flush(session)

        logger.info(f"Created discount threshold '{threshold.name}': {threshold.type} >= {threshold.threshold}")

        return DiscountThresholdDTO.model_validate(threshold, from_attributes=True)
