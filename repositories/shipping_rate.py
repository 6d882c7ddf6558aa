"""
Shipping Rate Repositories

Handles database operations for weight rate bands and vendor MOQ shipping rules.
"""

import logging
from sqlalchemy import select, delete
from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_execute, session_flush
from exceptions.shipping import InvalidRateBandException, InvalidVendorRuleException
from models.shipping_rate import WeightRateBand, WeightRateBandDTO, VendorShippingRule, VendorShippingRuleDTO
from utils.shipping_validation import validate_rate_band, validate_vendor_rule

logger = logging.getLogger(__name__)


class WeightRateBandRepository:
    """Repository for weight rate band database operations."""

    @staticmethod
    async def get_all(session: AsyncSession | Session) -> list[WeightRateBandDTO]:
        """
        Get all weight rate bands.

        Returns:
            list[WeightRateBandDTO]: Bands sorted by min_weight (ascending)
        """
        stmt = select(WeightRateBand).order_by(WeightRateBand.min_weight.asc())
        result = await session_execute(stmt, session)
        return [WeightRateBandDTO.model_validate(band, from_attributes=True) for band in result.scalars().all()]

    @staticmethod
    async def create(band_data: WeightRateBandDTO, session: AsyncSession | Session) -> WeightRateBandDTO:
        """
        Create a new weight rate band after validating it against existing bands.

        Args:
            band_data: WeightRateBandDTO with min_weight, max_weight, cost
            session: Database session

        Returns:
            WeightRateBandDTO: Created band

        Raises:
            InvalidRateBandException: If the range is malformed or overlaps an existing band

        Example:
            >>> band = await WeightRateBandRepository.create(
            ...     WeightRateBandDTO(min_weight=0, max_weight=2, cost=2500), session
            ... )
        """
        existing_bands = await WeightRateBandRepository.get_all(session)
        is_valid, error = validate_rate_band(
            band_data.min_weight, band_data.max_weight, band_data.cost, existing_bands
        )
        if not is_valid:
            raise InvalidRateBandException(band_data.min_weight, band_data.max_weight, error)

        band = WeightRateBand(
            min_weight=band_data.min_weight,
            max_weight=band_data.max_weight,
            cost=band_data.cost
        )
        session.add(band)
        await session_flush(session)

        logger.info(f"Created weight rate band: {band.min_weight}-{band.max_weight}kg @ {band.cost}")

        return WeightRateBandDTO.model_validate(band, from_attributes=True)

    @staticmethod
    async def delete_by_id(band_id: str, session: AsyncSession | Session) -> int:
        """
        Delete a weight rate band.

        Returns:
            int: Number of bands deleted (0 or 1)
        """
        stmt = delete(WeightRateBand).where(WeightRateBand.id == band_id)
        result = await session_execute(stmt, session)

        deleted_count = result.rowcount
        logger.info(f"Deleted {deleted_count} weight rate band(s) with id {band_id}")

        return deleted_count


class VendorShippingRuleRepository:
    """Repository for vendor MOQ shipping rule database operations."""

    @staticmethod
    async def get_active_by_vendor_ids(
        vendor_ids: list[str],
        session: AsyncSession | Session
    ) -> list[VendorShippingRuleDTO]:
        """
        Get active shipping rules for multiple vendors (batch operation).

        Returns:
            list[VendorShippingRuleDTO]: Rules sorted by min_quantity (descending)

        Example:
            >>> rules = await VendorShippingRuleRepository.get_active_by_vendor_ids(["v1", "v2"], session)
        """
        if not vendor_ids:
            return []

        stmt = (
            select(VendorShippingRule)
            .where(VendorShippingRule.vendor_id.in_(vendor_ids))
            .where(VendorShippingRule.is_active == True)
            .order_by(VendorShippingRule.min_quantity.desc())
        )
        result = await session_execute(stmt, session)
        return [VendorShippingRuleDTO.model_validate(rule, from_attributes=True) for rule in result.scalars().all()]

    @staticmethod
    async def get_by_vendor_id(vendor_id: str, session: AsyncSession | Session) -> list[VendorShippingRuleDTO]:
        """
        Get all rules of a vendor, active or not (admin rule dialog).

        Returns:
            list[VendorShippingRuleDTO]: Rules sorted by min_quantity (ascending)
        """
        stmt = (
            select(VendorShippingRule)
            .where(VendorShippingRule.vendor_id == vendor_id)
            .order_by(VendorShippingRule.min_quantity.asc())
        )
        result = await session_execute(stmt, session)
        return [VendorShippingRuleDTO.model_validate(rule, from_attributes=True) for rule in result.scalars().all()]

    @staticmethod
    async def create(rule_data: VendorShippingRuleDTO, session: AsyncSession | Session) -> VendorShippingRuleDTO:
        """
        Create a vendor shipping rule.

        Raises:
            InvalidVendorRuleException: If min_quantity < 1 or the schedule is empty
        """
        is_valid, error = validate_vendor_rule(rule_data.min_quantity, rule_data.shipping_schedule)
        if not is_valid:
            raise InvalidVendorRuleException(rule_data.vendor_id, error)

        rule = VendorShippingRule(
            vendor_id=rule_data.vendor_id,
            min_quantity=rule_data.min_quantity,
            shipping_schedule=rule_data.shipping_schedule.strip(),
            is_active=rule_data.is_active
        )
        session.add(rule)
        await session_flush(session)

        logger.info(f"Created shipping rule: vendor={rule.vendor_id}, "
                    f"min_qty={rule.min_quantity}, schedule={rule.shipping_schedule}")

        return VendorShippingRuleDTO.model_validate(rule, from_attributes=True)

    @staticmethod
    async def set_active(rule_id: str, is_active: bool, session: AsyncSession | Session) -> None:
        """Enable or disable a rule without deleting it."""
        rule = (await session_execute(
            select(VendorShippingRule).where(VendorShippingRule.id == rule_id), session
        )).scalar_one_or_none()

        if rule is None:
            logger.warning(f"Shipping rule {rule_id} not found, nothing to update")
            return

        rule.is_active = is_active
        await session_flush(session)
        logger.info(f"Shipping rule {rule_id} {'activated' if is_active else 'deactivated'}")
