"""
Vendor Repository

Read access to vendors and their shipping regions.
"""

import logging
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_execute
from models.vendor import Vendor, VendorDTO, ShippingRegion, ShippingRegionDTO

logger = logging.getLogger(__name__)


class VendorRepository:
    """Repository for vendor lookups."""

    @staticmethod
    def _to_dto(vendor: Vendor) -> VendorDTO:
        return VendorDTO(
            id=vendor.id,
            rep_full_name=vendor.rep_full_name,
            shipping_region_id=vendor.shipping_region_id,
            shipping_region_name=vendor.shipping_region.name if vendor.shipping_region else None
        )

    @staticmethod
    async def get_by_ids(vendor_ids: list[str], session: AsyncSession | Session) -> list[VendorDTO]:
        """
        Get vendors with their shipping region names (batch operation).

        Example:
            >>> vendors = await VendorRepository.get_by_ids(["v1", "v2"], session)
            >>> vendors[0].shipping_region_name
            'Lagos'
        """
        if not vendor_ids:
            return []

        stmt = select(Vendor).where(Vendor.id.in_(vendor_ids))
        result = await session_execute(stmt, session)
        return [VendorRepository._to_dto(vendor) for vendor in result.unique().scalars().all()]

    @staticmethod
    async def get_active_regions(session: AsyncSession | Session) -> list[ShippingRegionDTO]:
        """Get all active shipping regions sorted by name (checkout region dropdown)."""
        stmt = (
            select(ShippingRegion)
            .where(ShippingRegion.is_active == True)
            .order_by(ShippingRegion.name.asc())
        )
        result = await session_execute(stmt, session)
        return [ShippingRegionDTO.model_validate(region, from_attributes=True) for region in result.scalars().all()]
