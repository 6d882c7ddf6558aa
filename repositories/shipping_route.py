"""
Shipping Route Repository

Read access to the shipping matrix (origin region -> destination region prices).
"""

import logging
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_execute
from models.shipping_route import ShippingRoute, ShippingRouteDTO

logger = logging.getLogger(__name__)


class ShippingRouteRepository:
    """Repository for shipping matrix lookups."""

    @staticmethod
    async def get_active_by_destination(
        destination_region_id: str,
        session: AsyncSession | Session
    ) -> list[ShippingRouteDTO]:
        """
        Get all active routes delivering into a region.

        Example:
            >>> routes = await ShippingRouteRepository.get_active_by_destination("abuja", session)
        """
        stmt = (
            select(ShippingRoute)
            .where(ShippingRoute.destination_region_id == destination_region_id)
            .where(ShippingRoute.is_active == True)
        )
        result = await session_execute(stmt, session)
        return [ShippingRouteDTO.model_validate(route, from_attributes=True) for route in result.scalars().all()]
