import uuid

from pydantic import BaseModel
from sqlalchemy import Column, String, Float, Boolean, ForeignKey, CheckConstraint, Index

from models.base import Base


class ShippingRoute(Base):
    """
    Origin -> destination price line of the shipping matrix.

    Cost for a vendor's parcel on this route: base_cost + weight_kg * weight_rate
    """
    __tablename__ = 'shipping_matrix'

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    origin_region_id = Column(String, ForeignKey("shipping_regions.id", ondelete="CASCADE"), nullable=False)
    destination_region_id = Column(String, ForeignKey("shipping_regions.id", ondelete="CASCADE"), nullable=False)
    base_cost = Column(Float, nullable=False, default=0.0)
    weight_rate = Column(Float, nullable=False, default=0.0)
    estimated_days = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint('base_cost >= 0', name='check_route_base_cost_non_negative'),
        CheckConstraint('weight_rate >= 0', name='check_route_weight_rate_non_negative'),
        Index('ix_shipping_matrix_route', 'origin_region_id', 'destination_region_id', unique=True),
    )


class ShippingRouteDTO(BaseModel):
    id: str | None = None
    origin_region_id: str
    destination_region_id: str
    base_cost: float = 0.0
    weight_rate: float = 0.0
    estimated_days: str | None = None
    is_active: bool = True
