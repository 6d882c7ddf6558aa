import uuid
from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, String, Float, Integer, Boolean, DateTime, CheckConstraint, Index

from models.base import Base


class WeightRateBand(Base):
    """
    Weight band for weight-based shipping cost lookup.

    Bands are half-open ranges [min_weight, max_weight) in kilograms:
    - Example: 0-2 kg: ₦2,500, 2-5 kg: ₦4,500, 5-10 kg: ₦8,000

    Bands are expected to be contiguous and non-overlapping. Admin writes are
    validated (utils/shipping_validation.py), but the cost resolver does not
    re-check and simply uses the first matching band in ascending order.
    """
    __tablename__ = 'shipping_weight_rates'

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    min_weight = Column(Float, nullable=False)
    max_weight = Column(Float, nullable=False)
    cost = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        CheckConstraint('min_weight >= 0', name='check_min_weight_non_negative'),
        CheckConstraint('max_weight > min_weight', name='check_max_weight_valid'),
        CheckConstraint('cost >= 0', name='check_cost_non_negative'),
    )


class VendorShippingRule(Base):
    """
    Vendor minimum-order-quantity (MOQ) shipping rule.

    Multiple rules per vendor form a step function over quantity:
    - Example: 1+ units: "Ships weekly", 6+ units: "Ships in 3 days", 12+ units: "Ships next day"

    The rule with the highest min_quantity still satisfied by the vendor's
    aggregated cart quantity decides the delivery schedule.
    """
    __tablename__ = 'vendor_shipping_rules'

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_id = Column(String, nullable=False)
    min_quantity = Column(Integer, nullable=False)
    shipping_schedule = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        CheckConstraint('min_quantity > 0', name='check_rule_min_quantity_positive'),
        Index('ix_vendor_shipping_rules_vendor_id', 'vendor_id'),
    )


class WeightRateBandDTO(BaseModel):
    """DTO for weight rate band data transfer."""
    id: str | None = None
    min_weight: float
    max_weight: float
    cost: float
    created_at: datetime | None = None


class VendorShippingRuleDTO(BaseModel):
    """DTO for vendor shipping rule data transfer."""
    id: str | None = None
    vendor_id: str
    min_quantity: int
    shipping_schedule: str
    is_active: bool = True
    created_at: datetime | None = None
