import uuid

from pydantic import BaseModel
from sqlalchemy import Column, String, Float, Boolean, CheckConstraint

from enums.discount_threshold import ThresholdType, DiscountType, ThresholdTarget
from models.base import Base


class DiscountThreshold(Base):
    """
    Cart incentive threshold ("spend ₦50,000 more to unlock 5% off").

    type=value thresholds compare the cart subtotal, type=quantity thresholds
    compare the number of units in the cart.
    """
    __tablename__ = 'discount_thresholds'

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    type = Column(String, nullable=False, default=ThresholdType.VALUE.value)
    threshold = Column(Float, nullable=False)
    discount_type = Column(String, nullable=False, default=DiscountType.PERCENTAGE.value)
    discount_value = Column(Float, nullable=False)
    target_type = Column(String, nullable=False, default=ThresholdTarget.GLOBAL.value)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint('threshold > 0', name='check_threshold_positive'),
        CheckConstraint('discount_value >= 0', name='check_discount_value_non_negative'),
    )


class DiscountThresholdDTO(BaseModel):
    id: str | None = None
    name: str
    type: ThresholdType
    threshold: float
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float
    target_type: ThresholdTarget = ThresholdTarget.GLOBAL
    is_active: bool = True


class CartIncentiveResultDTO(BaseModel):
    """Progress of a cart towards its next discount threshold."""
    current_progress: float
    next_threshold: DiscountThresholdDTO | None = None
    amount_to_next: float = 0.0
    items_to_next: int = 0
    progress_percentage: float = 0.0
    all_thresholds: list[DiscountThresholdDTO] = []
    unlocked_threshold: DiscountThresholdDTO | None = None
