import uuid

from pydantic import BaseModel
from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from models.base import Base


class ShippingRegion(Base):
    __tablename__ = 'shipping_regions'

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)


class Vendor(Base):
    """Vendor (reseller) shipping products from its own region."""
    __tablename__ = 'vendors'

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    rep_full_name = Column(String, nullable=False)
    shipping_region_id = Column(String, ForeignKey("shipping_regions.id", ondelete="SET NULL"), nullable=True)

    shipping_region = relationship("ShippingRegion", lazy="joined")


class ShippingRegionDTO(BaseModel):
    id: str
    name: str
    is_active: bool = True


class VendorDTO(BaseModel):
    id: str
    rep_full_name: str
    shipping_region_id: str | None = None
    shipping_region_name: str | None = None
