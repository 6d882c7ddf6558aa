"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for relationships and Base.metadata.create_all to work correctly.
"""

from models.base import Base
from models.shipping_rate import WeightRateBand, VendorShippingRule
from models.vendor import ShippingRegion, Vendor
from models.shipping_route import ShippingRoute
from models.discount_threshold import DiscountThreshold

__all__ = [
    'Base',
    'WeightRateBand',
    'VendorShippingRule',
    'ShippingRegion',
    'Vendor',
    'ShippingRoute',
    'DiscountThreshold',
]
