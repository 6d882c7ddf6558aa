"""
Custom exceptions for the storefront pricing & shipping core.

Exception Hierarchy:
--------------------
StorefrontException (base)
├── ShippingException
│   ├── InvalidRateBandException
│   └── InvalidVendorRuleException
└── CartException
    └── InvalidDiscountThresholdException

Usage:
------
Repositories raise specific exceptions when admins save bad configuration:
    raise InvalidRateBandException(min_weight=5, max_weight=2, reason="...")

Callers catch and display user-friendly messages:
    try:
        await WeightRateBandRepository.create(band_dto, session)
    except InvalidRateBandException as e:
        show_error(str(e))

Pricing and shipping calculations never raise these: missing or malformed
cart/catalog data degrades to safe defaults instead.
"""

from .base import StorefrontException
from .cart import CartException, InvalidDiscountThresholdException
from .shipping import ShippingException, InvalidRateBandException, InvalidVendorRuleException

__all__ = [
    # Base
    'StorefrontException',

    # Cart
    'CartException',
    'InvalidDiscountThresholdException',

    # Shipping
    'ShippingException',
    'InvalidRateBandException',
    'InvalidVendorRuleException',
]
