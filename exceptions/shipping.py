"""
Shipping configuration exceptions.

Raised only when admins write configuration rows (rate bands, vendor rules).
Shipping calculations themselves never raise; they fall back to safe defaults.
"""

from .base import StorefrontException


class ShippingException(StorefrontException):
    """Base exception for shipping-related errors."""
    pass


class InvalidRateBandException(ShippingException):
    """Raised when a weight rate band is malformed or overlaps an existing band."""

    def __init__(self, min_weight: float, max_weight: float, reason: str):
        super().__init__(
            f"Invalid weight rate band {min_weight}-{max_weight} kg: {reason}",
            details={'min_weight': min_weight, 'max_weight': max_weight, 'reason': reason}
        )
        self.min_weight = min_weight
        self.max_weight = max_weight
        self.reason = reason


class InvalidVendorRuleException(ShippingException):
    """Raised when a vendor MOQ shipping rule is malformed."""

    def __init__(self, vendor_id: str, reason: str):
        super().__init__(
            f"Invalid shipping rule for vendor {vendor_id}: {reason}",
            details={'vendor_id': vendor_id, 'reason': reason}
        )
        self.vendor_id = vendor_id
        self.reason = reason
