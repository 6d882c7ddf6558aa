"""
Cart-related exceptions.
"""

from .base import StorefrontException


class CartException(StorefrontException):
    """Base exception for cart-related errors."""
    pass


class InvalidDiscountThresholdException(CartException):
    """Raised when a cart incentive threshold is malformed."""

    def __init__(self, name: str, reason: str):
        super().__init__(
            f"Invalid discount threshold '{name}': {reason}",
            details={'name': name, 'reason': reason}
        )
        self.name = name
        self.reason = reason
