from enum import Enum


class ThresholdType(str, Enum):
    QUANTITY = "quantity"  # Threshold counts cart items
    VALUE = "value"        # Threshold compares cart subtotal


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class ThresholdTarget(str, Enum):
    GLOBAL = "global"
    PRODUCT = "product"
    CATEGORY = "category"
