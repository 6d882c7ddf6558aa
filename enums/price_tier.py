from enum import Enum


class PriceTier(str, Enum):
    """
    Coarse price bracket of a product, derived from its best price.

    Thresholds (inclusive upper bounds, NGN):
    - BUDGET:  <= 15,000
    - MID:     <= 35,000
    - PREMIUM: <= 70,000
    - LUXURY:  above 70,000
    - UNKNOWN: no positive price
    """
    BUDGET = "Budget"
    MID = "Mid"
    PREMIUM = "Premium"
    LUXURY = "Luxury"
    UNKNOWN = "Unknown"
