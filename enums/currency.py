from enum import Enum


class Currency(str, Enum):
    """
    Storefront currencies.

    Prices, rate bands and shipping routes are all stored in whole currency units
    of the configured currency. The display glyph comes from l10n/<lang>.json
    (key "<code>_symbol" in the "common" section).
    """
    NGN = "NGN"
