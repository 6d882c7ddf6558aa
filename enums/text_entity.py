from enum import Enum


class TextEntity(Enum):
    """Top-level sections of the l10n/<lang>.json text catalogs."""
    COMMON = "common"
    SHIPPING = "shipping"
    DEAL = "deal"
