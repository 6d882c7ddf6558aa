import json
from pathlib import Path
from typing import Optional

import config
from enums.text_entity import TextEntity
from utils.numbers import round_half_up

L10N_DIR = Path(__file__).resolve().parent.parent / "l10n"


class Localizator:
    """Reads user-facing texts and the currency glyph from l10n/<lang>.json."""

    @staticmethod
    def get_text(entity: TextEntity, key: str, lang: Optional[str] = None) -> str:
        """
        Get localized text for given entity and key.

        Args:
            entity: Catalog section (COMMON, SHIPPING, DEAL)
            key: Localization key
            lang: Optional language code (e.g., "en").
                  If None, uses config.LANGUAGE (default).
                  Pass it explicitly from concurrent request handlers
                  to avoid depending on global state.

        Returns:
            Localized text string

        Example:
            >>> Localizator.get_text(TextEntity.SHIPPING, "standard_schedule")
            'Standard shipping'
        """
        language = lang if lang is not None else config.LANGUAGE
        localization_file = L10N_DIR / f"{language}.json"

        with open(localization_file, "r", encoding="UTF-8") as f:
            data = json.loads(f.read())
            return data[entity.value][key]

    @staticmethod
    def get_currency_symbol(lang: Optional[str] = None) -> str:
        return Localizator.get_text(TextEntity.COMMON, f"{config.CURRENCY.value.lower()}_symbol", lang=lang)

    @staticmethod
    def get_currency_text(lang: Optional[str] = None) -> str:
        return Localizator.get_text(TextEntity.COMMON, f"{config.CURRENCY.value.lower()}_text", lang=lang)

    @staticmethod
    def format_amount(amount: float, lang: Optional[str] = None) -> str:
        """
        Format an amount in whole currency units with a thousands separator.

        Examples:
            >>> Localizator.format_amount(12500.4)
            '₦12,500'
            >>> Localizator.format_amount(999.5)
            '₦1,000'
        """
        return f"{Localizator.get_currency_symbol(lang=lang)}{round_half_up(amount):,}"
