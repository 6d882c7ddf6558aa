"""
Size and scent-note notation helpers.

Catalog imports spell bottle sizes in many ways ("3.4oz", "3.4 fl oz", "100 ML",
"100"). Everything is normalized to a canonical "<int>ml" string so weight
estimation and size filters work on one notation.
"""

import math
import re

from utils.numbers import round_half_up

ML_PER_FLUID_OUNCE = 29.5735

# Standard retail bottle sizes that ounce conversions snap to
COMMON_SIZES_ML = (10, 15, 20, 30, 35, 40, 50, 60, 75, 80, 90, 100, 120, 125, 150, 200)
SNAP_TOLERANCE_ML = 2

_OZ_PATTERN = re.compile(r"(\d+(?:\.\d+)?)(?:fl)?oz")
_ML_PATTERN = re.compile(r"(\d+(?:\.\d+)?)ml")
_NUMBER_ONLY_PATTERN = re.compile(r"^(\d+)$")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_size_token(raw: str | None) -> str:
    """
    Normalize a free-text size token to "<int>ml".

    Rules (first match wins, matching is case- and whitespace-insensitive):
    1. Ounces ("3.4oz", "3.4 fl oz"): converted at 29.5735 ml/oz, rounded, then
       snapped to the first common retail size within ±2 ml
    2. Milliliters ("100ml", "100 ML"): rounded to an integer
    3. Bare integer ("100"): treated as milliliters

    Unrecognized tokens are returned trimmed but otherwise unchanged, so the
    function never raises and is idempotent.

    Examples:
        >>> normalize_size_token("3.4 oz")
        '100ml'
        >>> normalize_size_token("100 ML")
        '100ml'
        >>> normalize_size_token("Tester")
        'Tester'
    """
    s = str(raw or "").strip()
    if not s:
        return ""

    lower = _WHITESPACE_PATTERN.sub("", s.lower())

    oz_match = _OZ_PATTERN.search(lower)
    if oz_match:
        oz = float(oz_match.group(1))
        if not math.isfinite(oz) or oz <= 0:
            return s
        ml = round_half_up(oz * ML_PER_FLUID_OUNCE)
        # Snap to common retail sizes to avoid awkward values (3.4oz -> 101ml -> 100ml)
        for common in COMMON_SIZES_ML:
            if abs(common - ml) <= SNAP_TOLERANCE_ML:
                ml = common
                break
        return f"{ml}ml"

    ml_match = _ML_PATTERN.search(lower)
    if ml_match:
        ml_value = float(ml_match.group(1))
        if not math.isfinite(ml_value):
            return s
        return f"{round_half_up(ml_value)}ml"

    number_match = _NUMBER_ONLY_PATTERN.match(lower)
    if number_match:
        return f"{int(number_match.group(1))}ml"

    return s


def parse_size_ml(raw: str | None) -> float | None:
    """
    Return the size in milliliters, or None if the token is not a volume.

    Examples:
        >>> parse_size_ml("3.4 fl oz")
        100.0
        >>> parse_size_ml("Tester") is None
        True
    """
    match = re.fullmatch(r"(\d+)ml", normalize_size_token(raw))
    if not match:
        return None
    ml = float(match.group(1))
    return ml if math.isfinite(ml) else None


def normalize_sizes(sizes: list[str] | None) -> list[str]:
    """
    Normalize a list of size tokens, dropping empties and case-insensitive duplicates.

    First-seen order is preserved.

    Example:
        >>> normalize_sizes(["3.4 oz", "100 ml", "100ml", ""])
        ['100ml']
    """
    out = []
    seen = set()
    for raw in sizes or []:
        norm = normalize_size_token(raw)
        if not norm:
            continue
        key = norm.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(norm)
    return out


def title_case_note(note: str | None) -> str:
    """
    Title-case a scent note, including hyphenated parts.

    Example:
        >>> title_case_note(" pink-pepper ")
        'Pink-Pepper'
    """
    s = str(note or "").strip()
    if not s:
        return ""
    return " ".join(
        "-".join(part[0].upper() + part[1:].lower() if part else part for part in word.split("-"))
        for word in s.split(" ")
    )


def normalize_notes(notes: dict | None) -> dict[str, list[str]]:
    """
    Title-case and dedup (case-insensitively) the top/heart/base note lists.

    Example:
        >>> normalize_notes({"top": ["bergamot", "Bergamot "], "heart": ["rose", "ROSE"]})
        {'top': ['Bergamot'], 'heart': ['Rose'], 'base': []}
    """
    notes = notes or {}

    def normalize_list(values: list[str] | None) -> list[str]:
        seen = set()
        out = []
        for raw in values or []:
            note = title_case_note(raw)
            if not note:
                continue
            key = note.lower()
            if key in seen:
                continue
            seen.add(key)
            out.append(note)
        return out

    return {
        "top": normalize_list(notes.get("top")),
        "heart": normalize_list(notes.get("heart")),
        "base": normalize_list(notes.get("base")),
    }
