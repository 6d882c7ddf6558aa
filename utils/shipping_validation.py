"""
Shipping Configuration Validation Utility

Validates admin-managed shipping configuration before it is saved:
- Weight rate bands (ranges, costs, no overlap with existing bands)
- Rate band coverage (starts at 0 kg, no gaps)
- Vendor MOQ shipping rules
- Cart incentive thresholds
"""

from typing import Iterable

from models.shipping_rate import WeightRateBandDTO


def bands_overlap(min_weight: float, max_weight: float, band: WeightRateBandDTO) -> bool:
    """
    Check whether [min_weight, max_weight) overlaps an existing band.

    Example:
        >>> bands_overlap(1, 3, WeightRateBandDTO(min_weight=0, max_weight=2, cost=2500))
        True
        >>> bands_overlap(2, 5, WeightRateBandDTO(min_weight=0, max_weight=2, cost=2500))
        False
    """
    return (
        (band.min_weight <= min_weight < band.max_weight)
        or (band.min_weight < max_weight <= band.max_weight)
        or (min_weight <= band.min_weight and max_weight >= band.max_weight)
    )


def validate_rate_band(
    min_weight: float,
    max_weight: float,
    cost: float,
    existing_bands: Iterable[WeightRateBandDTO] = ()
) -> tuple[bool, str | None]:
    """
    Validate a new weight rate band against business rules and existing bands.

    Args:
        min_weight: Lower bound in kg (inclusive)
        max_weight: Upper bound in kg (exclusive)
        cost: Shipping cost for the band
        existing_bands: Bands already configured

    Returns:
        tuple: (is_valid, error_message)

    Example:
        >>> validate_rate_band(5, 2, 4500)
        (False, 'Maximum weight must be greater than minimum')
    """
    if min_weight < 0:
        return False, "Minimum weight must be 0 or greater"

    if max_weight <= min_weight:
        return False, "Maximum weight must be greater than minimum"

    if cost < 0:
        return False, "Cost must be 0 or greater"

    for band in existing_bands:
        if bands_overlap(min_weight, max_weight, band):
            return False, (
                f"This range overlaps with an existing rate "
                f"({band.min_weight}-{band.max_weight} kg)"
            )

    return True, None


def validate_rate_band_coverage(bands: list[WeightRateBandDTO]) -> tuple[bool, str | None]:
    """
    Check that weight bands cover every weight from 0 kg without gaps.

    A cart whose weight falls into a gap (or below the first band) resolves to a
    shipping cost of 0, so gaps are reported rather than silently accepted.

    Returns:
        tuple: (is_valid, error_message)

    Example:
        >>> validate_rate_band_coverage([
        ...     WeightRateBandDTO(min_weight=0, max_weight=2, cost=2500),
        ...     WeightRateBandDTO(min_weight=3, max_weight=5, cost=4500),
        ... ])
        (False, 'Gap detected: band ends at 2.0 kg, next starts at 3.0 kg')
    """
    if not bands:
        return False, "At least one weight rate band is required"

    sorted_bands = sorted(bands, key=lambda b: b.min_weight)

    if sorted_bands[0].min_weight > 0:
        return False, f"First band must start at 0 kg, got {sorted_bands[0].min_weight} kg"

    for i in range(len(sorted_bands) - 1):
        current_max = sorted_bands[i].max_weight
        next_min = sorted_bands[i + 1].min_weight

        if next_min > current_max:
            return False, f"Gap detected: band ends at {current_max} kg, next starts at {next_min} kg"
        if next_min < current_max:
            return False, f"Overlap detected: band ends at {current_max} kg, next starts at {next_min} kg"

    return True, None


def validate_vendor_rule(min_quantity: int, shipping_schedule: str | None) -> tuple[bool, str | None]:
    """
    Validate a vendor MOQ shipping rule.

    Example:
        >>> validate_vendor_rule(0, "Ships weekly")
        (False, 'Minimum quantity must be at least 1')
    """
    if min_quantity < 1:
        return False, "Minimum quantity must be at least 1"

    if not shipping_schedule or not shipping_schedule.strip():
        return False, "Please enter a shipping schedule"

    return True, None


def validate_discount_threshold(threshold: float, discount_value: float) -> tuple[bool, str | None]:
    """Validate a cart incentive threshold."""
    if threshold <= 0:
        return False, "Threshold must be greater than 0"

    if discount_value < 0:
        return False, "Discount value must be 0 or greater"

    return True, None
