"""
VAT helpers for invoices and checkout totals.

Rates are percentages (7.5 means 7.5 %).
"""


def calculate_vat(amount: float, rate: float) -> float:
    """
    Example:
        >>> calculate_vat(100, 7.5)
        7.5
    """
    return amount * (rate / 100)


def calculate_total_with_vat(amount: float, rate: float) -> float:
    return amount + calculate_vat(amount, rate)


def extract_vat_from_total(total: float, rate: float) -> tuple[float, float]:
    """
    Split a VAT-inclusive total into (subtotal, vat_amount).

    Example:
        >>> subtotal, vat_amount = extract_vat_from_total(107.5, 7.5)
        >>> round(subtotal, 2), round(vat_amount, 2)
        (100.0, 7.5)
    """
    subtotal = total / (1 + rate / 100)
    vat_amount = total - subtotal
    return subtotal, vat_amount
