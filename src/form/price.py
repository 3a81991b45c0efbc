"""Price field helpers.

The form keeps the price as display text (currency symbol followed by a
plain decimal number). The record stores it as a number.
"""

import re

CURRENCY_SYMBOL = "₱"

_NON_NUMERIC = re.compile(r"[^0-9.]")


def _strip_non_numeric(value: str) -> str:
    """Keep digits and the first decimal point only."""
    digits = _NON_NUMERIC.sub("", value)
    whole, point, fraction = digits.partition(".")
    return whole + point + fraction.replace(".", "")


def normalize_price(value: str, currency_symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Normalize raw price input into its display form.

    Args:
        value: Whatever the user typed, with or without the currency symbol.
        currency_symbol: Prefix for the display form.

    Returns:
        The currency symbol followed by digits and at most one decimal point.

    Example:
        >>> normalize_price("250")
        '₱250'
        >>> normalize_price("₱1,299.9.5")
        '₱1299.95'
    """
    return f"{currency_symbol}{_strip_non_numeric(value or '')}"


def price_to_number(value: str) -> float:
    """
    Coerce a (possibly prefixed) price string to a non-negative number.

    An empty amount, or a lone decimal point, coerces to 0.
    """
    digits = _strip_non_numeric(value or "")
    if digits in ("", "."):
        return 0.0
    return float(digits)
