"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value: Decimal) -> Decimal:
    """Round a monetary value to cents using half-up rounding."""
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def safe_percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Return part as a percentage of whole, or zero when whole is zero.

    Args:
        part: Numerator amount.
        whole: Denominator amount.

    Returns:
        Decimal: Percentage value, never NaN or infinite.
    """
    if not whole:
        return Decimal("0")
    return (coerce_decimal(part) / coerce_decimal(whole)) * Decimal("100")


__all__ = ["CENT", "coerce_decimal", "quantize_money", "safe_percentage"]
