"""Domain normalization helpers."""

from datetime import date

from src.domain.constants import (
    PAYMENT_CASH,
    PAYMENT_CREDIT,
    PAYMENT_DEBIT,
    TIER_1,
    TIER_2,
    TIER_3,
)

_LEGACY_OPTION_TYPES = {
    "option1": TIER_1,
    "option2": TIER_2,
    "option3": TIER_3,
}

_LEGACY_PAYMENT_METHODS = {
    "debit_card": PAYMENT_DEBIT,
    "credit_card": PAYMENT_CREDIT,
}


def normalize_doctor_name(name: str | None) -> str | None:
    """Normalize a doctor name used as a grouping key.

    Args:
        name: Raw doctor name from a record or a filter request.

    Returns:
        str | None: Trimmed name, or None when blank.
    """
    if not name:
        return None
    cleaned = name.strip()
    return cleaned or None


def normalize_option_type(option_type: str | None) -> str:
    """Map stored option codes to tier codes.

    Args:
        option_type: Raw option type, possibly a legacy ``optionN`` code.

    Returns:
        str: Tier code; unknown values are returned lower-cased.
    """
    cleaned = (option_type or "").strip().lower()
    return _LEGACY_OPTION_TYPES.get(cleaned, cleaned)


def normalize_payment_method(payment_method: str | None) -> str:
    """Map stored payment method codes to the domain vocabulary.

    Records created before payment methods existed default to cash.
    """
    cleaned = (payment_method or "").strip().lower()
    if not cleaned:
        return PAYMENT_CASH
    return _LEGACY_PAYMENT_METHODS.get(cleaned, cleaned)


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` bucket of a calendar date."""
    return f"{value.year:04d}-{value.month:02d}"


def effective_reference_month(
    reference_month: str | None,
    record_date: date,
) -> str:
    """Return the reference month, falling back to the date's month.

    Args:
        reference_month: Stored reference month, possibly empty.
        record_date: Calendar date of the record.

    Returns:
        str: Month key in ``YYYY-MM`` format.
    """
    if reference_month and reference_month.strip():
        return reference_month.strip()[:7]
    return month_key(record_date)


__all__ = [
    "normalize_doctor_name",
    "normalize_option_type",
    "normalize_payment_method",
    "month_key",
    "effective_reference_month",
]
