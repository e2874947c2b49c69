"""Doctor discovery across the transfer and independent ledgers."""

from collections.abc import Iterable

from src.domain.services.normalization import normalize_doctor_name


def collect_doctor_names(*sources: Iterable[str | None]) -> list[str]:
    """Return the sorted union of non-blank doctor names.

    Args:
        *sources: Iterables of raw names (transfer doctor names, independent
            ledger subcategories).

    Returns:
        list[str]: Distinct trimmed names in alphabetical order.
    """
    names: set[str] = set()
    for source in sources:
        for raw_name in source:
            name = normalize_doctor_name(raw_name)
            if name:
                names.add(name)
    return sorted(names)


__all__ = ["collect_doctor_names"]
