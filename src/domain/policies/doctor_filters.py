"""Doctor name policies for ledger lookups."""


def is_valid_doctor_name(name: str | None) -> bool:
    """Return True when the name can be used as a grouping key.

    Args:
        name: Doctor name to evaluate.

    Returns:
        bool: False for missing or blank names.
    """
    if not name:
        return False
    return bool(name.strip())


__all__ = ["is_valid_doctor_name"]
