"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.models.transfers import TransferRecord

NET_TOLERANCE = Decimal("0.01")


def is_net_consistent(record: TransferRecord) -> bool:
    """Return True when the stored net matches amount minus discounts.

    Args:
        record: Transfer record to check.

    Returns:
        bool: True when within one cent.
    """
    expected = (
        record.amount
        - record.discount_amount
        - record.payment_discount_amount
    )
    return abs(record.net_amount - expected) <= NET_TOLERANCE


def validate_transfer_record(record: TransferRecord, logger: Logger) -> None:
    """Warn when a stored record violates the ledger invariants.

    Args:
        record: Transfer record loaded from storage.
        logger: Logger used for warnings.
    """
    if not is_net_consistent(record):
        logger.warning(
            f"Net amount is inconsistent for transfer id={record.id}: "
            f"net={record.net_amount}, amount={record.amount}, "
            f"discount={record.discount_amount}, "
            f"payment_discount={record.payment_discount_amount}"
        )
    if record.expense_amount > 0 and record.expense_category is None:
        logger.warning(
            f"Inline expense without category for transfer id={record.id}: "
            f"{record.expense_amount}"
        )


__all__ = ["NET_TOLERANCE", "is_net_consistent", "validate_transfer_record"]
