"""Classification of a doctor's records into income and expenses."""

from collections.abc import Iterable

from src.domain.constants import (
    EXPENSE_TIER,
    FALLBACK_EXPENSE_CATEGORY,
    IMPUTED_MARKER,
    ORIGIN_MANUAL,
    ORIGIN_SYSTEM,
    SOURCE_INDEPENDENT,
    SOURCE_TRANSFER,
)
from src.domain.models.ledger import ClassifiedLedger, NormalizedExpense
from src.domain.models.transfers import (
    IndependentExpenseRecord,
    PeriodFilter,
    TransferRecord,
)
from src.domain.services.filters import (
    filter_independent_expenses,
    sort_by_date_desc,
)
from src.domain.services.normalization import effective_reference_month


def is_imputed(
    option_type: str | None,
    description: str | None,
    origin: str | None = None,
) -> bool:
    """Return True when an expense is treated as generated by the system.

    An explicit origin tag wins. Without one, pure expense records and
    descriptions containing the system marker count as imputed.

    Args:
        option_type: Tier code of the source record, if any.
        description: Free-text description.
        origin: Optional origin tag (manual or system).

    Returns:
        bool: True for system-generated expenses.
    """
    if origin == ORIGIN_SYSTEM:
        return True
    if origin == ORIGIN_MANUAL:
        return False
    if option_type == EXPENSE_TIER:
        return True
    return IMPUTED_MARKER.casefold() in (description or "").casefold()


def is_inline_expense(record: TransferRecord) -> bool:
    """Return True when a transfer carries or is an expense."""
    if record.option_type == EXPENSE_TIER:
        return True
    return record.expense_amount > 0 and record.expense_category is not None


def _normalize_inline(record: TransferRecord) -> NormalizedExpense:
    return NormalizedExpense(
        id=record.id,
        date=record.date,
        reference_month=effective_reference_month(
            record.reference_month,
            record.date,
        ),
        description=record.description,
        amount=record.expense_amount,
        category=record.expense_category or FALLBACK_EXPENSE_CATEGORY,
        source=SOURCE_TRANSFER,
        imputed=is_imputed(
            record.option_type,
            record.description,
            record.origin,
        ),
    )


def _normalize_independent(
    expense: IndependentExpenseRecord,
) -> NormalizedExpense:
    return NormalizedExpense(
        id=expense.id,
        date=expense.date,
        reference_month=effective_reference_month(
            expense.reference_month,
            expense.date,
        ),
        description=expense.description,
        amount=expense.amount,
        category=expense.category or FALLBACK_EXPENSE_CATEGORY,
        source=SOURCE_INDEPENDENT,
        imputed=is_imputed(None, expense.description, expense.origin),
    )


def classify_records(
    transfers: Iterable[TransferRecord],
    independent_expenses: Iterable[IndependentExpenseRecord] = (),
    *,
    doctor_name: str | None = None,
    period: PeriodFilter | None = None,
) -> ClassifiedLedger:
    """Split filtered transfers and independent entries into populations.

    Args:
        transfers: Transfers already narrowed to the doctor and period.
        independent_expenses: Independent ledger entries. When
            ``doctor_name`` is given they are restricted to that doctor and
            the period first.
        doctor_name: Doctor linking the independent entries.
        period: Period applied to independent entries.

    Returns:
        ClassifiedLedger: Income records and normalized expense lists.
    """
    transfers = list(transfers)
    if doctor_name is not None:
        independent_expenses = filter_independent_expenses(
            independent_expenses,
            doctor_name,
            period,
        )

    income_records = [
        record for record in transfers if record.option_type != EXPENSE_TIER
    ]
    inline_expenses = [
        _normalize_inline(record)
        for record in transfers
        if is_inline_expense(record)
    ]
    independent = [
        _normalize_independent(expense) for expense in independent_expenses
    ]
    return ClassifiedLedger(
        income_records=income_records,
        inline_expenses=inline_expenses,
        independent_expenses=independent,
        all_expenses=sort_by_date_desc([*inline_expenses, *independent]),
    )


__all__ = [
    "is_imputed",
    "is_inline_expense",
    "classify_records",
]
