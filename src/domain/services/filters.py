"""Filters narrowing records to a doctor and a period."""

from collections.abc import Iterable
from datetime import date

from src.domain.models.transfers import (
    IndependentExpenseRecord,
    PeriodFilter,
    TransferRecord,
)
from src.domain.policies import is_valid_doctor_name
from src.domain.services.normalization import effective_reference_month


def matches_period(
    record_date: date,
    reference_month: str,
    period: PeriodFilter | None,
) -> bool:
    """Return True when a record falls inside the period.

    Args:
        record_date: Calendar date of the record.
        reference_month: Effective reference month of the record.
        period: Period restriction, or None for no restriction.

    Returns:
        bool: True when the record should be kept.
    """
    if period is None:
        return True
    if period.has_custom_range:
        if period.start_date is not None and record_date < period.start_date:
            return False
        if period.end_date is not None and record_date > period.end_date:
            return False
        return True
    if period.reference_month:
        return reference_month == period.reference_month
    return True


def sort_by_date_desc(items: Iterable) -> list:
    """Return items sorted by ``date`` descending, keeping input order on ties."""
    return sorted(items, key=lambda item: item.date, reverse=True)


def filter_transfers(
    records: Iterable[TransferRecord],
    doctor_name: str | None,
    period: PeriodFilter | None = None,
) -> list[TransferRecord]:
    """Return the doctor's records inside the period, most recent first.

    Args:
        records: Full transfer list.
        doctor_name: Exact doctor name to match.
        period: Optional period restriction.

    Returns:
        list[TransferRecord]: Matching records; empty when the name is blank.
    """
    if not is_valid_doctor_name(doctor_name):
        return []
    filtered = [
        record
        for record in records
        if record.doctor_name == doctor_name
        and matches_period(
            record.date,
            effective_reference_month(record.reference_month, record.date),
            period,
        )
    ]
    return sort_by_date_desc(filtered)


def filter_independent_expenses(
    expenses: Iterable[IndependentExpenseRecord],
    doctor_name: str | None,
    period: PeriodFilter | None = None,
) -> list[IndependentExpenseRecord]:
    """Return independent expenses linked to the doctor inside the period.

    The link is the ``subcategory`` value compared to the doctor name.

    Args:
        expenses: Independent ledger entries.
        doctor_name: Exact doctor name to match.
        period: Optional period restriction.

    Returns:
        list[IndependentExpenseRecord]: Matching entries, most recent first.
    """
    if not is_valid_doctor_name(doctor_name):
        return []
    filtered = [
        expense
        for expense in expenses
        if expense.subcategory == doctor_name
        and matches_period(
            expense.date,
            effective_reference_month(expense.reference_month, expense.date),
            period,
        )
    ]
    return sort_by_date_desc(filtered)


__all__ = [
    "matches_period",
    "sort_by_date_desc",
    "filter_transfers",
    "filter_independent_expenses",
]
