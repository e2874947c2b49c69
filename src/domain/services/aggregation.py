"""Domain services reducing classified records into ledger rollups."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE_SOURCES
from src.domain.models.ledger import (
    AggregationResult,
    ClassifiedLedger,
    DoctorLedger,
    ExpenseCategoryRollup,
    LedgerTotals,
    MonthlyOverviewRow,
    MonthRollup,
    TypeRollup,
)
from src.domain.models.transfers import (
    IndependentExpenseRecord,
    PeriodFilter,
    TransferRecord,
)
from src.domain.services.classification import (
    classify_records,
    is_inline_expense,
)
from src.domain.services.filters import filter_transfers
from src.domain.services.formatting import describe_period
from src.domain.services.normalization import (
    effective_reference_month,
    month_key,
)
from src.utils.decimal_utils import safe_percentage


def aggregate_ledger(classified: ClassifiedLedger) -> AggregationResult:
    """Compute totals, per-type, per-category and per-month rollups.

    Reductions follow input order so results are reproducible.

    Args:
        classified: Output of the classifier.

    Returns:
        AggregationResult: Derived views over the classified records.
    """
    totals = _compute_totals(classified)
    return AggregationResult(
        totals=totals,
        by_type=_group_by_type(classified.income_records),
        by_expense_category=_group_by_expense_category(
            classified,
            totals.total_expenses,
        ),
        by_month=_group_by_month(classified),
    )


def build_doctor_ledger(
    transfers: Iterable[TransferRecord],
    independent_expenses: Iterable[IndependentExpenseRecord],
    doctor_name: str | None,
    period: PeriodFilter | None = None,
) -> DoctorLedger:
    """Run filter, classification and aggregation for one doctor.

    Args:
        transfers: Full transfer list.
        independent_expenses: Independent ledger entries.
        doctor_name: Doctor to report on.
        period: Optional period restriction.

    Returns:
        DoctorLedger: Aggregation with the doctor and period description.
    """
    filtered = filter_transfers(transfers, doctor_name, period)
    classified = classify_records(
        filtered,
        independent_expenses,
        doctor_name=doctor_name or "",
        period=period,
    )
    return DoctorLedger(
        doctor_name=(doctor_name or "").strip(),
        period_description=describe_period(period),
        classified=classified,
        result=aggregate_ledger(classified),
    )


def compute_monthly_overview(
    records: Iterable[TransferRecord],
) -> list[MonthlyOverviewRow]:
    """Group transfers by calendar month of their date.

    Args:
        records: Transfers across all doctors.

    Returns:
        list[MonthlyOverviewRow]: Net totals and counts, latest month first.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for record in records:
        key = month_key(record.date)
        totals[key] = totals.get(key, Decimal("0")) + record.net_amount
        counts[key] = counts.get(key, 0) + 1
    return [
        MonthlyOverviewRow(month=key, net_total=totals[key], count=counts[key])
        for key in sorted(totals, reverse=True)
    ]


def _compute_totals(classified: ClassifiedLedger) -> LedgerTotals:
    gross_income = Decimal("0")
    total_discounts = Decimal("0")
    net_income = Decimal("0")
    for record in classified.income_records:
        gross_income += record.amount
        total_discounts += (
            record.discount_amount + record.payment_discount_amount
        )
        net_income += record.net_amount
    transfer_expense_total = sum(
        (expense.amount for expense in classified.inline_expenses),
        Decimal("0"),
    )
    independent_expense_total = sum(
        (expense.amount for expense in classified.independent_expenses),
        Decimal("0"),
    )
    return LedgerTotals(
        gross_income=gross_income,
        total_discounts=total_discounts,
        net_income=net_income,
        transfer_expense_total=transfer_expense_total,
        independent_expense_total=independent_expense_total,
    )


def _group_by_type(
    income_records: list[TransferRecord],
) -> dict[str, TypeRollup]:
    grouped: dict[str, list[TransferRecord]] = {}
    for record in income_records:
        grouped.setdefault(record.option_type, []).append(record)

    rollups: dict[str, TypeRollup] = {}
    for option_type, records in grouped.items():
        gross_total = Decimal("0")
        discount_total = Decimal("0")
        expense_total = Decimal("0")
        net_total = Decimal("0")
        for record in records:
            gross_total += record.amount
            discount_total += (
                record.discount_amount + record.payment_discount_amount
            )
            inline_expense = (
                record.expense_amount
                if is_inline_expense(record)
                else Decimal("0")
            )
            expense_total += inline_expense
            net_total += record.net_amount - inline_expense
        rollups[option_type] = TypeRollup(
            option_type=option_type,
            count=len(records),
            gross_total=gross_total,
            discount_total=discount_total,
            expense_total=expense_total,
            net_total=net_total,
            records=records,
        )
    return rollups


def _group_by_expense_category(
    classified: ClassifiedLedger,
    total_expenses: Decimal,
) -> dict[str, ExpenseCategoryRollup]:
    grouped: dict[str, list] = {}
    for expense in classified.all_expenses:
        grouped.setdefault(expense.category, []).append(expense)

    rollups: dict[str, ExpenseCategoryRollup] = {}
    for category, expenses in grouped.items():
        total = Decimal("0")
        count_by_source = {source: 0 for source in EXPENSE_SOURCES}
        imputed_count = 0
        for expense in expenses:
            total += expense.amount
            count_by_source[expense.source] += 1
            if expense.imputed:
                imputed_count += 1
        rollups[category] = ExpenseCategoryRollup(
            category=category,
            count=len(expenses),
            total=total,
            count_by_source=count_by_source,
            imputed_count=imputed_count,
            share_of_total=safe_percentage(total, total_expenses),
            expenses=expenses,
        )
    return rollups


def _group_by_month(classified: ClassifiedLedger) -> list[MonthRollup]:
    income: dict[str, Decimal] = {}
    income_counts: dict[str, int] = {}
    transfer_expenses: dict[str, Decimal] = {}
    independent_expenses: dict[str, Decimal] = {}
    expense_counts: dict[str, int] = {}
    zero = Decimal("0")

    for record in classified.income_records:
        key = effective_reference_month(record.reference_month, record.date)
        income[key] = income.get(key, zero) + record.net_amount
        income_counts[key] = income_counts.get(key, 0) + 1
    for expense in classified.inline_expenses:
        key = expense.reference_month
        transfer_expenses[key] = (
            transfer_expenses.get(key, zero) + expense.amount
        )
        expense_counts[key] = expense_counts.get(key, 0) + 1
    for expense in classified.independent_expenses:
        key = expense.reference_month
        independent_expenses[key] = (
            independent_expenses.get(key, zero) + expense.amount
        )
        expense_counts[key] = expense_counts.get(key, 0) + 1

    months = {*income, *transfer_expenses, *independent_expenses}
    return [
        MonthRollup(
            month=month,
            income_total=income.get(month, zero),
            transfer_expense_total=transfer_expenses.get(month, zero),
            independent_expense_total=independent_expenses.get(month, zero),
            income_count=income_counts.get(month, 0),
            expense_count=expense_counts.get(month, 0),
        )
        for month in sorted(months, reverse=True)
    ]


__all__ = [
    "aggregate_ledger",
    "build_doctor_ledger",
    "compute_monthly_overview",
]
