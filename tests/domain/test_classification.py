"""Tests for the income/expense classifier."""

from datetime import date
from decimal import Decimal

from src.domain.models.transfers import PeriodFilter
from src.domain.services.classification import classify_records, is_imputed


def test_income_excludes_pure_expense_records(
    make_transfer,
    make_expense_transfer,
) -> None:
    """Expense-tier records never count as income."""
    income = make_transfer()
    expense = make_expense_transfer()

    classified = classify_records([income, expense])

    assert classified.income_records == [income]
    assert [item.id for item in classified.inline_expenses] == [expense.id]


def test_income_record_can_carry_inline_expense(make_transfer) -> None:
    """An income record with an attributed expense is in both sets."""
    record = make_transfer(expense_category="insumo", expense_amount="100")

    classified = classify_records([record])

    assert classified.income_records == [record]
    assert len(classified.inline_expenses) == 1
    inline = classified.inline_expenses[0]
    assert inline.amount == Decimal("100")
    assert inline.category == "insumo"
    assert inline.source == "transfer"
    assert inline.imputed is False


def test_expense_amount_without_category_is_not_inline(make_transfer) -> None:
    """Inline expenses need both an amount and a category."""
    record = make_transfer(expense_category=None, expense_amount="30")

    classified = classify_records([record])

    assert classified.inline_expenses == []


def test_pure_expense_without_amount_is_not_dropped(
    make_expense_transfer,
) -> None:
    """Every expense-tier record yields an expense entry."""
    record = make_expense_transfer(expense_amount="0", expense_category=None)

    classified = classify_records([record])

    assert len(classified.inline_expenses) == 1
    assert classified.inline_expenses[0].category == "outros"


def test_imputed_heuristic() -> None:
    """Expense tier or the system marker flag an expense as imputed."""
    assert is_imputed("expense", "Rateio") is True
    assert is_imputed("tier1", "Insumo LANÇADO VIA SISTEMA em lote") is True
    assert is_imputed("tier1", "Insumo manual") is False
    assert is_imputed(None, None) is False


def test_explicit_origin_overrides_heuristic() -> None:
    """An origin tag is authoritative when present."""
    assert is_imputed("expense", "Rateio", origin="manual") is False
    assert is_imputed("tier1", "Insumo", origin="system") is True


def test_independent_expenses_restricted_to_doctor_and_period(
    make_transfer,
    make_independent,
) -> None:
    """Independent entries are matched by subcategory and period."""
    kept = make_independent(amount="50", record_date=date(2024, 1, 20))
    other_month = make_independent(record_date=date(2024, 2, 20))
    other_doctor = make_independent(subcategory="Dr. B")

    classified = classify_records(
        [make_transfer()],
        [kept, other_month, other_doctor],
        doctor_name="Dr. A",
        period=PeriodFilter(reference_month="2024-01"),
    )

    assert [item.id for item in classified.independent_expenses] == [kept.id]
    normalized = classified.independent_expenses[0]
    assert normalized.source == "independent"
    assert normalized.reference_month == "2024-01"
    assert normalized.category == "repasse_medico"


def test_all_expenses_unified_and_sorted(
    make_transfer,
    make_independent,
) -> None:
    """Inline and independent expenses merge most recent first."""
    inline = make_transfer(
        record_date=date(2024, 1, 10),
        expense_category="insumo",
        expense_amount="10",
    )
    independent = make_independent(
        record_date=date(2024, 1, 25),
        category=None,
    )

    classified = classify_records([inline], [independent])

    assert [item.id for item in classified.all_expenses] == [
        independent.id,
        inline.id,
    ]
    assert classified.all_expenses[0].category == "outros"


def test_classifier_does_not_mutate_inputs(make_transfer, make_independent):
    """Input lists are left untouched."""
    transfers = [make_transfer(), make_transfer()]
    independent = [make_independent()]
    transfers_copy = list(transfers)
    independent_copy = list(independent)

    classify_records(transfers, independent, doctor_name="Dr. A")

    assert transfers == transfers_copy
    assert independent == independent_copy
