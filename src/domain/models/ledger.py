"""Domain models for classified and aggregated ledger views."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.transfers import TransferRecord


@dataclass(frozen=True)
class NormalizedExpense:
    """Expense entry unified across transfer and independent sources."""

    id: str
    date: date
    reference_month: str
    description: str
    amount: Decimal
    category: str
    source: str
    imputed: bool


@dataclass(frozen=True)
class ClassifiedLedger:
    """Doctor records split into income and expense populations."""

    income_records: list[TransferRecord]
    inline_expenses: list[NormalizedExpense]
    independent_expenses: list[NormalizedExpense]
    all_expenses: list[NormalizedExpense]


@dataclass(frozen=True)
class LedgerTotals:
    """Headline totals of an aggregation.

    Attributes:
        gross_income: Sum of gross amounts of income records.
        total_discounts: Sum of tier and payment discounts.
        net_income: Sum of net amounts of income records.
        transfer_expense_total: Sum of inline expenses.
        independent_expense_total: Sum of independent ledger expenses.
    """

    gross_income: Decimal = Decimal("0")
    total_discounts: Decimal = Decimal("0")
    net_income: Decimal = Decimal("0")
    transfer_expense_total: Decimal = Decimal("0")
    independent_expense_total: Decimal = Decimal("0")

    @property
    def total_expenses(self) -> Decimal:
        """Return expenses from both sources."""
        return self.transfer_expense_total + self.independent_expense_total

    @property
    def balance(self) -> Decimal:
        """Return net income minus all expenses."""
        return self.net_income - self.total_expenses


@dataclass(frozen=True)
class TypeRollup:
    """Income rollup for a single tier."""

    option_type: str
    count: int
    gross_total: Decimal
    discount_total: Decimal
    expense_total: Decimal
    net_total: Decimal
    records: list[TransferRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ExpenseCategoryRollup:
    """Expense rollup for a single category."""

    category: str
    count: int
    total: Decimal
    count_by_source: dict[str, int]
    imputed_count: int
    share_of_total: Decimal
    expenses: list[NormalizedExpense] = field(default_factory=list)


@dataclass(frozen=True)
class MonthRollup:
    """Totals for a single reference month."""

    month: str
    income_total: Decimal
    transfer_expense_total: Decimal
    independent_expense_total: Decimal
    income_count: int
    expense_count: int

    @property
    def total_expenses(self) -> Decimal:
        return self.transfer_expense_total + self.independent_expense_total

    @property
    def balance(self) -> Decimal:
        return self.income_total - self.total_expenses


@dataclass(frozen=True)
class AggregationResult:
    """Derived views over a doctor's filtered records."""

    totals: LedgerTotals
    by_type: dict[str, TypeRollup]
    by_expense_category: dict[str, ExpenseCategoryRollup]
    by_month: list[MonthRollup]

    @property
    def is_empty(self) -> bool:
        return not self.by_type and not self.by_expense_category


@dataclass(frozen=True)
class DoctorLedger:
    """Aggregation bundled with the context a report formatter needs."""

    doctor_name: str
    period_description: str
    classified: ClassifiedLedger
    result: AggregationResult


@dataclass(frozen=True)
class MonthlyOverviewRow:
    """Net total and record count for a calendar month."""

    month: str
    net_total: Decimal
    count: int


__all__ = [
    "NormalizedExpense",
    "ClassifiedLedger",
    "LedgerTotals",
    "TypeRollup",
    "ExpenseCategoryRollup",
    "MonthRollup",
    "AggregationResult",
    "DoctorLedger",
    "MonthlyOverviewRow",
]
