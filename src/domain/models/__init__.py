"""Domain models package."""

from .ledger import (
    AggregationResult,
    ClassifiedLedger,
    DoctorLedger,
    ExpenseCategoryRollup,
    LedgerTotals,
    MonthlyOverviewRow,
    MonthRollup,
    NormalizedExpense,
    TypeRollup,
)
from .transfers import (
    DiscountBreakdown,
    IndependentExpenseRecord,
    PeriodFilter,
    TransferDraft,
    TransferRecord,
)

__all__ = [
    "AggregationResult",
    "ClassifiedLedger",
    "DoctorLedger",
    "ExpenseCategoryRollup",
    "LedgerTotals",
    "MonthlyOverviewRow",
    "MonthRollup",
    "NormalizedExpense",
    "TypeRollup",
    "DiscountBreakdown",
    "IndependentExpenseRecord",
    "PeriodFilter",
    "TransferDraft",
    "TransferRecord",
]
