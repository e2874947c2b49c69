"""Domain package for business rules and core models."""

from .constants import (
    EXPENSE_TIER,
    INCOME_TIERS,
    PAYMENT_DISCOUNT_PERCENTAGES,
    PAYMENT_METHODS,
    TIER_DISCOUNT_PERCENTAGES,
)
from .models import (
    AggregationResult,
    ClassifiedLedger,
    DiscountBreakdown,
    DoctorLedger,
    IndependentExpenseRecord,
    LedgerTotals,
    PeriodFilter,
    TransferDraft,
    TransferRecord,
)
from .policies import is_valid_doctor_name
from .services import (
    aggregate_ledger,
    build_doctor_ledger,
    classify_records,
    compute_discount_breakdown,
    filter_transfers,
)

__all__ = [
    "EXPENSE_TIER",
    "INCOME_TIERS",
    "PAYMENT_DISCOUNT_PERCENTAGES",
    "PAYMENT_METHODS",
    "TIER_DISCOUNT_PERCENTAGES",
    "AggregationResult",
    "ClassifiedLedger",
    "DiscountBreakdown",
    "DoctorLedger",
    "IndependentExpenseRecord",
    "LedgerTotals",
    "PeriodFilter",
    "TransferDraft",
    "TransferRecord",
    "is_valid_doctor_name",
    "aggregate_ledger",
    "build_doctor_ledger",
    "classify_records",
    "compute_discount_breakdown",
    "filter_transfers",
]
