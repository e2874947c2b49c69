"""Domain services package."""

from .aggregation import (
    aggregate_ledger,
    build_doctor_ledger,
    compute_monthly_overview,
)
from .classification import classify_records, is_imputed, is_inline_expense
from .discounts import (
    apply_transfer_changes,
    build_transfer_record,
    compute_discount_breakdown,
)
from .doctors import collect_doctor_names
from .filters import filter_independent_expenses, filter_transfers
from .formatting import (
    describe_period,
    format_brl,
    format_date_br,
    format_month_label,
    format_percentage,
)
from .normalization import (
    effective_reference_month,
    month_key,
    normalize_doctor_name,
    normalize_option_type,
    normalize_payment_method,
)
from .validation import is_net_consistent, validate_transfer_record

__all__ = [
    "aggregate_ledger",
    "build_doctor_ledger",
    "compute_monthly_overview",
    "classify_records",
    "is_imputed",
    "is_inline_expense",
    "apply_transfer_changes",
    "build_transfer_record",
    "compute_discount_breakdown",
    "collect_doctor_names",
    "filter_independent_expenses",
    "filter_transfers",
    "describe_period",
    "format_brl",
    "format_date_br",
    "format_month_label",
    "format_percentage",
    "effective_reference_month",
    "month_key",
    "normalize_doctor_name",
    "normalize_option_type",
    "normalize_payment_method",
    "is_net_consistent",
    "validate_transfer_record",
]
