"""Tests for normalization, validation and doctor discovery helpers."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.services.doctors import collect_doctor_names
from src.domain.services.normalization import (
    effective_reference_month,
    month_key,
    normalize_doctor_name,
    normalize_option_type,
    normalize_payment_method,
)
from src.domain.services.validation import (
    is_net_consistent,
    validate_transfer_record,
)


def test_normalize_option_type_maps_legacy_codes() -> None:
    """Stored option codes map to tier codes."""
    assert normalize_option_type("option1") == "tier1"
    assert normalize_option_type(" Option2 ") == "tier2"
    assert normalize_option_type("option3") == "tier3"
    assert normalize_option_type("expense") == "expense"
    assert normalize_option_type(None) == ""


def test_normalize_payment_method() -> None:
    """Card codes are shortened and missing methods default to cash."""
    assert normalize_payment_method("debit_card") == "debit"
    assert normalize_payment_method("credit_card") == "credit"
    assert normalize_payment_method("PIX") == "pix"
    assert normalize_payment_method(None) == "cash"


def test_month_helpers() -> None:
    """Reference months fall back to the date's month."""
    assert month_key(date(2024, 3, 9)) == "2024-03"
    assert effective_reference_month("2024-01", date(2024, 3, 9)) == "2024-01"
    assert effective_reference_month(None, date(2024, 3, 9)) == "2024-03"
    assert effective_reference_month("  ", date(2024, 3, 9)) == "2024-03"


def test_normalize_doctor_name() -> None:
    """Blank names normalize to None."""
    assert normalize_doctor_name("  Dr. A ") == "Dr. A"
    assert normalize_doctor_name("   ") is None
    assert normalize_doctor_name(None) is None


def test_collect_doctor_names_unions_sources() -> None:
    """Names from both ledgers are trimmed, deduplicated and sorted."""
    names = collect_doctor_names(
        [" Dr. B ", None, "Dr. A"],
        ["Dr. A", "", "Dr. C"],
    )

    assert names == ["Dr. A", "Dr. B", "Dr. C"]


def test_validate_transfer_record_warns_on_inconsistencies(
    make_transfer,
) -> None:
    """Inconsistent nets and uncategorized expenses are logged."""
    logger = MagicMock()
    consistent = make_transfer()
    broken = replace(
        consistent,
        net_amount=Decimal("900"),
        expense_amount=Decimal("5"),
        expense_category=None,
    )

    validate_transfer_record(consistent, logger)
    logger.warning.assert_not_called()

    validate_transfer_record(broken, logger)
    assert logger.warning.call_count == 2
    assert not is_net_consistent(broken)


def test_net_consistency_tolerates_one_cent(make_transfer) -> None:
    """Differences up to a cent are accepted."""
    record = replace(make_transfer(), net_amount=Decimal("836.71"))

    assert is_net_consistent(record)
