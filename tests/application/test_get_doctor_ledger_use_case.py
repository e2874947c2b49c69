"""Tests for the GetDoctorLedgerUseCase."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_doctor_ledger import GetDoctorLedgerUseCase
from src.domain.models.transfers import PeriodFilter


def test_execute_combines_both_expense_sources(
    make_transfer,
    make_independent,
) -> None:
    """The ledger balance subtracts inline and independent expenses."""
    repository = MagicMock()
    repository.fetch_transfers.return_value = [
        make_transfer(expense_category="insumo", expense_amount="100"),
        make_transfer(doctor_name="Dr. B"),
    ]
    repository.fetch_independent_expenses.return_value = [
        make_independent(amount="50"),
    ]
    logger = MagicMock()

    use_case = GetDoctorLedgerUseCase(
        transfers_repository=repository,
        logger=logger,
    )
    ledger = use_case.execute("Dr. A", PeriodFilter(reference_month="2024-01"))

    assert ledger.result.totals.balance == Decimal("686.70")
    assert ledger.result.by_type["tier1"].count == 1
    repository.fetch_independent_expenses.assert_called_once_with("Dr. A")
    assert logger.info.call_count == 2
    logger.warning.assert_not_called()


def test_execute_with_blank_doctor_skips_independent_lookup(
    make_transfer,
) -> None:
    """Blank doctor names return an empty ledger."""
    repository = MagicMock()
    repository.fetch_transfers.return_value = [make_transfer()]

    use_case = GetDoctorLedgerUseCase(
        transfers_repository=repository,
        logger=MagicMock(),
    )
    ledger = use_case.execute("  ")

    assert ledger.result.is_empty
    repository.fetch_independent_expenses.assert_not_called()


def test_execute_warns_about_inconsistent_stored_records(
    make_transfer,
) -> None:
    """Stored records with a stale net are reported but still aggregated."""
    stale = replace(make_transfer(), net_amount=Decimal("1000"))
    repository = MagicMock()
    repository.fetch_transfers.return_value = [stale]
    repository.fetch_independent_expenses.return_value = []
    logger = MagicMock()

    use_case = GetDoctorLedgerUseCase(
        transfers_repository=repository,
        logger=logger,
    )
    ledger = use_case.execute(
        "Dr. A",
        PeriodFilter(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31)),
    )

    logger.warning.assert_called_once()
    assert ledger.result.totals.net_income == Decimal("1000")
