"""Tests for the transfer write use cases."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.record_transfer import (
    DeleteTransferUseCase,
    RecordTransferUseCase,
    UpdateTransferUseCase,
)
from src.domain.models.transfers import TransferDraft


def _draft(**overrides) -> TransferDraft:
    values = dict(
        date=date(2024, 1, 15),
        reference_month="2024-01",
        doctor_name="Dr. A",
        option_type="tier2",
        category="Cirurgia",
        amount=Decimal("500"),
        payment_method="credit",
    )
    values.update(overrides)
    return TransferDraft(**values)


def test_record_transfer_derives_and_persists() -> None:
    """New transfers are stored with calculator-derived amounts."""
    repository = MagicMock()
    repository.insert_transfer.side_effect = lambda record: record

    use_case = RecordTransferUseCase(
        transfers_repository=repository,
        logger=MagicMock(),
        id_factory=lambda: "new-id",
    )
    stored = use_case.execute(_draft())

    assert stored.id == "new-id"
    assert stored.discount_amount == Decimal("54.65")
    assert stored.payment_discount_amount == Decimal("12.50")
    assert stored.net_amount == Decimal("432.85")
    repository.insert_transfer.assert_called_once_with(stored)


def test_record_transfer_rejects_incomplete_drafts() -> None:
    """Doctor, category and reference month are required."""
    repository = MagicMock()
    use_case = RecordTransferUseCase(
        transfers_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(ValueError) as excinfo:
        use_case.execute(_draft(doctor_name=" ", category=""))

    assert "doctor_name" in str(excinfo.value)
    assert "category" in str(excinfo.value)
    repository.insert_transfer.assert_not_called()


def test_update_transfer_recomputes_net(make_transfer) -> None:
    """Edits always re-derive discounts, even over a stale stored net."""
    stored = replace(make_transfer(record_id="t-1"), net_amount=Decimal("1"))
    repository = MagicMock()
    repository.fetch_transfer.return_value = stored
    repository.update_transfer.side_effect = lambda record: record

    use_case = UpdateTransferUseCase(
        transfers_repository=repository,
        logger=MagicMock(),
    )
    updated = use_case.execute("t-1", payment_method="debit")

    assert updated.payment_discount_amount == Decimal("17.00")
    assert updated.net_amount == Decimal("819.70")
    repository.fetch_transfer.assert_called_once_with("t-1")
    repository.update_transfer.assert_called_once_with(updated)


def test_update_transfer_missing_record_raises() -> None:
    """Unknown identifiers raise LookupError."""
    repository = MagicMock()
    repository.fetch_transfer.return_value = None

    use_case = UpdateTransferUseCase(
        transfers_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(LookupError):
        use_case.execute("missing", amount="10")
    repository.update_transfer.assert_not_called()


def test_delete_transfer_removes_through_repository() -> None:
    """Deletion is delegated to the repository and logged."""
    repository = MagicMock()
    logger = MagicMock()

    DeleteTransferUseCase(
        transfers_repository=repository,
        logger=logger,
    ).execute("t-1")

    repository.delete_transfer.assert_called_once_with("t-1")
    logger.info.assert_called_once()


def test_delete_transfer_missing_record_raises() -> None:
    """A missing record surfaces as LookupError without a log entry."""
    repository = MagicMock()
    repository.delete_transfer.side_effect = LookupError("missing")
    logger = MagicMock()

    use_case = DeleteTransferUseCase(
        transfers_repository=repository,
        logger=logger,
    )

    with pytest.raises(LookupError):
        use_case.execute("missing")
    logger.info.assert_not_called()
