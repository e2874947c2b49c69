"""Shared factories for ledger records."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models.transfers import (
    IndependentExpenseRecord,
    TransferDraft,
    TransferRecord,
)
from src.domain.services.discounts import build_transfer_record


@pytest.fixture
def make_transfer():
    """Return a factory building transfers with derived amounts filled in."""
    counter = iter(range(1, 10_000))

    def _make(
        amount="1000",
        option_type="tier1",
        payment_method="pix",
        doctor_name="Dr. A",
        record_date=date(2024, 1, 15),
        reference_month="2024-01",
        category="Consulta",
        description="",
        expense_category=None,
        expense_amount="0",
        origin=None,
        record_id=None,
    ) -> TransferRecord:
        draft = TransferDraft(
            date=record_date,
            reference_month=reference_month,
            doctor_name=doctor_name,
            option_type=option_type,
            category=category,
            amount=Decimal(amount),
            payment_method=payment_method,
            description=description,
            expense_category=expense_category,
            expense_amount=Decimal(expense_amount),
            origin=origin,
        )
        return build_transfer_record(
            draft,
            record_id or f"t{next(counter)}",
        )

    return _make


@pytest.fixture
def make_expense_transfer(make_transfer):
    """Return a factory building pure expense-tier transfers."""

    def _make(expense_amount="100", expense_category="insumo", **kwargs):
        kwargs.setdefault("category", "Despesa")
        return make_transfer(
            amount="0",
            option_type="expense",
            payment_method="cash",
            expense_category=expense_category,
            expense_amount=expense_amount,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_independent():
    """Return a factory building independent ledger expenses."""
    counter = iter(range(1, 10_000))

    def _make(
        amount="50",
        subcategory="Dr. A",
        record_date=date(2024, 1, 20),
        reference_month=None,
        category="repasse_medico",
        description="Adiantamento",
        origin=None,
    ) -> IndependentExpenseRecord:
        return IndependentExpenseRecord(
            id=f"i{next(counter)}",
            date=record_date,
            amount=Decimal(amount),
            description=description,
            category=category,
            subcategory=subcategory,
            reference_month=reference_month,
            origin=origin,
        )

    return _make
