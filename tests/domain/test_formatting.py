"""Tests for pt-BR formatting helpers."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models.transfers import PeriodFilter
from src.domain.services.formatting import (
    describe_period,
    format_brl,
    format_date_br,
    format_month_label,
    format_percentage,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("0"), "R$ 0,00"),
        (Decimal("836.7"), "R$ 836,70"),
        (Decimal("1234.5"), "R$ 1.234,50"),
        (Decimal("1234567.891"), "R$ 1.234.567,89"),
        (Decimal("-10"), "-R$ 10,00"),
    ],
)
def test_format_brl(value, expected) -> None:
    """Values use a decimal comma and dot thousands separators."""
    assert format_brl(value) == expected


def test_format_percentage() -> None:
    """Percentages are rendered with two decimals and a comma."""
    assert format_percentage(Decimal("16.33")) == "16,33%"
    assert format_percentage(Decimal("66.6666")) == "66,67%"


def test_format_month_label() -> None:
    """Month keys become Portuguese labels; invalid keys pass through."""
    assert format_month_label("2024-01") == "janeiro de 2024"
    assert format_month_label("2023-03") == "março de 2023"
    assert format_month_label("2024-13") == "2024-13"
    assert format_month_label("sem mes") == "sem mes"


def test_format_date_br() -> None:
    """Dates use the day/month/year layout."""
    assert format_date_br(date(2024, 1, 31)) == "31/01/2024"


def test_describe_period_variants() -> None:
    """Period descriptions cover ranges, months and no filter."""
    assert describe_period(None) == "Todos os meses"
    assert describe_period(PeriodFilter()) == "Todos os meses"
    assert describe_period(PeriodFilter(reference_month="2024-02")) == (
        "fevereiro de 2024"
    )
    assert describe_period(
        PeriodFilter(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))
    ) == "01/01/2024 a 31/01/2024"
    assert describe_period(PeriodFilter(start_date=date(2024, 1, 1))) == (
        "A partir de 01/01/2024"
    )
    assert describe_period(PeriodFilter(end_date=date(2024, 1, 31))) == (
        "Até 31/01/2024"
    )
