"""Formatting helpers for report formatters (pt-BR, BRL)."""

from datetime import date
from decimal import Decimal

from src.domain.models.transfers import PeriodFilter
from src.utils.decimal_utils import quantize_money

MONTH_NAMES_PT = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


def format_brl(value: Decimal) -> str:
    """Format a monetary value as Brazilian reais.

    Args:
        value: Amount to format.

    Returns:
        str: Value such as ``R$ 1.234,56`` or ``-R$ 10,00``.
    """
    rounded = quantize_money(value)
    sign = "-" if rounded < 0 else ""
    digits = f"{abs(rounded):,.2f}"
    digits = digits.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {digits}"


def format_percentage(value: Decimal) -> str:
    """Format a percentage with a decimal comma, e.g. ``16,33%``."""
    return f"{quantize_money(value):.2f}".replace(".", ",") + "%"


def format_date_br(value: date) -> str:
    """Format a date as ``DD/MM/YYYY``."""
    return value.strftime("%d/%m/%Y")


def format_month_label(month: str) -> str:
    """Format a ``YYYY-MM`` key as ``janeiro de 2024``.

    Keys that cannot be parsed are returned unchanged.
    """
    year, _, month_number = month.partition("-")
    if not (year.isdigit() and month_number.isdigit()):
        return month
    index = int(month_number) - 1
    if not 0 <= index < len(MONTH_NAMES_PT):
        return month
    return f"{MONTH_NAMES_PT[index]} de {year}"


def describe_period(period: PeriodFilter | None) -> str:
    """Describe the active period for report headers."""
    if period is None:
        return "Todos os meses"
    if period.has_custom_range:
        if period.start_date and period.end_date:
            return (
                f"{format_date_br(period.start_date)} a "
                f"{format_date_br(period.end_date)}"
            )
        if period.start_date:
            return f"A partir de {format_date_br(period.start_date)}"
        return f"Até {format_date_br(period.end_date)}"
    if period.reference_month:
        return format_month_label(period.reference_month)
    return "Todos os meses"


__all__ = [
    "MONTH_NAMES_PT",
    "format_brl",
    "format_percentage",
    "format_date_br",
    "format_month_label",
    "describe_period",
]
