"""CLI adapter printing a doctor's ledger for a period.

Configuration comes from environment variables: ``LEDGER_DOCTOR`` (required),
``LEDGER_MONTH`` (``YYYY-MM``), ``LEDGER_START_DATE`` and
``LEDGER_END_DATE`` (``YYYY-MM-DD``). A custom date range wins over the month.
"""

from datetime import date
import os

from src.application.use_cases.get_doctor_ledger import GetDoctorLedgerUseCase
from src.domain.constants import EXPENSE_CATEGORY_LABELS, TIER_LABELS
from src.domain.models.transfers import PeriodFilter
from src.domain.services.formatting import (
    format_brl,
    format_month_label,
    format_percentage,
)
from src.infrastructure.container import build_transfers_repository
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _build_period(logger) -> PeriodFilter | None:
    start_date = _parse_date(os.getenv("LEDGER_START_DATE"), logger)
    end_date = _parse_date(os.getenv("LEDGER_END_DATE"), logger)
    month = (os.getenv("LEDGER_MONTH") or "").strip() or None
    if start_date is None and end_date is None and month is None:
        return None
    return PeriodFilter(
        reference_month=month,
        start_date=start_date,
        end_date=end_date,
    )


def main() -> None:
    """Print totals and rollups of a doctor's ledger."""
    logger = get_app_logger()
    doctor_name = (os.getenv("LEDGER_DOCTOR") or "").strip()
    if not doctor_name:
        logger.warning("LEDGER_DOCTOR is required to print a ledger.")
        return

    period = _build_period(logger)
    get_usage_logger().info(
        f"doctor_ledger_cli doctor='{doctor_name}' period={period}"
    )

    try:
        repository = build_transfers_repository()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    use_case = GetDoctorLedgerUseCase(
        transfers_repository=repository,
        logger=logger,
    )
    ledger = use_case.execute(doctor_name, period)
    result = ledger.result
    totals = result.totals

    print(f"{ledger.doctor_name} ({ledger.period_description})")
    print(
        f"Entradas: bruto={format_brl(totals.gross_income)}, "
        f"descontos={format_brl(totals.total_discounts)}, "
        f"liquido={format_brl(totals.net_income)}"
    )
    print(
        f"Saidas: repasses={format_brl(totals.transfer_expense_total)}, "
        f"avulsas={format_brl(totals.independent_expense_total)}, "
        f"total={format_brl(totals.total_expenses)}"
    )
    print(f"Saldo: {format_brl(totals.balance)}")
    if result.is_empty:
        print("Nenhum lançamento no período.")
        return

    for option_type, rollup in result.by_type.items():
        print(
            f"  {TIER_LABELS.get(option_type, option_type)}: "
            f"{rollup.count} x, liquido={format_brl(rollup.net_total)}"
        )
    for category, rollup in result.by_expense_category.items():
        print(
            f"  {EXPENSE_CATEGORY_LABELS.get(category, category)}: "
            f"{format_brl(rollup.total)} "
            f"({format_percentage(rollup.share_of_total)})"
        )
    for month in result.by_month:
        print(
            f"  {format_month_label(month.month)}: "
            f"entradas={format_brl(month.income_total)}, "
            f"saidas={format_brl(month.total_expenses)}, "
            f"saldo={format_brl(month.balance)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
