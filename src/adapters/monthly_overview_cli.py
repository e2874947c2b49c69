"""CLI adapter printing net transfers per month across doctors."""

from src.application.use_cases.get_monthly_overview import (
    GetMonthlyOverviewUseCase,
)
from src.domain.services.formatting import format_brl, format_month_label
from src.infrastructure.container import build_transfers_repository
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> None:
    """Run the monthly overview use case and print one line per month."""
    logger = get_app_logger()
    get_usage_logger().info("monthly_overview_cli")
    try:
        repository = build_transfers_repository()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    use_case = GetMonthlyOverviewUseCase(
        transfers_repository=repository,
        logger=logger,
    )
    for row in use_case.execute():
        print(
            f"{format_month_label(row.month)}: {format_brl(row.net_total)} "
            f"({row.count} repasses)"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
