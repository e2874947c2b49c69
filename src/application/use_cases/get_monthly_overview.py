"""Use case to summarize transfers by calendar month."""

from src.application.ports.transfers_repository import TransfersRepositoryPort
from src.domain.models.ledger import MonthlyOverviewRow
from src.domain.services.aggregation import compute_monthly_overview
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyOverviewUseCase:
    """Summarize net transfers per month across all doctors."""

    def __init__(
        self,
        transfers_repository: TransfersRepositoryPort,
        logger=None,
    ) -> None:
        self._transfers_repository = transfers_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[MonthlyOverviewRow]:
        """Return monthly rows, latest month first."""
        transfers = self._transfers_repository.fetch_transfers()
        rows = compute_monthly_overview(transfers)
        self._logger.info(
            f"Monthly overview computed: {len(rows)} months "
            f"from {len(transfers)} transfers"
        )
        return rows


__all__ = ["GetMonthlyOverviewUseCase", "MonthlyOverviewRow"]
