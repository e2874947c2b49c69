"""Use case to compute a doctor's ledger for a period."""

from src.application.ports.transfers_repository import TransfersRepositoryPort
from src.domain.models.ledger import DoctorLedger
from src.domain.models.transfers import PeriodFilter
from src.domain.policies import is_valid_doctor_name
from src.domain.services.aggregation import build_doctor_ledger
from src.domain.services.validation import validate_transfer_record
from src.infrastructure.logging.logger import get_app_logger


class GetDoctorLedgerUseCase:
    """Compute income, expense and balance rollups for one doctor."""

    def __init__(
        self,
        transfers_repository: TransfersRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transfers_repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transfers_repository = transfers_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        doctor_name: str | None,
        period: PeriodFilter | None = None,
    ) -> DoctorLedger:
        """Return the doctor's ledger for the period.

        A blank doctor name yields an empty ledger without querying
        independent expenses.

        Args:
            doctor_name: Doctor to report on.
            period: Optional month or custom date range.

        Returns:
            DoctorLedger: Aggregated views and report context.
        """
        transfers = self._transfers_repository.fetch_transfers()
        for record in transfers:
            validate_transfer_record(record, self._logger)

        independent = []
        if is_valid_doctor_name(doctor_name):
            independent = self._transfers_repository.fetch_independent_expenses(
                doctor_name
            )
        self._logger.info(
            f"Fetched {len(transfers)} transfers and {len(independent)} "
            f"independent expenses for doctor={doctor_name!r}"
        )

        ledger = build_doctor_ledger(
            transfers,
            independent,
            doctor_name,
            period,
        )
        totals = ledger.result.totals
        self._logger.info(
            f"Ledger computed for doctor={doctor_name!r}: "
            f"net={totals.net_income}, expenses={totals.total_expenses}, "
            f"balance={totals.balance}"
        )
        return ledger


__all__ = ["GetDoctorLedgerUseCase", "DoctorLedger"]
