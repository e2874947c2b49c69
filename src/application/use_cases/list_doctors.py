"""Use case to list doctors known to the ledgers."""

from src.application.ports.transfers_repository import TransfersRepositoryPort
from src.domain.services.doctors import collect_doctor_names


class ListDoctorsUseCase:
    """Return doctor names from transfers and the independent ledger."""

    def __init__(self, transfers_repository: TransfersRepositoryPort) -> None:
        self._transfers_repository = transfers_repository

    def execute(self) -> list[str]:
        """Return distinct, trimmed doctor names in alphabetical order."""
        return collect_doctor_names(
            self._transfers_repository.fetch_doctor_names()
        )


__all__ = ["ListDoctorsUseCase"]
