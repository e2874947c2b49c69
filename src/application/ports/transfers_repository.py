"""Port for reading and writing ledger records."""

from typing import Protocol

from src.domain.models.transfers import (
    IndependentExpenseRecord,
    TransferRecord,
)


class TransfersRepositoryPort(Protocol):
    """Port exposing the transfer ledger and the independent ledger."""

    def fetch_transfers(self) -> list[TransferRecord]:
        """Return all transfer records of the current user."""

    def fetch_transfer(self, record_id: str) -> TransferRecord | None:
        """Return a single transfer record, or None when missing."""

    def fetch_independent_expenses(
        self,
        doctor_name: str,
    ) -> list[IndependentExpenseRecord]:
        """Return independent expenses whose subcategory is the doctor."""

    def fetch_doctor_names(self) -> list[str]:
        """Return raw doctor names found in both ledgers."""

    def insert_transfer(self, record: TransferRecord) -> TransferRecord:
        """Persist a new transfer and return the stored record."""

    def update_transfer(self, record: TransferRecord) -> TransferRecord:
        """Persist an edited transfer and return the stored record."""

    def delete_transfer(self, record_id: str) -> None:
        """Remove a transfer; raise LookupError when it does not exist."""


__all__ = ["TransfersRepositoryPort"]
