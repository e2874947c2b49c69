"""Use cases writing transfer records.

Create and edit derive discount and net amounts through the discount
calculator so stored derived values always match the editable fields.
"""

import uuid
from typing import Callable

from src.application.ports.transfers_repository import TransfersRepositoryPort
from src.domain.models.transfers import TransferDraft, TransferRecord
from src.domain.policies import is_valid_doctor_name
from src.domain.services.discounts import (
    apply_transfer_changes,
    build_transfer_record,
)
from src.infrastructure.logging.logger import get_app_logger


def _new_record_id() -> str:
    return str(uuid.uuid4())


class RecordTransferUseCase:
    """Create a transfer from user-entered fields."""

    def __init__(
        self,
        transfers_repository: TransfersRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] = _new_record_id,
    ) -> None:
        """Initialize the use case.

        Args:
            transfers_repository: Port persisting transfer records.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Callable generating new record identifiers.
        """
        self._transfers_repository = transfers_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory

    def execute(self, draft: TransferDraft) -> TransferRecord:
        """Derive the discount breakdown and persist the new record.

        Args:
            draft: Fields entered by the user.

        Returns:
            TransferRecord: Stored record.

        Raises:
            ValueError: If the doctor, category or reference month is missing.
        """
        missing = []
        if not is_valid_doctor_name(draft.doctor_name):
            missing.append("doctor_name")
        if not draft.category:
            missing.append("category")
        if not draft.reference_month:
            missing.append("reference_month")
        if missing:
            raise ValueError(f"Missing required transfer fields: {missing}")

        record = build_transfer_record(draft, self._id_factory())
        stored = self._transfers_repository.insert_transfer(record)
        self._logger.info(
            f"Recorded transfer id={stored.id} doctor={stored.doctor_name!r} "
            f"amount={stored.amount} net={stored.net_amount}"
        )
        return stored


class UpdateTransferUseCase:
    """Edit a stored transfer, recomputing its derived amounts."""

    def __init__(
        self,
        transfers_repository: TransfersRepositoryPort,
        logger=None,
    ) -> None:
        self._transfers_repository = transfers_repository
        self._logger = logger or get_app_logger()

    def execute(self, record_id: str, **changes) -> TransferRecord:
        """Apply editable field changes and persist the record.

        Args:
            record_id: Identifier of the record to edit.
            **changes: Editable fields to replace.

        Returns:
            TransferRecord: Stored record.

        Raises:
            LookupError: If no record has the identifier.
            ValueError: If derived or unknown fields are passed.
        """
        record = self._transfers_repository.fetch_transfer(record_id)
        if record is None:
            raise LookupError(f"Transfer not found: {record_id}")
        edited = apply_transfer_changes(record, **changes)
        stored = self._transfers_repository.update_transfer(edited)
        self._logger.info(
            f"Updated transfer id={stored.id}: net "
            f"{record.net_amount} -> {stored.net_amount}"
        )
        return stored


class DeleteTransferUseCase:
    """Remove a stored transfer."""

    def __init__(
        self,
        transfers_repository: TransfersRepositoryPort,
        logger=None,
    ) -> None:
        self._transfers_repository = transfers_repository
        self._logger = logger or get_app_logger()

    def execute(self, record_id: str) -> None:
        """Delete the record with the given identifier.

        Raises:
            LookupError: If no record has the identifier.
        """
        self._transfers_repository.delete_transfer(record_id)
        self._logger.info(f"Deleted transfer id={record_id}")


__all__ = [
    "RecordTransferUseCase",
    "UpdateTransferUseCase",
    "DeleteTransferUseCase",
]
