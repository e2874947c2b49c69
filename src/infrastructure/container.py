"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transfers_repository import TransfersRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transfers_repository import (
    SqlAlchemyTransfersRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transfers_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> TransfersRepositoryPort:
    """Return the ledger repository scoped to the configured user.

    Raises:
        RuntimeError: If no user id is configured.
    """
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.user_id is None:
        raise RuntimeError("Ledger repository requires a LEDGER_USER_ID value.")
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransfersRepository(
        resolved_db,
        user_id=resolved_settings.user_id,
        doctor_ledger_category=resolved_settings.doctor_ledger_category,
    )


__all__ = [
    "build_database_adapter",
    "build_transfers_repository",
]
