"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_DOCTOR_LEDGER_CATEGORY
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reading the hosted ledger tables.

    Attributes:
        user_id: Owner of the ledger rows; every query is scoped to it.
        doctor_ledger_category: Independent-ledger category whose
            subcategory holds doctor names.
    """

    user_id: str | None = None
    doctor_ledger_category: str = DEFAULT_DOCTOR_LEDGER_CATEGORY

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        user_id = (os.getenv("LEDGER_USER_ID") or "").strip() or None
        if user_id is None:
            get_app_logger().warning(
                "LEDGER_USER_ID is not set; repository reads are disabled"
            )
        category = (
            os.getenv("LEDGER_DOCTOR_CATEGORY") or ""
        ).strip() or DEFAULT_DOCTOR_LEDGER_CATEGORY
        return cls(user_id=user_id, doctor_ledger_category=category)


__all__ = ["LedgerSettings"]
