"""Application use cases package."""

from .get_doctor_ledger import GetDoctorLedgerUseCase, DoctorLedger
from .get_monthly_overview import (
    GetMonthlyOverviewUseCase,
    MonthlyOverviewRow,
)
from .list_doctors import ListDoctorsUseCase
from .record_transfer import (
    DeleteTransferUseCase,
    RecordTransferUseCase,
    UpdateTransferUseCase,
)

__all__ = [
    "GetDoctorLedgerUseCase",
    "DoctorLedger",
    "GetMonthlyOverviewUseCase",
    "MonthlyOverviewRow",
    "ListDoctorsUseCase",
    "RecordTransferUseCase",
    "UpdateTransferUseCase",
    "DeleteTransferUseCase",
]
