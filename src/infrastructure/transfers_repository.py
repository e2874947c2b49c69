"""SQLAlchemy-backed repository for the ledger tables."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transfers_repository import TransfersRepositoryPort
from src.domain.constants import (
    PAYMENT_CREDIT,
    PAYMENT_DEBIT,
    TIER_1,
    TIER_2,
    TIER_3,
)
from src.domain.models.transfers import (
    IndependentExpenseRecord,
    TransferRecord,
)
from src.domain.services.normalization import (
    normalize_option_type,
    normalize_payment_method,
)
from src.utils.decimal_utils import coerce_decimal


TRANSFER_COLUMNS = """
    id, date, reference_month, doctor_name, option_type, category,
    description, amount, discount_percentage, discount_amount,
    payment_method, payment_discount_percentage, payment_discount_amount,
    net_amount, expense_category, expense_amount
"""

SELECT_TRANSFERS_SQL = text(
    f"""
    SELECT {TRANSFER_COLUMNS}
    FROM medical_transfers
    WHERE user_id = :user_id
    ORDER BY date DESC
    """
)

SELECT_TRANSFER_SQL = text(
    f"""
    SELECT {TRANSFER_COLUMNS}
    FROM medical_transfers
    WHERE user_id = :user_id AND id = :id
    LIMIT 1
    """
)

SELECT_INDEPENDENT_EXPENSES_SQL = text(
    """
    SELECT id, date, amount, description, category, subcategory,
           reference_month
    FROM transactions
    WHERE user_id = :user_id
      AND type = 'expense'
      AND subcategory = :doctor_name
    ORDER BY date DESC
    """
)

SELECT_DOCTOR_NAMES_SQL = text(
    """
    SELECT doctor_name AS name
    FROM medical_transfers
    WHERE user_id = :user_id AND doctor_name IS NOT NULL
    UNION
    SELECT subcategory AS name
    FROM transactions
    WHERE user_id = :user_id
      AND type = 'expense'
      AND category = :category
      AND subcategory IS NOT NULL
    """
)

INSERT_TRANSFER_SQL = text(
    """
    INSERT INTO medical_transfers (
        id, user_id, date, reference_month, doctor_name, option_type,
        category, description, amount, discount_percentage, discount_amount,
        payment_method, payment_discount_percentage, payment_discount_amount,
        net_amount, expense_category, expense_amount
    )
    VALUES (
        :id, :user_id, :date, :reference_month, :doctor_name, :option_type,
        :category, :description, :amount, :discount_percentage,
        :discount_amount, :payment_method, :payment_discount_percentage,
        :payment_discount_amount, :net_amount, :expense_category,
        :expense_amount
    )
    """
)

UPDATE_TRANSFER_SQL = text(
    """
    UPDATE medical_transfers
    SET date = :date,
        reference_month = :reference_month,
        doctor_name = :doctor_name,
        option_type = :option_type,
        category = :category,
        description = :description,
        amount = :amount,
        discount_percentage = :discount_percentage,
        discount_amount = :discount_amount,
        payment_method = :payment_method,
        payment_discount_percentage = :payment_discount_percentage,
        payment_discount_amount = :payment_discount_amount,
        net_amount = :net_amount,
        expense_category = :expense_category,
        expense_amount = :expense_amount
    WHERE user_id = :user_id AND id = :id
    """
)

DELETE_TRANSFER_SQL = text(
    """
    DELETE FROM medical_transfers
    WHERE user_id = :user_id AND id = :id
    """
)

_STORED_OPTION_TYPES = {
    TIER_1: "option1",
    TIER_2: "option2",
    TIER_3: "option3",
}

_STORED_PAYMENT_METHODS = {
    PAYMENT_DEBIT: "debit_card",
    PAYMENT_CREDIT: "credit_card",
}


def _coerce_date(value) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class SqlAlchemyTransfersRepository(TransfersRepositoryPort):
    """Repository backed by the hosted PostgreSQL ledger tables."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        user_id: str,
        doctor_ledger_category: str = "repasse_medico",
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            user_id: Owner of the rows read and written.
            doctor_ledger_category: Category whose subcategories are doctors.
        """
        self._db_port = db_port
        self._user_id = user_id
        self._doctor_ledger_category = doctor_ledger_category

    def fetch_transfers(self) -> list[TransferRecord]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_TRANSFERS_SQL,
                {"user_id": self._user_id},
            ).all()
        return [self._to_transfer(row) for row in rows]

    def fetch_transfer(self, record_id: str) -> TransferRecord | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_TRANSFER_SQL,
                {"user_id": self._user_id, "id": record_id},
            ).first()
        if not row:
            return None
        return self._to_transfer(row)

    def fetch_independent_expenses(
        self,
        doctor_name: str,
    ) -> list[IndependentExpenseRecord]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_INDEPENDENT_EXPENSES_SQL,
                {"user_id": self._user_id, "doctor_name": doctor_name},
            ).all()
        return [
            IndependentExpenseRecord(
                id=str(row.id),
                date=_coerce_date(row.date),
                amount=coerce_decimal(row.amount),
                description=row.description or "",
                category=row.category,
                subcategory=row.subcategory,
                reference_month=row.reference_month,
            )
            for row in rows
        ]

    def fetch_doctor_names(self) -> list[str]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_DOCTOR_NAMES_SQL,
                {
                    "user_id": self._user_id,
                    "category": self._doctor_ledger_category,
                },
            ).all()
        return [row.name for row in rows]

    def insert_transfer(self, record: TransferRecord) -> TransferRecord:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_TRANSFER_SQL, self._to_params(record))
        return record

    def update_transfer(self, record: TransferRecord) -> TransferRecord:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(UPDATE_TRANSFER_SQL, self._to_params(record))
        if result.rowcount == 0:
            raise LookupError(f"Transfer not found: {record.id}")
        return record

    def delete_transfer(self, record_id: str) -> None:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_TRANSFER_SQL,
                {"user_id": self._user_id, "id": record_id},
            )
        if result.rowcount == 0:
            raise LookupError(f"Transfer not found: {record_id}")

    @staticmethod
    def _to_transfer(row) -> TransferRecord:
        """Map a ``medical_transfers`` row into the domain vocabulary."""
        return TransferRecord(
            id=str(row.id),
            date=_coerce_date(row.date),
            reference_month=row.reference_month or "",
            doctor_name=row.doctor_name or "",
            option_type=normalize_option_type(row.option_type),
            category=row.category or "",
            description=row.description or "",
            amount=coerce_decimal(row.amount),
            discount_percentage=coerce_decimal(row.discount_percentage),
            discount_amount=coerce_decimal(row.discount_amount),
            payment_method=normalize_payment_method(row.payment_method),
            payment_discount_percentage=coerce_decimal(
                row.payment_discount_percentage
            ),
            payment_discount_amount=coerce_decimal(
                row.payment_discount_amount
            ),
            net_amount=coerce_decimal(row.net_amount),
            expense_category=row.expense_category,
            expense_amount=coerce_decimal(row.expense_amount),
        )

    def _to_params(self, record: TransferRecord) -> dict:
        return {
            "id": record.id,
            "user_id": self._user_id,
            "date": record.date,
            "reference_month": record.reference_month,
            "doctor_name": record.doctor_name,
            "option_type": _STORED_OPTION_TYPES.get(
                record.option_type,
                record.option_type,
            ),
            "category": record.category,
            "description": record.description,
            "amount": record.amount,
            "discount_percentage": record.discount_percentage,
            "discount_amount": record.discount_amount,
            "payment_method": _STORED_PAYMENT_METHODS.get(
                record.payment_method,
                record.payment_method,
            ),
            "payment_discount_percentage": record.payment_discount_percentage,
            "payment_discount_amount": record.payment_discount_amount,
            "net_amount": record.net_amount,
            "expense_category": record.expense_category,
            "expense_amount": record.expense_amount,
        }


__all__ = ["SqlAlchemyTransfersRepository"]
