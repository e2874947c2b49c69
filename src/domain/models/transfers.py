"""Domain models for transfer and expense records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class TransferRecord:
    """One billed procedure or one inline expense attributed to a doctor.

    Attributes:
        id: Opaque record identifier.
        date: Calendar date of the event.
        reference_month: Accounting bucket in ``YYYY-MM`` format.
        doctor_name: Doctor the record belongs to.
        option_type: Tier code (tier1, tier2, tier3) or ``expense``.
        category: Free-form label within the tier.
        description: Free text entered by the user.
        amount: Gross income amount, zero for pure expenses.
        discount_percentage: Tier discount percentage applied.
        discount_amount: Tier discount amount.
        payment_method: One of cash, pix, debit, credit.
        payment_discount_percentage: Payment-method surcharge percentage.
        payment_discount_amount: Payment-method surcharge amount.
        net_amount: Amount minus both discounts.
        expense_category: Category of the attributed expense, if any.
        expense_amount: Expense attributed to this same event.
        origin: Optional explicit origin tag (manual or system).
    """

    id: str
    date: date
    reference_month: str
    doctor_name: str
    option_type: str
    category: str
    description: str
    amount: Decimal
    discount_percentage: Decimal
    discount_amount: Decimal
    payment_method: str
    payment_discount_percentage: Decimal
    payment_discount_amount: Decimal
    net_amount: Decimal
    expense_category: str | None = None
    expense_amount: Decimal = Decimal("0")
    origin: str | None = None


@dataclass(frozen=True)
class IndependentExpenseRecord:
    """Expense tracked outside the transfer ledger.

    The ``subcategory`` holds the doctor name; it is a lookup key, not a
    foreign key, and nothing guarantees a matching transfer exists.
    """

    id: str
    date: date
    amount: Decimal
    description: str
    category: str | None
    subcategory: str | None
    reference_month: str | None = None
    origin: str | None = None


@dataclass(frozen=True)
class TransferDraft:
    """User-entered fields for a new transfer, without derived amounts."""

    date: date
    reference_month: str
    doctor_name: str
    option_type: str
    category: str
    amount: Decimal
    payment_method: str
    description: str = ""
    expense_category: str | None = None
    expense_amount: Decimal = Decimal("0")
    origin: str | None = None


@dataclass(frozen=True)
class DiscountBreakdown:
    """Discount figures derived from a gross amount."""

    amount: Decimal
    discount_percentage: Decimal
    discount_amount: Decimal
    payment_discount_percentage: Decimal
    payment_discount_amount: Decimal
    net_amount: Decimal

    @property
    def total_discounts(self) -> Decimal:
        """Return tier and payment discounts combined."""
        return self.discount_amount + self.payment_discount_amount


@dataclass(frozen=True)
class PeriodFilter:
    """Period restriction applied before aggregation.

    A custom range (``start_date``/``end_date``, inclusive) takes precedence
    over ``reference_month`` when either bound is set.
    """

    reference_month: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    @property
    def has_custom_range(self) -> bool:
        return self.start_date is not None or self.end_date is not None


__all__ = [
    "TransferRecord",
    "IndependentExpenseRecord",
    "TransferDraft",
    "DiscountBreakdown",
    "PeriodFilter",
]
