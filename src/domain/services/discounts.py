"""Discount calculation for billed procedures.

Every path that creates or edits a transfer derives the discount figures
through ``compute_discount_breakdown``; stored derived values are never
reused on edit.
"""

from dataclasses import fields, replace
from decimal import Decimal

from src.domain.constants import (
    PAYMENT_DISCOUNT_PERCENTAGES,
    TIER_DISCOUNT_PERCENTAGES,
)
from src.domain.models.transfers import (
    DiscountBreakdown,
    TransferDraft,
    TransferRecord,
)
from src.utils.decimal_utils import coerce_decimal, quantize_money

DERIVED_FIELDS = frozenset(
    {
        "discount_percentage",
        "discount_amount",
        "payment_discount_percentage",
        "payment_discount_amount",
        "net_amount",
    }
)


def resolve_tier_percentage(tier: str) -> Decimal:
    """Return the discount percentage of a tier, zero when not a tier."""
    return TIER_DISCOUNT_PERCENTAGES.get(tier, Decimal("0"))


def resolve_payment_percentage(payment_method: str) -> Decimal:
    """Return the surcharge percentage of a payment method, zero if unknown."""
    return PAYMENT_DISCOUNT_PERCENTAGES.get(payment_method, Decimal("0"))


def compute_discount_breakdown(
    amount,
    tier: str,
    payment_method: str,
) -> DiscountBreakdown:
    """Compute tier and payment discounts for a gross amount.

    Both discount amounts are rounded to cents first and the net is
    computed from the rounded discounts, so
    ``net_amount == amount - discount_amount - payment_discount_amount``
    holds exactly. Negative amounts are not rejected; they propagate into
    the result.

    Args:
        amount: Gross amount.
        tier: Tier code (tier1, tier2, tier3).
        payment_method: Payment method code (cash, pix, debit, credit).

    Returns:
        DiscountBreakdown: Percentages, amounts rounded to cents, and net.
    """
    gross = coerce_decimal(amount)
    tier_pct = resolve_tier_percentage(tier)
    payment_pct = resolve_payment_percentage(payment_method)
    discount_amount = quantize_money(gross * tier_pct / Decimal("100"))
    payment_discount_amount = quantize_money(
        gross * payment_pct / Decimal("100")
    )
    return DiscountBreakdown(
        amount=gross,
        discount_percentage=tier_pct,
        discount_amount=discount_amount,
        payment_discount_percentage=payment_pct,
        payment_discount_amount=payment_discount_amount,
        net_amount=gross - discount_amount - payment_discount_amount,
    )


def build_transfer_record(
    draft: TransferDraft,
    record_id: str,
) -> TransferRecord:
    """Create a transfer record from user-entered fields.

    Args:
        draft: Fields entered by the user.
        record_id: Identifier assigned to the new record.

    Returns:
        TransferRecord: Record with derived discount fields filled in.
    """
    breakdown = compute_discount_breakdown(
        draft.amount,
        draft.option_type,
        draft.payment_method,
    )
    return TransferRecord(
        id=record_id,
        date=draft.date,
        reference_month=draft.reference_month,
        doctor_name=draft.doctor_name.strip(),
        option_type=draft.option_type,
        category=draft.category,
        description=draft.description,
        amount=breakdown.amount,
        discount_percentage=breakdown.discount_percentage,
        discount_amount=breakdown.discount_amount,
        payment_method=draft.payment_method,
        payment_discount_percentage=breakdown.payment_discount_percentage,
        payment_discount_amount=breakdown.payment_discount_amount,
        net_amount=breakdown.net_amount,
        expense_category=draft.expense_category,
        expense_amount=coerce_decimal(draft.expense_amount),
        origin=draft.origin,
    )


def apply_transfer_changes(
    record: TransferRecord,
    **changes,
) -> TransferRecord:
    """Return an edited copy of a record with derived fields recomputed.

    Args:
        record: Stored record being edited.
        **changes: Editable fields to replace.

    Returns:
        TransferRecord: Updated record.

    Raises:
        ValueError: If a derived field or an unknown field is passed.
    """
    derived = DERIVED_FIELDS.intersection(changes)
    if derived:
        raise ValueError(
            f"Derived fields cannot be edited directly: {sorted(derived)}"
        )
    known = {item.name for item in fields(TransferRecord)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(f"Unknown transfer fields: {sorted(unknown)}")

    if "amount" in changes:
        changes["amount"] = coerce_decimal(changes["amount"])
    if "expense_amount" in changes:
        changes["expense_amount"] = coerce_decimal(changes["expense_amount"])
    if "doctor_name" in changes:
        changes["doctor_name"] = (changes["doctor_name"] or "").strip()
    edited = replace(record, **changes)
    breakdown = compute_discount_breakdown(
        edited.amount,
        edited.option_type,
        edited.payment_method,
    )
    return replace(
        edited,
        discount_percentage=breakdown.discount_percentage,
        discount_amount=breakdown.discount_amount,
        payment_discount_percentage=breakdown.payment_discount_percentage,
        payment_discount_amount=breakdown.payment_discount_amount,
        net_amount=breakdown.net_amount,
    )


__all__ = [
    "DERIVED_FIELDS",
    "resolve_tier_percentage",
    "resolve_payment_percentage",
    "compute_discount_breakdown",
    "build_transfer_record",
    "apply_transfer_changes",
]
