"""Validation of monetary amounts against the two-decimal storage scale."""

from decimal import Decimal, InvalidOperation
from ledgerpost.domain import errors

CENT = Decimal("0.01")


def to_money(value, label: str = "Amount") -> Decimal:
    """Return ``value`` as a Decimal with exactly two decimal places.

    Raises:
        ValidationError: If the value is not a finite number or has more
            precision than whole cents
    """
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise errors.ValidationError(f"{label} '{value}' is not a number") from None
    if not amount.is_finite():
        raise errors.ValidationError(f"{label} '{value}' is not a number")

    quantized = amount.quantize(CENT)
    if quantized != amount:
        raise errors.ValidationError(
            f"{label} {amount} has more than two decimal places"
        )
    return quantized


def to_positive_money(value, label: str = "Amount") -> Decimal:
    """Like ``to_money`` but also requires a value above zero."""
    amount = to_money(value, label)
    if amount <= 0:
        raise errors.ValidationError(
            f"{label} must be a positive magnitude, got {amount}. "
            "Use the transaction type to give its direction."
        )
    return amount
