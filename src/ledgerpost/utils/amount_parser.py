"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation
from ledgerpost.domain.entities import TransactionType

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥₹]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles "1234.50", "$1,234.50", "-45.00" and accounting style
    negatives such as "(45.00)".

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()
    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]
    text = _CURRENCY_SYMBOLS.sub("", text).replace(",", "").strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'") from None
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if negative else amount


def split_signed_amount(amount: Decimal) -> tuple[Decimal, TransactionType]:
    """Split a signed statement amount into magnitude and direction.

    Positive amounts are money in (credit), negative ones money out (debit).
    """
    if amount < 0:
        return -amount, TransactionType.DEBIT
    return amount, TransactionType.CREDIT
