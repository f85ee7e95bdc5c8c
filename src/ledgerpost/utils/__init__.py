"""Utility functions for ledgerpost."""

from ledgerpost.utils.date_parser import parse_date
from ledgerpost.utils.amount_parser import parse_amount, split_signed_amount
from ledgerpost.utils.account_resolver import resolve_bank_account

__all__ = [
    "parse_date",
    "parse_amount",
    "split_signed_amount",
    "resolve_bank_account",
]
