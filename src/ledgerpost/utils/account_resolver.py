"""Utility for resolving account names to IDs."""

from ledgerpost.domain import errors
from ledgerpost.domain.bank_account import BankAccountService
from ledgerpost.domain.entities import BankAccount


def resolve_bank_account(service: BankAccountService, account: str | int) -> BankAccount:
    """Resolve a bank account by ID or name.

    A string is matched as a name first; a numeric string that names no
    account is then tried as an ID.

    Raises:
        NotFoundError: If account is not found
    """
    if isinstance(account, int):
        found = service.get_account(account)
    else:
        found = service.get_account_by_name(account)
        if found is None and account.strip().isdigit():
            found = service.get_account(int(account))
    if found is None:
        raise errors.NotFoundError(f"Bank account '{account}' not found")
    return found
