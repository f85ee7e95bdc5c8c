"""Bank account domain service."""

from typing import Optional
from decimal import Decimal
from ledgerpost.database.base import Database
from ledgerpost.domain import errors
from ledgerpost.domain.entities import BankAccount
from ledgerpost.domain.money import to_money


class BankAccountService:
    """Service for managing bank accounts."""

    def __init__(self, db: Database):
        """Initialize bank account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        account_name: str,
        bank_name: str,
        account_number: Optional[str] = None,
        opening_balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a new bank account.

        Posting matches ``account_name`` against the chart of accounts, so a
        ledger account with the same name is needed before its transactions
        can be posted.

        Returns:
            Bank account ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If a bank account with the same name exists
        """
        account_name = (account_name or "").strip()
        if not account_name:
            raise errors.ValidationError("Bank account name cannot be empty")
        opening_balance = to_money(opening_balance, "Opening balance")

        if self.db.get_bank_account_by_name(account_name) is not None:
            raise errors.ConflictError(errors.duplicate_name("Bank account", account_name))

        return self.db.create_bank_account(
            account_name=account_name,
            bank_name=bank_name,
            account_number=account_number,
            opening_balance=opening_balance,
        )

    def get_account(self, bank_account_id: int) -> Optional[BankAccount]:
        """Get bank account by ID."""
        return self.db.get_bank_account(bank_account_id)

    def get_account_by_name(self, account_name: str) -> Optional[BankAccount]:
        """Get bank account by exact name."""
        return self.db.get_bank_account_by_name(account_name)

    def list_accounts(self) -> list[BankAccount]:
        """List active bank accounts."""
        return self.db.list_bank_accounts()
