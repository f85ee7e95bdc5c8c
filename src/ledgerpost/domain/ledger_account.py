"""Chart of accounts domain service."""

import logging
from typing import Optional
from decimal import Decimal
from ledgerpost.database.base import Database
from ledgerpost.domain import errors
from ledgerpost.domain.entities import AccountType, LedgerAccount
from ledgerpost.domain.money import to_money

logger = logging.getLogger(__name__)


class LedgerAccountService:
    """Service for managing chart of accounts entries."""

    def __init__(self, db: Database):
        """Initialize ledger account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        account_name: str,
        account_type: AccountType | str,
        account_subtype: Optional[str] = None,
        opening_balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a chart of accounts entry.

        The opening balance also seeds the running balance.

        Args:
            account_name: Name, unique per owner. Bank accounts and categories
                are matched against it when posting.
            account_type: One of asset, liability, equity, income, expense
            account_subtype: Optional free-form subtype
            opening_balance: Starting balance

        Returns:
            Ledger account ID

        Raises:
            ValidationError: If the name is blank or the type is unknown
            ConflictError: If an account with the same name exists
        """
        account_name = (account_name or "").strip()
        if not account_name:
            raise errors.ValidationError("Account name cannot be empty")
        opening_balance = to_money(opening_balance, "Opening balance")

        try:
            account_type = AccountType(account_type)
        except ValueError:
            allowed = ", ".join(t.value for t in AccountType)
            raise errors.ValidationError(
                f"Invalid account type '{account_type}'. Expected one of: {allowed}"
            ) from None

        if self.db.get_ledger_account_by_name(account_name) is not None:
            raise errors.ConflictError(errors.duplicate_name("Ledger account", account_name))

        account_id = self.db.create_ledger_account(
            account_name=account_name,
            account_type=account_type,
            account_subtype=account_subtype,
            opening_balance=opening_balance,
        )
        logger.info(
            "Ledger account '%s' (ID: %s, type: %s) created with balance %s",
            account_name,
            account_id,
            account_type.value,
            opening_balance,
        )
        return account_id

    def get_account(self, account_id: int) -> Optional[LedgerAccount]:
        """Get ledger account by ID."""
        return self.db.get_ledger_account(account_id)

    def get_account_by_name(self, account_name: str) -> Optional[LedgerAccount]:
        """Get ledger account by exact name."""
        return self.db.get_ledger_account_by_name(account_name)

    def require_account(self, account: int | str) -> LedgerAccount:
        """Resolve a ledger account by ID or name.

        A string is matched as a name first. Only when no account has that
        name does a numeric string fall back to an ID, so an account named
        "4000" is still found by name.

        Raises:
            NotFoundError: If no account matches
        """
        if isinstance(account, int):
            found = self.db.get_ledger_account(account)
        else:
            found = self.db.get_ledger_account_by_name(account)
            if found is None and account.strip().isdigit():
                found = self.db.get_ledger_account(int(account))
        if found is None:
            raise errors.NotFoundError(errors.ledger_account_not_found(account))
        return found

    def update_account(
        self,
        account: int | str,
        account_name: Optional[str] = None,
        account_subtype: Optional[str] = None,
        is_active: Optional[bool] = None,
        opening_balance: Optional[Decimal] = None,
    ) -> LedgerAccount:
        """Update a chart of accounts entry.

        Only the provided fields change. A new opening balance moves the
        running balance by the difference, in the same unit of work.

        Returns:
            The updated account

        Raises:
            NotFoundError: If the account doesn't exist
            ValidationError: If the new name is blank or the balance is malformed
            ConflictError: If another account already has the new name
        """
        current = self.require_account(account)

        if account_name is not None:
            account_name = account_name.strip()
            if not account_name:
                raise errors.ValidationError("Account name cannot be empty")
            other = self.db.get_ledger_account_by_name(account_name)
            if other is not None and other.id != current.id:
                raise errors.ConflictError(errors.duplicate_name("Ledger account", account_name))

        delta = Decimal("0")
        if opening_balance is not None:
            opening_balance = to_money(opening_balance, "Opening balance")
            delta = opening_balance - current.opening_balance

        with self.db.atomic():
            self.db.update_ledger_account(
                current.id,
                account_name=account_name,
                account_subtype=account_subtype,
                is_active=is_active,
                opening_balance=opening_balance,
            )
            if delta:
                self.db.update_account_balance(current.id, delta)

        logger.info("Ledger account %s updated", current.id)
        return self.db.get_ledger_account(current.id)

    def list_accounts(self) -> list[LedgerAccount]:
        """List active ledger accounts ordered by name."""
        return self.db.list_ledger_accounts()
