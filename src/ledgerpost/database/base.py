"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerpost.domain.entities import (
    AccountType,
    BankAccount,
    BankTransaction,
    DayBookEntry,
    JournalEntry,
    JournalEntryLine,
    JournalEntryStatus,
    LedgerAccount,
    LineDraft,
    TransactionStatus,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for ledgerpost.

    Every operation is scoped to ``owner_id``: reads only see that owner's
    rows and writes stamp it on new rows.
    """

    owner_id: str

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Group writes so they commit together or not at all.

        Nested blocks join the outermost block.
        """
        pass

    # Bank account operations
    @abstractmethod
    def create_bank_account(
        self,
        account_name: str,
        bank_name: str,
        account_number: Optional[str] = None,
        opening_balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a bank account. Returns bank account ID."""
        pass

    @abstractmethod
    def get_bank_account(self, bank_account_id: int) -> Optional[BankAccount]:
        """Get bank account by ID."""
        pass

    @abstractmethod
    def get_bank_account_by_name(self, account_name: str) -> Optional[BankAccount]:
        """Get bank account by name."""
        pass

    @abstractmethod
    def list_bank_accounts(self, active_only: bool = True) -> list[BankAccount]:
        """List bank accounts ordered by name."""
        pass

    # Chart of accounts operations
    @abstractmethod
    def create_ledger_account(
        self,
        account_name: str,
        account_type: AccountType,
        account_subtype: Optional[str] = None,
        opening_balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a chart of accounts entry. Returns ledger account ID."""
        pass

    @abstractmethod
    def get_ledger_account(self, account_id: int) -> Optional[LedgerAccount]:
        """Get ledger account by ID."""
        pass

    @abstractmethod
    def get_ledger_account_by_name(self, account_name: str) -> Optional[LedgerAccount]:
        """Get ledger account by exact name."""
        pass

    @abstractmethod
    def list_ledger_accounts(self, active_only: bool = True) -> list[LedgerAccount]:
        """List ledger accounts ordered by name."""
        pass

    @abstractmethod
    def update_ledger_account(
        self,
        account_id: int,
        account_name: Optional[str] = None,
        account_subtype: Optional[str] = None,
        is_active: Optional[bool] = None,
        opening_balance: Optional[Decimal] = None,
    ) -> None:
        """Update the provided ledger account fields. Does not touch current_balance."""
        pass

    @abstractmethod
    def update_account_balance(self, account_id: int, delta: Decimal) -> None:
        """Add ``delta`` to a ledger account's current balance in one statement."""
        pass

    # Bank transaction operations
    @abstractmethod
    def create_bank_transaction(
        self,
        bank_account_id: int,
        transaction_date: date,
        amount: Decimal,
        transaction_type: TransactionType,
        description: str = "",
        reference_number: Optional[str] = None,
        category: Optional[str] = None,
    ) -> int:
        """Create a bank transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_bank_transaction(self, transaction_id: int) -> Optional[BankTransaction]:
        """Get bank transaction by ID."""
        pass

    @abstractmethod
    def list_bank_transactions(
        self,
        status: Optional[TransactionStatus] = None,
        bank_account_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[BankTransaction]:
        """List bank transactions, newest first, with optional filters."""
        pass

    @abstractmethod
    def update_bank_transaction(
        self,
        transaction_id: int,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
        transaction_type: Optional[TransactionType] = None,
        transaction_date: Optional[date] = None,
        reference_number: Optional[str] = None,
    ) -> None:
        """Update the provided bank transaction fields."""
        pass

    @abstractmethod
    def set_transaction_category(self, transaction_ids: list[int], category: str) -> int:
        """Set category, mark categorized and reviewed. Returns rows updated."""
        pass

    @abstractmethod
    def clear_transaction_category(self, transaction_id: int) -> None:
        """Clear category, mark uncategorized and not reviewed."""
        pass

    @abstractmethod
    def mark_transaction_posted(self, transaction_id: int, journal_entry_id: int) -> None:
        """Set status to posted and link the journal entry."""
        pass

    @abstractmethod
    def delete_bank_transaction(self, transaction_id: int) -> None:
        """Delete a bank transaction."""
        pass

    # Journal entry operations
    @abstractmethod
    def create_journal_entry(
        self,
        entry_number: str,
        entry_date: date,
        description: str,
        total_debit: Decimal,
        total_credit: Decimal,
        status: JournalEntryStatus,
        reference_type: Optional[str] = None,
        reference_id: Optional[int] = None,
        posted_at: Optional[datetime] = None,
    ) -> int:
        """Create a journal entry header. Returns journal entry ID.

        Raises:
            ConflictError: If the entry number is already taken
        """
        pass

    @abstractmethod
    def add_journal_entry_lines(
        self, journal_entry_id: int, lines: list[LineDraft]
    ) -> list[JournalEntryLine]:
        """Insert lines in order, numbering them from 1."""
        pass

    @abstractmethod
    def get_journal_entry(self, journal_entry_id: int) -> Optional[JournalEntry]:
        """Get journal entry by ID."""
        pass

    @abstractmethod
    def get_journal_entry_lines(self, journal_entry_id: int) -> list[JournalEntryLine]:
        """Get the lines of a journal entry ordered by line_order."""
        pass

    @abstractmethod
    def list_journal_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[JournalEntryStatus] = None,
    ) -> list[JournalEntry]:
        """List journal entries, newest first."""
        pass

    @abstractmethod
    def get_last_entry_number(self, prefix: str) -> Optional[str]:
        """Return the highest entry number starting with ``prefix``."""
        pass

    @abstractmethod
    def update_journal_entry_status(
        self,
        journal_entry_id: int,
        status: JournalEntryStatus,
        posted_at: Optional[datetime] = None,
    ) -> None:
        """Update journal entry status."""
        pass

    @abstractmethod
    def delete_journal_entry(self, journal_entry_id: int) -> None:
        """Delete a journal entry and its lines."""
        pass

    # Day book operations
    @abstractmethod
    def add_day_book_entry(
        self,
        entry_date: date,
        account_id: int,
        account_name: str,
        description: str,
        debit_amount: Decimal,
        credit_amount: Decimal,
        reference_number: Optional[str] = None,
        journal_entry_id: Optional[int] = None,
    ) -> int:
        """Append a day book row. Returns row ID."""
        pass

    @abstractmethod
    def list_day_book(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        journal_entry_id: Optional[int] = None,
    ) -> list[DayBookEntry]:
        """List day book rows in chronological order."""
        pass
