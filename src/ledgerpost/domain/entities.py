"""Domain model entities for ledgerpost.

These are pure data classes representing business concepts, independent of
database schema. The database layer converts its rows into these entities so
services never hold live ORM objects.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Chart of accounts classification."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def is_debit_normal(self) -> bool:
        return self in (AccountType.ASSET, AccountType.EXPENSE)


class TransactionType(str, Enum):
    """Direction of a bank transaction as seen by the bank account."""

    CREDIT = "credit"
    DEBIT = "debit"


class TransactionStatus(str, Enum):
    """Lifecycle state of a bank transaction."""

    UNCATEGORIZED = "uncategorized"
    CATEGORIZED = "categorized"
    POSTED = "posted"


class JournalEntryStatus(str, Enum):
    """Lifecycle state of a journal entry."""

    DRAFT = "draft"
    POSTED = "posted"
    CANCELLED = "cancelled"


class BulkPostStatus(str, Enum):
    """Overall outcome of a bulk posting run."""

    ALL_SUCCEEDED = "all_succeeded"
    PARTIAL = "partial"
    ALL_FAILED = "all_failed"
    EMPTY = "empty"


@dataclass(frozen=True)
class BankAccount:
    """Bank account domain entity."""

    id: int
    owner_id: str
    account_name: str
    bank_name: str
    account_number: Optional[str]
    opening_balance: Decimal
    current_balance: Decimal
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class LedgerAccount:
    """Chart of accounts entry.

    ``current_balance`` accumulates debits minus credits regardless of
    ``account_type``. Use ``normal_balance`` when presenting it.
    """

    id: int
    owner_id: str
    account_name: str
    account_type: AccountType
    account_subtype: Optional[str]
    opening_balance: Decimal
    current_balance: Decimal
    is_active: bool
    created_at: datetime

    @property
    def normal_balance(self) -> Decimal:
        """Balance signed so that the account's normal side is positive."""
        if self.account_type.is_debit_normal:
            return self.current_balance
        return -self.current_balance


@dataclass(frozen=True)
class BankTransaction:
    """Bank transaction domain entity."""

    id: int
    owner_id: str
    bank_account_id: int
    description: str
    amount: Decimal
    transaction_type: TransactionType
    transaction_date: date
    reference_number: Optional[str]
    category: Optional[str]
    status: TransactionStatus
    journal_entry_id: Optional[int]
    is_reviewed: bool
    created_at: datetime

    @property
    def is_posted(self) -> bool:
        return self.status == TransactionStatus.POSTED

    @property
    def is_categorized(self) -> bool:
        return bool(self.category)


@dataclass(frozen=True)
class JournalEntryLine:
    """One debit or credit line of a journal entry."""

    id: int
    journal_entry_id: int
    account_id: int
    account_name: str
    description: Optional[str]
    debit_amount: Decimal
    credit_amount: Decimal
    line_order: int

    @property
    def balance_delta(self) -> Decimal:
        """Signed change this line applies to its account's running balance."""
        return self.debit_amount - self.credit_amount


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry header."""

    id: int
    owner_id: str
    entry_number: str
    entry_date: date
    description: str
    reference_type: Optional[str]
    reference_id: Optional[int]
    total_debit: Decimal
    total_credit: Decimal
    status: JournalEntryStatus
    posted_at: Optional[datetime]
    created_at: datetime


@dataclass(frozen=True)
class DayBookEntry:
    """Append-only audit row mirroring a posted journal entry line."""

    id: int
    owner_id: str
    journal_entry_id: Optional[int]
    entry_date: date
    account_id: int
    account_name: str
    description: str
    debit_amount: Decimal
    credit_amount: Decimal
    reference_number: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class LineDraft:
    """Unsaved journal line used when building an entry."""

    account_id: int
    account_name: str
    description: Optional[str]
    debit_amount: Decimal
    credit_amount: Decimal


@dataclass(frozen=True)
class PostingResult:
    """Everything a successful posting produced."""

    journal_entry: JournalEntry
    lines: list[JournalEntryLine]
    transaction: BankTransaction


@dataclass(frozen=True)
class PostOutcome:
    """Per-transaction result within a bulk posting run."""

    transaction_id: int
    success: bool
    error: Optional[str] = None
    journal_entry_id: Optional[int] = None


@dataclass(frozen=True)
class BulkPostReport:
    """Summary of a bulk posting run."""

    results: list[PostOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def status(self) -> BulkPostStatus:
        if not self.results:
            return BulkPostStatus.EMPTY
        if self.failed == 0:
            return BulkPostStatus.ALL_SUCCEEDED
        if self.succeeded == 0:
            return BulkPostStatus.ALL_FAILED
        return BulkPostStatus.PARTIAL
