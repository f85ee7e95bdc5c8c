"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, including the string columns that
back the domain enums.
"""

from decimal import Decimal

from ledgerpost.domain import entities as domain
from ledgerpost.database.models import (
    BankAccount as ORMBankAccount,
    LedgerAccount as ORMLedgerAccount,
    BankTransaction as ORMBankTransaction,
    JournalEntry as ORMJournalEntry,
    JournalEntryLine as ORMJournalEntryLine,
    DayBookEntry as ORMDayBookEntry,
)


def _money(value) -> Decimal:
    # SQLite hands back floats for Numeric columns on some drivers
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def bank_account_to_domain(orm_account: ORMBankAccount) -> domain.BankAccount:
    """Convert SQLAlchemy BankAccount model to domain BankAccount entity."""
    return domain.BankAccount(
        id=orm_account.id,
        owner_id=orm_account.owner_id,
        account_name=orm_account.account_name,
        bank_name=orm_account.bank_name,
        account_number=orm_account.account_number,
        opening_balance=_money(orm_account.opening_balance),
        current_balance=_money(orm_account.current_balance),
        is_active=bool(orm_account.is_active),
        created_at=orm_account.created_at,
    )


def ledger_account_to_domain(orm_account: ORMLedgerAccount) -> domain.LedgerAccount:
    """Convert SQLAlchemy LedgerAccount model to domain LedgerAccount entity."""
    return domain.LedgerAccount(
        id=orm_account.id,
        owner_id=orm_account.owner_id,
        account_name=orm_account.account_name,
        account_type=domain.AccountType(orm_account.account_type),
        account_subtype=orm_account.account_subtype,
        opening_balance=_money(orm_account.opening_balance),
        current_balance=_money(orm_account.current_balance),
        is_active=bool(orm_account.is_active),
        created_at=orm_account.created_at,
    )


def bank_transaction_to_domain(orm_transaction: ORMBankTransaction) -> domain.BankTransaction:
    """Convert SQLAlchemy BankTransaction model to domain BankTransaction entity."""
    return domain.BankTransaction(
        id=orm_transaction.id,
        owner_id=orm_transaction.owner_id,
        bank_account_id=orm_transaction.bank_account_id,
        description=orm_transaction.description or "",
        amount=_money(orm_transaction.amount),
        transaction_type=domain.TransactionType(orm_transaction.transaction_type),
        transaction_date=orm_transaction.transaction_date,
        reference_number=orm_transaction.reference_number,
        category=orm_transaction.category,
        status=domain.TransactionStatus(orm_transaction.status),
        journal_entry_id=orm_transaction.journal_entry_id,
        is_reviewed=bool(orm_transaction.is_reviewed),
        created_at=orm_transaction.created_at,
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        owner_id=orm_entry.owner_id,
        entry_number=orm_entry.entry_number,
        entry_date=orm_entry.entry_date,
        description=orm_entry.description,
        reference_type=orm_entry.reference_type,
        reference_id=orm_entry.reference_id,
        total_debit=_money(orm_entry.total_debit),
        total_credit=_money(orm_entry.total_credit),
        status=domain.JournalEntryStatus(orm_entry.status),
        posted_at=orm_entry.posted_at,
        created_at=orm_entry.created_at,
    )


def journal_entry_line_to_domain(orm_line: ORMJournalEntryLine) -> domain.JournalEntryLine:
    """Convert SQLAlchemy JournalEntryLine model to domain JournalEntryLine entity."""
    return domain.JournalEntryLine(
        id=orm_line.id,
        journal_entry_id=orm_line.journal_entry_id,
        account_id=orm_line.account_id,
        account_name=orm_line.account_name,
        description=orm_line.description,
        debit_amount=_money(orm_line.debit_amount),
        credit_amount=_money(orm_line.credit_amount),
        line_order=orm_line.line_order,
    )


def day_book_entry_to_domain(orm_row: ORMDayBookEntry) -> domain.DayBookEntry:
    """Convert SQLAlchemy DayBookEntry model to domain DayBookEntry entity."""
    return domain.DayBookEntry(
        id=orm_row.id,
        owner_id=orm_row.owner_id,
        journal_entry_id=orm_row.journal_entry_id,
        entry_date=orm_row.entry_date,
        account_id=orm_row.account_id,
        account_name=orm_row.account_name,
        description=orm_row.description or "",
        debit_amount=_money(orm_row.debit_amount),
        credit_amount=_money(orm_row.credit_amount),
        reference_number=orm_row.reference_number,
        created_at=orm_row.created_at,
    )
