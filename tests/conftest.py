"""Shared pytest fixtures for ledgerpost tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerpost.database.factories import create_sqlite_database
from ledgerpost.domain.bank_account import BankAccountService
from ledgerpost.domain.categorization import CategorizationService
from ledgerpost.domain.journal import JournalService
from ledgerpost.domain.ledger_account import LedgerAccountService
from ledgerpost.domain.posting import PostingEngine
from ledgerpost.domain.transaction import TransactionService

POSTING_DAY = date(2025, 1, 15)
BANK_ACCOUNT_NAME = "Bank Account - Current"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path, owner_id="test-owner")
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def bank_account_service(temp_db):
    """Create a BankAccountService with a temporary database."""
    return BankAccountService(temp_db)


@pytest.fixture
def ledger_account_service(temp_db):
    """Create a LedgerAccountService with a temporary database."""
    return LedgerAccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def categorization_service(temp_db):
    """Create a CategorizationService with a temporary database."""
    return CategorizationService(temp_db)


@pytest.fixture
def engine(temp_db):
    """Create a PostingEngine whose posting day is fixed."""
    return PostingEngine(temp_db, today=lambda: POSTING_DAY)


@pytest.fixture
def journal_service(temp_db):
    """Create a JournalService whose numbering day is fixed."""
    return JournalService(temp_db, today=lambda: POSTING_DAY)


@pytest.fixture
def ledger(ledger_account_service):
    """Create the chart of accounts used by posting tests."""
    return {
        "bank": ledger_account_service.create_account(
            BANK_ACCOUNT_NAME, "asset", "Current Assets", Decimal("1000")
        ),
        "supplies": ledger_account_service.create_account("Office Supplies", "expense"),
        "sales": ledger_account_service.create_account("Sales", "income"),
        "capital": ledger_account_service.create_account("Owner Capital", "equity"),
    }


@pytest.fixture
def sample_bank_account(bank_account_service):
    """Create the bank account whose name matches the ledger bank account."""
    account_id = bank_account_service.create_account(
        BANK_ACCOUNT_NAME, "First Bank", opening_balance=Decimal("1000")
    )
    return bank_account_service.get_account(account_id)


@pytest.fixture
def make_transaction(transaction_service, sample_bank_account):
    """Return a helper that records a bank transaction."""

    def _make(
        amount="150.00",
        transaction_type="debit",
        category=None,
        description="Printer paper",
        transaction_date=date(2025, 1, 10),
    ):
        return transaction_service.create_transaction(
            bank_account_id=sample_bank_account.id,
            transaction_date=transaction_date,
            amount=Decimal(amount),
            transaction_type=transaction_type,
            description=description,
            category=category,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
