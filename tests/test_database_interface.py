"""Tests for Database interface returning domain models."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from ledgerpost.domain import entities, errors
from ledgerpost.domain.entities import JournalEntryStatus, LineDraft


def add_entry(db, entry_number="JE20250115001"):
    return db.create_journal_entry(
        entry_number=entry_number,
        entry_date=date(2025, 1, 15),
        description="Test entry",
        total_debit=Decimal("10"),
        total_credit=Decimal("10"),
        status=JournalEntryStatus.DRAFT,
    )


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_ledger_account_returns_domain_model(self, temp_db):
        account_id = temp_db.create_ledger_account("Cash", entities.AccountType.ASSET)

        account = temp_db.get_ledger_account(account_id)

        assert isinstance(account, entities.LedgerAccount)
        assert account.account_type == entities.AccountType.ASSET
        assert isinstance(account.current_balance, Decimal)
        assert isinstance(account.created_at, datetime)

    def test_get_bank_transaction_returns_domain_model(self, temp_db, make_transaction):
        txn = temp_db.get_bank_transaction(make_transaction())

        assert isinstance(txn, entities.BankTransaction)
        assert isinstance(txn.transaction_type, entities.TransactionType)
        assert txn.transaction_date == date(2025, 1, 10)

    def test_journal_lines_keep_order(self, temp_db, ledger):
        entry_id = add_entry(temp_db)
        lines = temp_db.add_journal_entry_lines(
            entry_id,
            [
                LineDraft(ledger["bank"], "Bank Account - Current", None, Decimal("10"), Decimal("0")),
                LineDraft(ledger["sales"], "Sales", None, Decimal("0"), Decimal("10")),
            ],
        )

        assert [l.line_order for l in lines] == [1, 2]
        stored = temp_db.get_journal_entry_lines(entry_id)
        assert all(isinstance(l, entities.JournalEntryLine) for l in stored)
        assert [l.account_name for l in stored] == ["Bank Account - Current", "Sales"]

    def test_update_account_balance_adds_delta(self, temp_db, ledger):
        temp_db.update_account_balance(ledger["bank"], Decimal("-150"))
        temp_db.update_account_balance(ledger["bank"], Decimal("25.50"))

        assert temp_db.get_ledger_account(ledger["bank"]).current_balance == Decimal("875.50")

    def test_update_missing_account_balance(self, temp_db):
        with pytest.raises(errors.NotFoundError):
            temp_db.update_account_balance(404, Decimal("1"))

    def test_update_ledger_account_leaves_running_balance(self, temp_db, ledger):
        temp_db.update_ledger_account(
            ledger["bank"], account_subtype="Cash", is_active=False, opening_balance=Decimal("5")
        )

        account = temp_db.get_ledger_account(ledger["bank"])
        assert account.account_subtype == "Cash"
        assert account.is_active is False
        assert account.opening_balance == Decimal("5.00")
        assert account.current_balance == Decimal("1000.00")
        assert account.account_name == "Bank Account - Current"

    def test_update_missing_ledger_account(self, temp_db):
        with pytest.raises(errors.NotFoundError):
            temp_db.update_ledger_account(404, account_name="Nope")

    def test_duplicate_entry_number_is_conflict(self, temp_db):
        add_entry(temp_db)
        with pytest.raises(errors.ConflictError):
            add_entry(temp_db)
        # The session is still usable afterwards
        assert len(temp_db.list_journal_entries()) == 1

    def test_last_entry_number(self, temp_db):
        assert temp_db.get_last_entry_number("JE20250115") is None
        add_entry(temp_db, "JE20250115001")
        add_entry(temp_db, "JE20250115002")
        add_entry(temp_db, "JE20250116001")

        assert temp_db.get_last_entry_number("JE20250115") == "JE20250115002"


class TestAtomic:
    def test_commits_together(self, temp_db, ledger):
        with temp_db.atomic():
            add_entry(temp_db)
            temp_db.update_account_balance(ledger["bank"], Decimal("10"))

        temp_db.disconnect()
        assert len(temp_db.list_journal_entries()) == 1
        assert temp_db.get_ledger_account(ledger["bank"]).current_balance == Decimal("1010.00")

    def test_rolls_back_on_error(self, temp_db, ledger):
        with pytest.raises(RuntimeError):
            with temp_db.atomic():
                add_entry(temp_db)
                temp_db.update_account_balance(ledger["bank"], Decimal("10"))
                raise RuntimeError("boom")

        assert temp_db.list_journal_entries() == []
        assert temp_db.get_ledger_account(ledger["bank"]).current_balance == Decimal("1000.00")

    def test_nested_blocks_commit_once(self, temp_db, ledger):
        with pytest.raises(RuntimeError):
            with temp_db.atomic():
                with temp_db.atomic():
                    add_entry(temp_db)
                raise RuntimeError("outer failure")

        assert temp_db.list_journal_entries() == []

    def test_conflict_inside_block_rolls_back(self, temp_db):
        add_entry(temp_db, "JE20250115001")

        with pytest.raises(errors.ConflictError):
            with temp_db.atomic():
                add_entry(temp_db, "JE20250115002")
                add_entry(temp_db, "JE20250115001")

        numbers = [e.entry_number for e in temp_db.list_journal_entries()]
        assert numbers == ["JE20250115001"]


class TestOwnerScope:
    def test_rows_are_invisible_to_other_owners(self, temp_db, ledger, make_transaction):
        txn_id = make_transaction()
        temp_db.owner_id = "other-owner"

        assert temp_db.get_bank_transaction(txn_id) is None
        assert temp_db.get_ledger_account(ledger["bank"]) is None
        assert temp_db.get_ledger_account_by_name("Sales") is None
        assert temp_db.list_bank_transactions() == []
        with pytest.raises(errors.NotFoundError):
            temp_db.update_account_balance(ledger["bank"], Decimal("1"))

    def test_same_names_allowed_per_owner(self, temp_db, ledger):
        temp_db.owner_id = "other-owner"
        account_id = temp_db.create_ledger_account("Sales", entities.AccountType.INCOME)
        assert account_id != ledger["sales"]
