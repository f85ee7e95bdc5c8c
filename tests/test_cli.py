"""Tests for CLI commands."""

from decimal import Decimal

from ledgerpost.cli.commands.journal import parse_line_option
from ledgerpost.cli.main import cli
from ledgerpost.domain.entities import TransactionStatus


def run(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "--owner", temp_db.owner_id, *args],
        **kwargs,
    )


def fresh(temp_db):
    """Drop cached rows so reads see what the CLI wrote."""
    temp_db.disconnect()
    return temp_db


class TestAccountCommands:
    def test_ledger_create_and_list(self, cli_runner, temp_db):
        result = run(
            cli_runner, temp_db, "ledger", "create", "Cash", "--type", "asset", "--opening-balance", "250"
        )
        assert result.exit_code == 0
        assert "Created ledger account 'Cash'" in result.output

        result = run(cli_runner, temp_db, "ledger", "list")
        assert result.exit_code == 0
        assert "Cash" in result.output
        assert "250.00" in result.output

    def test_ledger_create_duplicate(self, cli_runner, temp_db, ledger):
        result = run(cli_runner, temp_db, "ledger", "create", "Sales", "--type", "income")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_bank_create(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "bank", "create", "Operating")
        assert result.exit_code == 0
        assert "Bank name set to 'Operating'" in result.output
        assert fresh(temp_db).get_bank_account_by_name("Operating") is not None

    def test_ledger_update(self, cli_runner, temp_db, ledger):
        result = run(
            cli_runner,
            temp_db,
            "ledger",
            "update",
            "Office Supplies",
            "--name",
            "Office Costs",
            "--inactive",
        )
        assert result.exit_code == 0
        assert f"Updated ledger account 'Office Costs' (ID: {ledger['supplies']})" in result.output
        assert "inactive" in result.output
        account = fresh(temp_db).get_ledger_account(ledger["supplies"])
        assert account.account_name == "Office Costs"
        assert account.is_active is False

    def test_ledger_update_opening_balance_by_id(self, cli_runner, temp_db, ledger):
        result = run(
            cli_runner, temp_db, "ledger", "update", str(ledger["bank"]), "--opening-balance", "1,500.00"
        )
        assert result.exit_code == 0
        account = fresh(temp_db).get_ledger_account(ledger["bank"])
        assert account.opening_balance == account.current_balance == Decimal("1500.00")

    def test_ledger_update_duplicate_name(self, cli_runner, temp_db, ledger):
        result = run(cli_runner, temp_db, "ledger", "update", "Sales", "--name", "Owner Capital")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_owner_isolation(self, cli_runner, temp_db, ledger):
        result = cli_runner.invoke(
            cli, ["--db-path", temp_db.database_path, "--owner", "someone-else", "ledger", "list"]
        )
        assert result.exit_code == 0
        assert "No ledger accounts found." in result.output


class TestTransactionCommands:
    def test_add_negative_amount_is_debit(self, cli_runner, temp_db, sample_bank_account):
        result = run(
            cli_runner,
            temp_db,
            "transaction",
            "add",
            "--account",
            "Bank Account - Current",
            "--date",
            "2025-01-10",
            "--amount",
            "-150.00",
            "--description",
            "Printer paper",
        )
        assert result.exit_code == 0
        assert "Created transaction" in result.output
        assert "150.00 (debit)" in result.output

    def test_add_unknown_account(self, cli_runner, temp_db):
        result = run(
            cli_runner, temp_db, "transaction", "add", "--account", "Nope", "--date", "today", "--amount", "1"
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_list_by_status(self, cli_runner, temp_db, make_transaction):
        make_transaction(description="Paper")
        make_transaction(description="Toner", category="Office Supplies")

        result = run(cli_runner, temp_db, "transaction", "list", "--status", "categorized")
        assert result.exit_code == 0
        assert "Toner" in result.output
        assert "Paper" not in result.output

    def test_delete_posted_refused(self, cli_runner, temp_db, engine, ledger, make_transaction):
        txn_id = make_transaction(category="Office Supplies")
        engine.post(txn_id)

        result = run(cli_runner, temp_db, "transaction", "delete", str(txn_id), "--yes")
        assert result.exit_code == 1
        assert "Cannot delete transaction" in result.output

    def test_delete_several(self, cli_runner, temp_db, make_transaction):
        ids = [make_transaction(), make_transaction(), make_transaction()]

        result = run(cli_runner, temp_db, "transaction", "delete", str(ids[0]), str(ids[1]), "--yes")

        assert result.exit_code == 0
        assert "Deleted 2 transactions" in result.output
        db = fresh(temp_db)
        assert db.get_bank_transaction(ids[0]) is None
        assert db.get_bank_transaction(ids[2]) is not None

    def test_delete_several_with_posted_row_deletes_nothing(
        self, cli_runner, temp_db, engine, ledger, make_transaction
    ):
        unposted = make_transaction()
        posted = make_transaction(category="Office Supplies")
        engine.post(posted)

        result = run(cli_runner, temp_db, "transaction", "delete", str(unposted), str(posted), "--yes")

        assert result.exit_code == 1
        assert "Cannot delete posted transactions" in result.output
        assert fresh(temp_db).get_bank_transaction(unposted) is not None

    def test_delete_several_cancelled(self, cli_runner, temp_db, make_transaction):
        ids = [make_transaction(), make_transaction()]

        result = run(cli_runner, temp_db, "transaction", "delete", str(ids[0]), str(ids[1]), input="n\n")

        assert "Deletion cancelled." in result.output
        assert fresh(temp_db).get_bank_transaction(ids[0]) is not None


class TestCategorizeCommand:
    def test_categorize_many(self, cli_runner, temp_db, make_transaction):
        ids = [make_transaction(), make_transaction()]

        result = run(cli_runner, temp_db, "categorize", str(ids[0]), str(ids[1]), "Office Supplies")

        assert result.exit_code == 0
        assert "2 transactions categorized as 'Office Supplies'" in result.output
        db = fresh(temp_db)
        assert all(db.get_bank_transaction(i).category == "Office Supplies" for i in ids)

    def test_empty_category_uncategorizes(self, cli_runner, temp_db, make_transaction):
        txn_id = make_transaction(category="Office Supplies")

        result = run(cli_runner, temp_db, "categorize", str(txn_id), "")

        assert result.exit_code == 0
        assert f"Transaction {txn_id} uncategorized" in result.output
        assert fresh(temp_db).get_bank_transaction(txn_id).status == TransactionStatus.UNCATEGORIZED


class TestPostCommand:
    def test_post_single(self, cli_runner, temp_db, ledger, make_transaction):
        txn_id = make_transaction(category="Office Supplies")

        result = run(cli_runner, temp_db, "post", str(txn_id))

        assert result.exit_code == 0
        assert f"Transaction {txn_id} posted as journal entry JE" in result.output
        db = fresh(temp_db)
        assert db.get_ledger_account_by_name("Bank Account - Current").current_balance == Decimal("850.00")
        assert db.get_bank_transaction(txn_id).status == TransactionStatus.POSTED

    def test_post_single_failure(self, cli_runner, temp_db, ledger, make_transaction):
        txn_id = make_transaction()

        result = run(cli_runner, temp_db, "post", str(txn_id))

        assert result.exit_code == 1
        assert "must be categorized before posting" in result.output

    def test_post_partial(self, cli_runner, temp_db, ledger, make_transaction):
        good = make_transaction(category="Office Supplies")
        bad = make_transaction(category="Travel")

        result = run(cli_runner, temp_db, "post", str(good), str(bad))

        assert result.exit_code == 1
        assert f"✓ Transaction {good} posted" in result.output
        assert "Category account 'Travel' not found" in result.output
        assert "Results: 1 posted, 1 failed" in result.output
        assert "Partial success" in result.output


class TestJournalCommands:
    def test_create_post_and_day_book(self, cli_runner, temp_db, ledger):
        result = run(
            cli_runner,
            temp_db,
            "journal",
            "create",
            "--description",
            "Owner investment",
            "--date",
            "2025-01-12",
            "--line",
            "Bank Account - Current:500:",
            "--line",
            "Owner Capital::500",
        )
        assert result.exit_code == 0
        assert "Created draft journal entry JE" in result.output

        entry = fresh(temp_db).list_journal_entries()[0]
        result = run(cli_runner, temp_db, "journal", "post", str(entry.id))
        assert result.exit_code == 0
        assert f"Posted journal entry {entry.entry_number}" in result.output

        result = run(cli_runner, temp_db, "daybook", "--start-date", "2025-01-01")
        assert result.exit_code == 0
        assert "Owner Capital" in result.output
        assert entry.entry_number in result.output

    def test_create_unbalanced(self, cli_runner, temp_db, ledger):
        result = run(
            cli_runner,
            temp_db,
            "journal",
            "create",
            "--description",
            "Broken",
            "--line",
            "Bank Account - Current:500:",
            "--line",
            "Owner Capital::400",
        )
        assert result.exit_code == 1
        assert "not balanced" in result.output

    def test_create_with_numeric_account_name(self, cli_runner, temp_db, ledger_account_service, ledger):
        named_id = ledger_account_service.create_account("4000", "income")

        result = run(
            cli_runner,
            temp_db,
            "journal",
            "create",
            "--description",
            "Refund",
            "--date",
            "2025-01-12",
            "--line",
            "Bank Account - Current:20:",
            "--line",
            "4000::20",
        )

        assert result.exit_code == 0
        entry = fresh(temp_db).list_journal_entries()[0]
        assert temp_db.get_journal_entry_lines(entry.id)[1].account_id == named_id

    def test_show(self, cli_runner, temp_db, engine, ledger, make_transaction):
        posted = engine.post(make_transaction(category="Office Supplies"))

        result = run(cli_runner, temp_db, "journal", "show", str(posted.journal_entry.id))

        assert result.exit_code == 0
        assert "Bank transaction: Printer paper" in result.output
        assert "Office Supplies" in result.output


def test_parse_line_option():
    line = parse_line_option("Loans: Bank:100:")
    assert line.account == "Loans: Bank"
    assert line.debit_amount == Decimal("100")
    assert line.credit_amount == Decimal("0")
    assert parse_line_option("3::20").account == "3"


def test_invalid_log_level(cli_runner, temp_db):
    result = run(cli_runner, temp_db, "--log-level", "LOUD", "ledger", "list")
    assert result.exit_code == 2
