"""Double-entry posting of categorized bank transactions.

A posting turns one bank transaction into a posted journal entry with two
lines (bank leg first, category leg second), moves both ledger balances by
debit minus credit, appends two day book rows and links the transaction to
the entry. All writes happen inside one ``Database.atomic()`` block.
"""

import logging
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Callable
from ledgerpost.database.base import Database
from ledgerpost.domain import errors
from ledgerpost.domain.entities import (
    BankTransaction,
    JournalEntry,
    JournalEntryLine,
    JournalEntryStatus,
    LedgerAccount,
    LineDraft,
    PostingResult,
    TransactionType,
)
from ledgerpost.domain.entry_number import EntryNumberGenerator

logger = logging.getLogger(__name__)

REFERENCE_TYPE = "bank_transaction"
DEFAULT_MAX_ATTEMPTS = 3


def apply_posted_lines(db: Database, entry: JournalEntry, lines: list[JournalEntryLine]) -> None:
    """Move ledger balances and append day book rows for a posted entry.

    Must run inside the caller's atomic block.
    """
    for line in lines:
        db.update_account_balance(line.account_id, line.balance_delta)

    for line in lines:
        db.add_day_book_entry(
            entry_date=entry.entry_date,
            account_id=line.account_id,
            account_name=line.account_name,
            description=line.description or entry.description,
            debit_amount=line.debit_amount,
            credit_amount=line.credit_amount,
            reference_number=entry.entry_number,
            journal_entry_id=entry.id,
        )


def build_posting_lines(
    txn: BankTransaction, bank_account: LedgerAccount, category_account: LedgerAccount
) -> list[LineDraft]:
    """Return the bank leg and category leg for a transaction.

    Money in (credit) debits the bank leg; money out (debit) credits it.
    """
    amount = abs(txn.amount)
    zero = Decimal("0")
    bank_debited = txn.transaction_type == TransactionType.CREDIT
    return [
        LineDraft(
            account_id=bank_account.id,
            account_name=bank_account.account_name,
            description=txn.description,
            debit_amount=amount if bank_debited else zero,
            credit_amount=zero if bank_debited else amount,
        ),
        LineDraft(
            account_id=category_account.id,
            account_name=category_account.account_name,
            description=txn.description,
            debit_amount=zero if bank_debited else amount,
            credit_amount=amount if bank_debited else zero,
        ),
    ]


class PostingEngine:
    """Posts bank transactions to the ledger."""

    def __init__(
        self,
        db: Database,
        today: Callable[[], date] = date.today,
        number_by_transaction_date: bool = False,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """Initialize posting engine.

        Args:
            db: Database instance
            today: Returns the posting day used for entry numbers
            number_by_transaction_date: Number entries by the transaction's
                date instead of the posting day
            max_attempts: Tries per posting when the entry number is taken
        """
        if max_attempts < 1:
            raise errors.ValidationError("max_attempts must be at least 1")
        self.db = db
        self.today = today
        self.number_by_transaction_date = number_by_transaction_date
        self.max_attempts = max_attempts
        self.numbers = EntryNumberGenerator(db)

    def resolve(self, transaction_id: int) -> tuple[BankTransaction, LedgerAccount, LedgerAccount]:
        """Check posting preconditions in order and resolve both ledger accounts.

        Raises:
            TransactionNotFoundError: If the transaction doesn't exist
            AlreadyPostedError: If it was posted before
            NotCategorizedError: If it has no category
            BankAccountMissingInLedgerError: If its bank account name has no
                chart of accounts entry
            CategoryAccountMissingError: If its category has no chart of
                accounts entry
        """
        txn = self.db.get_bank_transaction(transaction_id)
        if txn is None:
            raise errors.TransactionNotFoundError(errors.transaction_not_found(transaction_id))
        if txn.is_posted:
            raise errors.AlreadyPostedError(errors.already_posted(transaction_id, txn.journal_entry_id))
        if not txn.is_categorized:
            raise errors.NotCategorizedError(errors.not_categorized(transaction_id))

        bank = self.db.get_bank_account(txn.bank_account_id)
        bank_name = bank.account_name if bank is not None else ""
        bank_account = self.db.get_ledger_account_by_name(bank_name) if bank_name else None
        if bank_account is None:
            raise errors.BankAccountMissingInLedgerError(
                errors.bank_account_missing_in_ledger(bank_name), bank_name
            )

        category_account = self.db.get_ledger_account_by_name(txn.category)
        if category_account is None:
            raise errors.CategoryAccountMissingError(
                errors.category_account_missing(txn.category), txn.category
            )

        return txn, bank_account, category_account

    def post(self, transaction_id: int) -> PostingResult:
        """Post one categorized transaction.

        Returns:
            The created journal entry, its lines and the updated transaction

        Raises:
            PostingError: A precondition failed (nothing was written), or
                storage failed (``PostingWriteError``; everything was rolled back)
        """
        try:
            txn, bank_account, category_account = self.resolve(transaction_id)
        except errors.DomainError:
            raise
        except Exception as exc:
            logger.error("Error reading transaction %s: %s", transaction_id, exc, exc_info=True)
            raise errors.PostingWriteError(
                f"Posting transaction {transaction_id} failed before writing: {exc}"
            ) from exc
        lines = build_posting_lines(txn, bank_account, category_account)

        for attempt in range(1, self.max_attempts + 1):
            try:
                result = self._write(txn, lines)
            except errors.AlreadyPostedError:
                raise
            except errors.ConflictError as exc:
                if attempt == self.max_attempts:
                    raise errors.PostingWriteError(
                        f"Could not allocate a journal entry number for transaction "
                        f"{transaction_id} after {attempt} attempts"
                    ) from exc
                logger.warning(
                    "Entry number conflict posting transaction %s (attempt %d/%d), retrying",
                    transaction_id,
                    attempt,
                    self.max_attempts,
                )
                continue
            except errors.DomainError:
                raise
            except Exception as exc:
                logger.error("Error posting transaction %s: %s", transaction_id, exc, exc_info=True)
                raise errors.PostingWriteError(
                    f"Posting transaction {transaction_id} failed and was rolled back: {exc}"
                ) from exc

            logger.info(
                "Transaction %s posted as %s (%s %s)",
                transaction_id,
                result.journal_entry.entry_number,
                txn.transaction_type.value,
                result.journal_entry.total_debit,
            )
            return result

        raise errors.PostingWriteError(f"Posting transaction {transaction_id} was not attempted")

    def _write(self, txn: BankTransaction, lines: list[LineDraft]) -> PostingResult:
        amount = abs(txn.amount)
        number_day = txn.transaction_date if self.number_by_transaction_date else self.today()

        with self.db.atomic():
            current = self.db.get_bank_transaction(txn.id)
            if current is None:
                raise errors.TransactionNotFoundError(errors.transaction_not_found(txn.id))
            if current.is_posted:
                raise errors.AlreadyPostedError(errors.already_posted(txn.id, current.journal_entry_id))

            entry_id = self.db.create_journal_entry(
                entry_number=self.numbers.next_entry_number(number_day),
                entry_date=txn.transaction_date,
                description=f"Bank transaction: {txn.description}",
                total_debit=amount,
                total_credit=amount,
                status=JournalEntryStatus.POSTED,
                reference_type=REFERENCE_TYPE,
                reference_id=txn.id,
                posted_at=datetime.now(UTC),
            )
            saved_lines = self.db.add_journal_entry_lines(entry_id, lines)
            entry = self.db.get_journal_entry(entry_id)
            apply_posted_lines(self.db, entry, saved_lines)
            self.db.mark_transaction_posted(txn.id, entry_id)

        return PostingResult(
            journal_entry=self.db.get_journal_entry(entry_id),
            lines=saved_lines,
            transaction=self.db.get_bank_transaction(txn.id),
        )
