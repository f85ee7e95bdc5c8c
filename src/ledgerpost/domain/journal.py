"""Journal entry and day book domain service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Callable, Optional
from ledgerpost.database.base import Database
from ledgerpost.domain import errors
from ledgerpost.domain.entities import (
    DayBookEntry,
    JournalEntry,
    JournalEntryLine,
    JournalEntryStatus,
    LineDraft,
)
from ledgerpost.domain.entry_number import EntryNumberGenerator
from ledgerpost.domain.ledger_account import LedgerAccountService
from ledgerpost.domain.money import to_money
from ledgerpost.domain.posting import DEFAULT_MAX_ATTEMPTS, apply_posted_lines

logger = logging.getLogger(__name__)

MANUAL_REFERENCE_TYPE = "manual"


@dataclass(frozen=True)
class ManualLine:
    """One line of a manual journal entry, naming its account by ID or name."""

    account: int | str
    debit_amount: Decimal = Decimal("0")
    credit_amount: Decimal = Decimal("0")
    description: Optional[str] = None


class JournalService:
    """Service for journal entries and the day book."""

    def __init__(
        self,
        db: Database,
        today: Callable[[], date] = date.today,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """Initialize journal service.

        Args:
            db: Database instance
            today: Returns the day used for new entry numbers
            max_attempts: Tries per entry when the entry number is taken
        """
        if max_attempts < 1:
            raise errors.ValidationError("max_attempts must be at least 1")
        self.db = db
        self.max_attempts = max_attempts
        self.today = today
        self.numbers = EntryNumberGenerator(db)
        self.accounts = LedgerAccountService(db)

    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[JournalEntryStatus | str] = None,
    ) -> list[JournalEntry]:
        """List journal entries, newest first."""
        if status is not None:
            status = JournalEntryStatus(status)
        return self.db.list_journal_entries(start_date=start_date, end_date=end_date, status=status)

    def get_entry(self, entry_id: int) -> tuple[JournalEntry, list[JournalEntryLine]]:
        """Get a journal entry with its lines.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        entry = self.db.get_journal_entry(entry_id)
        if entry is None:
            raise errors.NotFoundError(errors.journal_entry_not_found(entry_id))
        return entry, self.db.get_journal_entry_lines(entry_id)

    def _line_drafts(self, lines: list[ManualLine]) -> list[LineDraft]:
        if len(lines) < 2:
            raise errors.ValidationError("A journal entry needs at least two lines")

        drafts = []
        for number, line in enumerate(lines, start=1):
            debit = to_money(line.debit_amount or 0, f"Line {number} debit")
            credit = to_money(line.credit_amount or 0, f"Line {number} credit")
            if debit < 0 or credit < 0:
                raise errors.ValidationError(f"Line {number}: amounts cannot be negative")
            if (debit == 0) == (credit == 0):
                raise errors.ValidationError(
                    f"Line {number}: exactly one of debit or credit must be non-zero"
                )
            account = self.accounts.require_account(line.account)
            drafts.append(
                LineDraft(
                    account_id=account.id,
                    account_name=account.account_name,
                    description=line.description,
                    debit_amount=debit,
                    credit_amount=credit,
                )
            )
        return drafts

    def create_entry(
        self,
        description: str,
        entry_date: date,
        lines: list[ManualLine],
        reference_type: Optional[str] = MANUAL_REFERENCE_TYPE,
        reference_id: Optional[int] = None,
    ) -> int:
        """Create a balanced draft journal entry.

        Drafts do not touch balances or the day book until posted.

        Returns:
            Journal entry ID

        Raises:
            ValidationError: If lines are malformed
            UnbalancedEntryError: If debits and credits differ
            NotFoundError: If a line names an unknown account
        """
        drafts = self._line_drafts(lines)
        total_debit = sum((d.debit_amount for d in drafts), Decimal("0"))
        total_credit = sum((d.credit_amount for d in drafts), Decimal("0"))
        if total_debit != total_credit:
            raise errors.UnbalancedEntryError(errors.unbalanced_entry(total_debit, total_credit))

        for attempt in range(1, self.max_attempts + 1):
            try:
                with self.db.atomic():
                    entry_id = self.db.create_journal_entry(
                        entry_number=self.numbers.next_entry_number(self.today()),
                        entry_date=entry_date,
                        description=description,
                        total_debit=total_debit,
                        total_credit=total_credit,
                        status=JournalEntryStatus.DRAFT,
                        reference_type=reference_type,
                        reference_id=reference_id,
                    )
                    self.db.add_journal_entry_lines(entry_id, drafts)
            except errors.ConflictError as exc:
                if attempt == self.max_attempts:
                    raise errors.ConflictError(
                        f"Could not allocate a journal entry number after {attempt} attempts"
                    ) from exc
                logger.warning(
                    "Entry number conflict creating journal entry (attempt %d/%d), retrying",
                    attempt,
                    self.max_attempts,
                )
                continue
            break

        logger.info("Draft journal entry %s created with %d lines", entry_id, len(drafts))
        return entry_id

    def post_entry(self, entry_id: int) -> JournalEntry:
        """Post a draft entry: move balances and write the day book.

        Raises:
            NotFoundError: If the entry doesn't exist
            ConflictError: If the entry is not a draft
        """
        entry, lines = self.get_entry(entry_id)
        if entry.status != JournalEntryStatus.DRAFT:
            raise errors.ConflictError(
                f"Journal entry {entry.entry_number} is {entry.status.value}; only drafts can be posted"
            )

        with self.db.atomic():
            self.db.update_journal_entry_status(
                entry_id, JournalEntryStatus.POSTED, posted_at=datetime.now(UTC)
            )
            apply_posted_lines(self.db, entry, lines)

        logger.info("Journal entry %s posted", entry.entry_number)
        return self.db.get_journal_entry(entry_id)

    def delete_entry(self, entry_id: int) -> None:
        """Delete a draft entry.

        Raises:
            NotFoundError: If the entry doesn't exist
            ConflictError: If the entry is not a draft
        """
        entry, _ = self.get_entry(entry_id)
        if entry.status != JournalEntryStatus.DRAFT:
            raise errors.ConflictError(
                f"Journal entry {entry.entry_number} is {entry.status.value}; only drafts can be deleted"
            )
        self.db.delete_journal_entry(entry_id)

    def list_day_book(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[DayBookEntry]:
        """List day book rows in chronological order."""
        if start_date is not None and end_date is not None and start_date > end_date:
            raise errors.ValidationError(
                f"Start date {start_date} is after end date {end_date}"
            )
        return self.db.list_day_book(start_date=start_date, end_date=end_date)
