"""Sequential journal entry numbers of the form JE{YYYYMMDD}{NNN}."""

from datetime import date
from ledgerpost.database.base import Database
from ledgerpost.domain import errors

ENTRY_PREFIX = "JE"
SEQUENCE_DIGITS = 3
MAX_SEQUENCE = 10**SEQUENCE_DIGITS - 1


def day_prefix(day: date) -> str:
    """Return the entry number prefix for a calendar day, e.g. JE20250115."""
    return f"{ENTRY_PREFIX}{day.strftime('%Y%m%d')}"


def format_entry_number(day: date, sequence: int) -> str:
    """Format an entry number from a day and a 1-based sequence."""
    if not 1 <= sequence <= MAX_SEQUENCE:
        raise errors.ValidationError(
            f"Entry sequence {sequence} for {day.isoformat()} is outside 1..{MAX_SEQUENCE}"
        )
    return f"{day_prefix(day)}{sequence:0{SEQUENCE_DIGITS}d}"


class EntryNumberGenerator:
    """Derives the next entry number for a day from the highest one stored.

    No lock is taken. Two writers reading the same day concurrently get the
    same number; the unique constraint on entry numbers rejects the second
    insert and the caller retries with a fresh number.
    """

    def __init__(self, db: Database):
        self.db = db

    def next_entry_number(self, day: date) -> str:
        prefix = day_prefix(day)
        last = self.db.get_last_entry_number(prefix)
        if last is None:
            return format_entry_number(day, 1)

        suffix = last[-SEQUENCE_DIGITS:]
        if not suffix.isdigit():
            raise errors.ValidationError(f"Malformed entry number '{last}'")
        return format_entry_number(day, int(suffix) + 1)
