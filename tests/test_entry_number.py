"""Tests for journal entry numbering."""

import pytest
from datetime import date
from decimal import Decimal

from ledgerpost.domain import errors
from ledgerpost.domain.entities import JournalEntryStatus
from ledgerpost.domain.entry_number import (
    EntryNumberGenerator,
    day_prefix,
    format_entry_number,
)


def add_entry(db, entry_number, entry_date=date(2025, 1, 15)):
    return db.create_journal_entry(
        entry_number=entry_number,
        entry_date=entry_date,
        description="Test",
        total_debit=Decimal("0"),
        total_credit=Decimal("0"),
        status=JournalEntryStatus.DRAFT,
    )


class TestFormatting:
    def test_day_prefix(self):
        assert day_prefix(date(2025, 1, 5)) == "JE20250105"

    def test_format_pads_sequence(self):
        assert format_entry_number(date(2025, 1, 15), 7) == "JE20250115007"

    @pytest.mark.parametrize("sequence", [0, 1000])
    def test_sequence_out_of_range(self, sequence):
        with pytest.raises(errors.ValidationError):
            format_entry_number(date(2025, 1, 15), sequence)


class TestEntryNumberGenerator:
    def test_first_entry_of_day(self, temp_db):
        generator = EntryNumberGenerator(temp_db)
        assert generator.next_entry_number(date(2025, 1, 15)) == "JE20250115001"

    def test_increments_from_highest(self, temp_db):
        add_entry(temp_db, "JE20250115001")
        add_entry(temp_db, "JE20250115002")

        generator = EntryNumberGenerator(temp_db)
        assert generator.next_entry_number(date(2025, 1, 15)) == "JE20250115003"

    def test_days_are_numbered_independently(self, temp_db):
        add_entry(temp_db, "JE20250115004")

        generator = EntryNumberGenerator(temp_db)
        assert generator.next_entry_number(date(2025, 1, 16)) == "JE20250116001"

    def test_sequence_exhausted(self, temp_db):
        add_entry(temp_db, "JE20250115999")

        with pytest.raises(errors.ValidationError):
            EntryNumberGenerator(temp_db).next_entry_number(date(2025, 1, 15))

    def test_numbers_are_scoped_to_owner(self, temp_db):
        add_entry(temp_db, "JE20250115001")
        temp_db.owner_id = "someone-else"

        generator = EntryNumberGenerator(temp_db)
        assert generator.next_entry_number(date(2025, 1, 15)) == "JE20250115001"
