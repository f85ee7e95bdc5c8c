"""Tests for categorization service."""

import pytest

from ledgerpost.domain import errors
from ledgerpost.domain.entities import TransactionStatus


class TestCategorize:
    def test_categorize_marks_reviewed(self, categorization_service, make_transaction):
        txn_id = make_transaction()

        txn = categorization_service.categorize(txn_id, "Office Supplies")

        assert txn.category == "Office Supplies"
        assert txn.status == TransactionStatus.CATEGORIZED
        assert txn.is_reviewed is True

    def test_unknown_category_is_accepted(self, categorization_service, make_transaction):
        """Labels are only matched against the chart of accounts when posting."""
        txn = categorization_service.categorize(make_transaction(), "Not An Account")
        assert txn.category == "Not An Account"

    def test_blank_category_rejected(self, categorization_service, make_transaction):
        with pytest.raises(errors.ValidationError):
            categorization_service.categorize(make_transaction(), "   ")

    def test_missing_transaction(self, categorization_service):
        with pytest.raises(errors.NotFoundError, match="Transaction 42 not found"):
            categorization_service.categorize(42, "Office Supplies")

    def test_posted_transaction_cannot_be_recategorized(
        self, categorization_service, engine, ledger, make_transaction
    ):
        txn_id = make_transaction(category="Office Supplies")
        engine.post(txn_id)

        with pytest.raises(errors.AlreadyPostedError):
            categorization_service.categorize(txn_id, "Sales")
        with pytest.raises(errors.AlreadyPostedError):
            categorization_service.uncategorize(txn_id)

    def test_uncategorize(self, categorization_service, make_transaction):
        txn_id = make_transaction(category="Office Supplies")

        txn = categorization_service.uncategorize(txn_id)

        assert txn.category is None
        assert txn.status == TransactionStatus.UNCATEGORIZED
        assert txn.is_reviewed is False


class TestBulkCategorize:
    def test_bulk_categorize(self, categorization_service, make_transaction):
        ids = [make_transaction(), make_transaction()]

        updated = categorization_service.bulk_categorize(ids + ids[:1], "Office Supplies")

        assert [t.id for t in updated] == ids
        assert all(t.status == TransactionStatus.CATEGORIZED for t in updated)

    def test_bulk_categorize_is_all_or_nothing(
        self, temp_db, categorization_service, make_transaction
    ):
        txn_id = make_transaction()

        with pytest.raises(errors.NotFoundError):
            categorization_service.bulk_categorize([txn_id, 999], "Office Supplies")

        assert temp_db.get_bank_transaction(txn_id).status == TransactionStatus.UNCATEGORIZED
