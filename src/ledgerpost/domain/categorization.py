"""Categorization of bank transactions ahead of posting."""

import logging
from ledgerpost.database.base import Database
from ledgerpost.domain import errors
from ledgerpost.domain.entities import BankTransaction

logger = logging.getLogger(__name__)


class CategorizationService:
    """Assigns category labels to bank transactions.

    The label is written verbatim. Posting later matches it against chart of
    accounts names, so an unknown label is accepted here and only rejected
    at posting time.
    """

    def __init__(self, db: Database):
        self.db = db

    def _clean_category(self, category: str) -> str:
        if not (category or "").strip():
            raise errors.ValidationError("Category cannot be empty")
        return category

    def _require_unposted(self, transaction_id: int) -> BankTransaction:
        txn = self.db.get_bank_transaction(transaction_id)
        if txn is None:
            raise errors.NotFoundError(errors.transaction_not_found(transaction_id))
        if txn.is_posted:
            raise errors.AlreadyPostedError(
                errors.already_posted(transaction_id, txn.journal_entry_id)
            )
        return txn

    def categorize(self, transaction_id: int, category: str) -> BankTransaction:
        """Set the category of one transaction and mark it reviewed.

        Raises:
            ValidationError: If the category is blank
            NotFoundError: If the transaction doesn't exist
            AlreadyPostedError: If the transaction is posted
        """
        category = self._clean_category(category)
        self._require_unposted(transaction_id)
        self.db.set_transaction_category([transaction_id], category)
        logger.info("Transaction %s categorized as '%s'", transaction_id, category)
        return self.db.get_bank_transaction(transaction_id)

    def bulk_categorize(self, transaction_ids: list[int], category: str) -> list[BankTransaction]:
        """Set the same category on several transactions at once.

        Every ID is checked before anything is written, and the write is a
        single atomic update: either all transactions change or none do.

        Raises:
            ValidationError: If the category is blank
            NotFoundError: If any transaction doesn't exist
            AlreadyPostedError: If any transaction is posted
        """
        category = self._clean_category(category)
        unique_ids = list(dict.fromkeys(transaction_ids))
        for txn_id in unique_ids:
            self._require_unposted(txn_id)

        with self.db.atomic():
            self.db.set_transaction_category(unique_ids, category)

        logger.info("%d transactions categorized as '%s'", len(unique_ids), category)
        return [self.db.get_bank_transaction(txn_id) for txn_id in unique_ids]

    def uncategorize(self, transaction_id: int) -> BankTransaction:
        """Clear the category, returning the transaction to uncategorized.

        Raises:
            NotFoundError: If the transaction doesn't exist
            AlreadyPostedError: If the transaction is posted
        """
        self._require_unposted(transaction_id)
        self.db.clear_transaction_category(transaction_id)
        logger.info("Transaction %s uncategorized", transaction_id)
        return self.db.get_bank_transaction(transaction_id)
