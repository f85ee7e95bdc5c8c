"""Bank transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from ledgerpost.database.base import Database
from ledgerpost.domain import errors
from ledgerpost.domain.money import to_positive_money
from ledgerpost.domain.entities import (
    BankTransaction,
    TransactionStatus,
    TransactionType,
)


class TransactionService:
    """Service for managing bank transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        bank_account_id: int,
        transaction_date: date,
        amount: Decimal,
        transaction_type: TransactionType | str,
        description: str = "",
        reference_number: Optional[str] = None,
        category: Optional[str] = None,
    ) -> int:
        """Create a bank transaction.

        Args:
            bank_account_id: Owning bank account ID
            transaction_date: Transaction date
            amount: Positive magnitude
            transaction_type: credit (money in) or debit (money out)
            description: Statement description
            reference_number: Optional bank reference
            category: Optional category; a non-empty value starts the
                transaction as categorized

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If the bank account doesn't exist
            ValidationError: If amount or type is invalid
        """
        if self.db.get_bank_account(bank_account_id) is None:
            raise errors.NotFoundError(errors.bank_account_not_found(bank_account_id))

        try:
            transaction_type = TransactionType(transaction_type)
        except ValueError:
            raise errors.ValidationError(
                f"Invalid transaction type '{transaction_type}'. Expected credit or debit"
            ) from None

        return self.db.create_bank_transaction(
            bank_account_id=bank_account_id,
            transaction_date=transaction_date,
            amount=to_positive_money(amount),
            transaction_type=transaction_type,
            description=description or "",
            reference_number=reference_number,
            category=category or None,
        )

    def get_transaction(self, transaction_id: int) -> Optional[BankTransaction]:
        """Get transaction by ID."""
        return self.db.get_bank_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> BankTransaction:
        """Get transaction by ID.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        txn = self.db.get_bank_transaction(transaction_id)
        if txn is None:
            raise errors.NotFoundError(errors.transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
        transaction_type: Optional[TransactionType | str] = None,
        transaction_date: Optional[date] = None,
        reference_number: Optional[str] = None,
    ) -> BankTransaction:
        """Update transaction fields.

        Edits are allowed in every state, including after posting; they do not
        touch the journal entry that was already created.

        Raises:
            NotFoundError: If transaction doesn't exist
            ValidationError: If amount or type is invalid
        """
        self.require_transaction(transaction_id)

        if amount is not None:
            amount = to_positive_money(amount)
        if transaction_type is not None:
            try:
                transaction_type = TransactionType(transaction_type)
            except ValueError:
                raise errors.ValidationError(
                    f"Invalid transaction type '{transaction_type}'. Expected credit or debit"
                ) from None

        self.db.update_bank_transaction(
            transaction_id=transaction_id,
            description=description,
            amount=amount,
            transaction_type=transaction_type,
            transaction_date=transaction_date,
            reference_number=reference_number,
        )
        return self.require_transaction(transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
            DependencyError: If the transaction is posted
        """
        txn = self.require_transaction(transaction_id)
        if txn.is_posted:
            raise errors.DependencyError(
                f"Cannot delete transaction {transaction_id}: it is posted to "
                f"journal entry {txn.journal_entry_id}"
            )
        self.db.delete_bank_transaction(transaction_id)

    def bulk_delete_transactions(self, transaction_ids: list[int]) -> int:
        """Delete several unposted transactions together.

        Every ID is checked first. If any is missing or posted nothing is
        deleted.

        Returns:
            Number of transactions deleted

        Raises:
            NotFoundError: If any transaction doesn't exist
            DependencyError: If any transaction is posted
        """
        unique_ids = list(dict.fromkeys(transaction_ids))
        posted = []
        for txn_id in unique_ids:
            if self.require_transaction(txn_id).is_posted:
                posted.append(str(txn_id))
        if posted:
            raise errors.DependencyError(
                f"Cannot delete posted transactions: {', '.join(posted)}"
            )

        with self.db.atomic():
            for txn_id in unique_ids:
                self.db.delete_bank_transaction(txn_id)
        return len(unique_ids)

    def list_transactions(
        self,
        status: Optional[TransactionStatus | str] = None,
        bank_account_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[BankTransaction]:
        """List transactions with filters.

        Args:
            status: Optional status filter (uncategorized, categorized, posted)
            bank_account_id: Optional bank account filter
            start_date: Optional start date filter
            end_date: Optional end date filter

        Returns:
            List of transaction entities, newest first
        """
        if status is not None:
            status = TransactionStatus(status)
        return self.db.list_bank_transactions(
            status=status,
            bank_account_id=bank_account_id,
            start_date=start_date,
            end_date=end_date,
        )
