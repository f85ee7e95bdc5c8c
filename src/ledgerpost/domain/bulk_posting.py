"""Bulk posting of bank transactions."""

import logging
from ledgerpost.domain import errors
from ledgerpost.domain.entities import BulkPostReport, PostOutcome
from ledgerpost.domain.posting import PostingEngine

logger = logging.getLogger(__name__)


class BulkPostingService:
    """Posts many transactions one after another.

    Postings run strictly in sequence so a batch never races itself for entry
    numbers or ledger balances. A failing transaction is recorded in the
    report and the batch moves on.
    """

    def __init__(self, engine: PostingEngine):
        self.engine = engine

    def bulk_post(self, transaction_ids: list[int]) -> BulkPostReport:
        """Post each transaction, returning one outcome per ID in input order."""
        results: list[PostOutcome] = []
        for txn_id in transaction_ids:
            try:
                posted = self.engine.post(txn_id)
            except errors.DomainError as exc:
                logger.warning("Failed to post transaction %s: %s", txn_id, exc)
                results.append(PostOutcome(transaction_id=txn_id, success=False, error=str(exc)))
                continue
            results.append(
                PostOutcome(
                    transaction_id=txn_id,
                    success=True,
                    journal_entry_id=posted.journal_entry.id,
                )
            )

        report = BulkPostReport(results=results)
        logger.info(
            "Bulk posting finished: %d posted, %d failed (%s)",
            report.succeeded,
            report.failed,
            report.status.value,
        )
        return report
