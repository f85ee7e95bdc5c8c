"""Domain layer for ledgerpost application.

Service classes are imported on first attribute access.
"""

_SERVICES = {
    "BankAccountService": "ledgerpost.domain.bank_account",
    "LedgerAccountService": "ledgerpost.domain.ledger_account",
    "TransactionService": "ledgerpost.domain.transaction",
    "CategorizationService": "ledgerpost.domain.categorization",
    "PostingEngine": "ledgerpost.domain.posting",
    "BulkPostingService": "ledgerpost.domain.bulk_posting",
    "JournalService": "ledgerpost.domain.journal",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
