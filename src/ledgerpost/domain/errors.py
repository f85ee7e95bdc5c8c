"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class PostingError(DomainError):
    """Base class for failures while posting a bank transaction."""


class TransactionNotFoundError(PostingError, NotFoundError):
    """The bank transaction to post does not exist."""


class NotCategorizedError(PostingError, ValidationError):
    """The bank transaction has no category yet."""


class AlreadyPostedError(PostingError, ConflictError):
    """The bank transaction already has a journal entry."""


class AccountResolutionError(PostingError, NotFoundError):
    """A bank or category label does not match any chart of accounts entry."""

    def __init__(self, message: str, account_name: str):
        super().__init__(message)
        self.account_name = account_name


class BankAccountMissingInLedgerError(AccountResolutionError):
    """The bank account name has no chart of accounts counterpart."""


class CategoryAccountMissingError(AccountResolutionError):
    """The category label has no chart of accounts counterpart."""


class PostingWriteError(PostingError):
    """Storage failed while writing a posting; nothing was committed."""


class UnbalancedEntryError(ValidationError):
    """Journal lines do not have equal debit and credit totals."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing bank transaction."""
    return f"Transaction {transaction_id} not found"


def bank_account_not_found(bank_account_id: int) -> str:
    """Return message for missing bank account."""
    return f"Bank account {bank_account_id} not found"


def ledger_account_not_found(account: int | str) -> str:
    """Return message for missing chart of accounts entry by ID or name."""
    if isinstance(account, int):
        return f"Ledger account {account} not found"
    return f"Ledger account '{account}' not found"


def journal_entry_not_found(entry_id: int) -> str:
    """Return message for missing journal entry."""
    return f"Journal entry {entry_id} not found"


def not_categorized(transaction_id: int) -> str:
    """Return message when posting an uncategorized transaction."""
    return f"Transaction {transaction_id} must be categorized before posting"


def already_posted(transaction_id: int, journal_entry_id: int | None) -> str:
    """Return message when a transaction has already been posted."""
    return f"Transaction {transaction_id} is already posted (journal entry {journal_entry_id})"


def bank_account_missing_in_ledger(account_name: str) -> str:
    """Return message when a bank account has no ledger counterpart."""
    return (
        f"Bank account '{account_name}' not found in chart of accounts. "
        "Create a ledger account with the same name first."
    )


def category_account_missing(category: str) -> str:
    """Return message when a category has no ledger counterpart."""
    return (
        f"Category account '{category}' not found in chart of accounts. "
        "Create a ledger account with the same name first."
    )


def duplicate_name(kind: str, name: str) -> str:
    """Return message for a duplicate account name."""
    return f"{kind} with name '{name}' already exists"


def unbalanced_entry(total_debit, total_credit) -> str:
    """Return message for a journal entry whose sides differ."""
    return (
        f"Journal entry is not balanced: total debit {total_debit} "
        f"does not equal total credit {total_credit}"
    )
