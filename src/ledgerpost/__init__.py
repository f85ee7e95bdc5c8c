"""Post categorized bank transactions to a double-entry ledger."""

__version__ = "0.1.0"


# CLI entry point, resolved on first access
def __getattr__(name):
    if name == "main":
        from ledgerpost.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
