"""Main CLI entry point."""

import click
from ledgerpost.config import DB_PATH_ENV, LOG_LEVEL_ENV, OWNER_ENV, configure_logging
from ledgerpost.database.factories import create_sqlite_database

# Import and register all commands at module level
from ledgerpost.cli.commands import (
    bank,
    categorize,
    daybook,
    journal,
    ledger,
    post,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--owner",
    help=f"Owner whose books are used (overrides {OWNER_ENV} environment variable)",
    envvar=OWNER_ENV,
)
@click.option(
    "--log-level",
    help="Log level for diagnostic output on stderr (e.g. INFO, DEBUG)",
    envvar=LOG_LEVEL_ENV,
)
@click.pass_context
def cli(ctx, db_path: str | None, owner: str | None, log_level: str | None):
    """Ledgerpost - Post bank transactions to a double-entry ledger.

    Record bank transactions, categorize them against the chart of accounts
    and post them as balanced journal entries with a day book trail.
    """
    ctx.ensure_object(dict)

    if log_level:
        try:
            configure_logging(log_level)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--log-level")

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path, owner_id=owner)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
ledger.register_commands(cli)
bank.register_commands(cli)
transaction.register_commands(cli)
categorize.register_commands(cli)
post.register_commands(cli)
journal.register_commands(cli)
daybook.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
