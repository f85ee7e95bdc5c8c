"""Category assignment commands."""

import click
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.categorization import CategorizationService


@click.command("categorize")
@click.argument("transaction_ids", nargs=-1, required=True, type=int)
@click.argument("category", nargs=1)
@click.pass_context
def categorize_transaction(ctx, transaction_ids: tuple[int, ...], category: str):
    """Assign a category to one or more transactions.

    CATEGORY must match a chart of accounts name before the transactions can
    be posted. Pass an empty string to clear the category again.

    Examples:
        ledgerpost categorize 1 "Office Supplies"
        ledgerpost categorize 1 2 3 "Office Supplies"
        ledgerpost categorize 4 ""
    """
    service = CategorizationService(ctx.obj["db"])

    # Remove duplicates while preserving order
    unique_ids = list(dict.fromkeys(transaction_ids))

    if not category.strip():
        failures = 0
        for txn_id in unique_ids:
            try:
                service.uncategorize(txn_id)
                click.echo(f"Transaction {txn_id} uncategorized")
            except ValueError as e:
                failures += 1
                click.echo(f"Error: {e}", err=True)
        if failures:
            ctx.exit(1)
        return

    try:
        if len(unique_ids) == 1:
            service.categorize(unique_ids[0], category)
            click.echo(f"Transaction {unique_ids[0]} categorized as '{category}'")
        else:
            service.bulk_categorize(unique_ids, category)
            click.echo(f"{len(unique_ids)} transactions categorized as '{category}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register categorize command with main CLI."""
    cli.add_command(categorize_transaction)
