"""Posting commands."""

import click
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.bulk_posting import BulkPostingService
from ledgerpost.domain.entities import BulkPostStatus
from ledgerpost.domain.posting import PostingEngine


@click.command("post")
@click.argument("transaction_ids", nargs=-1, required=True, type=int)
@click.option(
    "--by-transaction-date",
    is_flag=True,
    help="Number entries by the transaction date instead of today",
)
@click.pass_context
def post_transactions(ctx, transaction_ids: tuple[int, ...], by_transaction_date: bool):
    """Post categorized transactions to the ledger.

    Each transaction becomes a posted journal entry with a bank line and a
    category line. Several IDs are posted one by one; failures are reported
    and do not stop the rest.

    Examples:
        ledgerpost post 1
        ledgerpost post 1 2 3
    """
    engine = PostingEngine(ctx.obj["db"], number_by_transaction_date=by_transaction_date)

    # Remove duplicates while preserving order
    unique_ids = list(dict.fromkeys(transaction_ids))

    if len(unique_ids) == 1:
        try:
            result = engine.post(unique_ids[0])
        except ValueError as e:
            handle_domain_error(ctx, e)
        entry = result.journal_entry
        click.echo(
            f"Transaction {unique_ids[0]} posted as journal entry {entry.entry_number} "
            f"({entry.total_debit:,.2f})"
        )
        for line in result.lines:
            click.echo(
                f"  {line.account_name:30s} Dr {line.debit_amount:>12,.2f}  Cr {line.credit_amount:>12,.2f}"
            )
        return

    click.echo(f"Posting {len(unique_ids)} transactions...")
    report = BulkPostingService(engine).bulk_post(unique_ids)
    for outcome in report.results:
        if outcome.success:
            click.echo(f"✓ Transaction {outcome.transaction_id} posted")
        else:
            click.echo(f"✗ Transaction {outcome.transaction_id}: {outcome.error}")

    click.echo(f"\nResults: {report.succeeded} posted, {report.failed} failed")
    if report.status == BulkPostStatus.PARTIAL:
        click.echo("Partial success: some transactions could not be posted.")
    if report.failed:
        ctx.exit(1)


def register_commands(cli):
    """Register post command with main CLI."""
    cli.add_command(post_transactions)
