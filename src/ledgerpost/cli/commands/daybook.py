"""Day book command."""

import click
from decimal import Decimal
from ledgerpost.cli.date_filters import PERIOD_CHOICE, resolve_cli_date_range
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.journal import JournalService


@click.command("daybook")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative)")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative)")
@click.option("--period", type=PERIOD_CHOICE, help="Named period, e.g. this-month")
@click.pass_context
def show_day_book(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """Show the day book: every posted line in date order."""
    service = JournalService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    try:
        rows = service.list_day_book(start_date=start, end_date=end)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo("No day book entries found.")
        return

    click.echo(f"{'Date':10}  {'Reference':14}  {'Account':30}  {'Debit':>12}  {'Credit':>12}  Description")
    click.echo("-" * 110)
    total_debit = Decimal("0")
    total_credit = Decimal("0")
    for row in rows:
        total_debit += row.debit_amount
        total_credit += row.credit_amount
        click.echo(
            f"{row.entry_date.isoformat():10}  {(row.reference_number or '-'):14}  "
            f"{row.account_name:30}  {row.debit_amount:>12,.2f}  {row.credit_amount:>12,.2f}  "
            f"{row.description}"
        )
    click.echo("-" * 110)
    click.echo(f"{'Totals':58}  {total_debit:>12,.2f}  {total_credit:>12,.2f}")


def register_commands(cli):
    """Register day book command with main CLI."""
    cli.add_command(show_day_book)
