"""Journal entry commands."""

import click
from ledgerpost.cli.date_filters import PERIOD_CHOICE, resolve_cli_date_range
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.entities import JournalEntryStatus
from ledgerpost.domain.journal import JournalService, ManualLine
from ledgerpost.utils.amount_parser import parse_amount
from ledgerpost.utils.date_parser import parse_date


def parse_line_option(value: str) -> ManualLine:
    """Parse an ``ACCOUNT:DEBIT:CREDIT`` line option.

    The account may itself contain colons; the last two fields are amounts.
    Empty amounts count as zero. The account is matched by name first, then by ID when numeric.

    Raises:
        ValueError: If the value is malformed
    """
    parts = value.rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        raise ValueError(f"Invalid line '{value}'. Expected ACCOUNT:DEBIT:CREDIT")

    account, debit, credit = (part.strip() for part in parts)
    return ManualLine(
        account=account,
        debit_amount=parse_amount(debit) if debit else parse_amount("0"),
        credit_amount=parse_amount(credit) if credit else parse_amount("0"),
    )


@click.group()
def journal_group():
    """Manage journal entries."""
    pass


@journal_group.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in JournalEntryStatus], case_sensitive=False),
    help="Show only entries in this state",
)
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative)")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative)")
@click.option("--period", type=PERIOD_CHOICE, help="Named period, e.g. this-month")
@click.pass_context
def list_entries(
    ctx, status: str | None, start_date: str | None, end_date: str | None, period: str | None
):
    """List journal entries, newest first."""
    service = JournalService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    entries = service.list_entries(
        start_date=start, end_date=end, status=status.lower() if status else None
    )
    if not entries:
        click.echo("No journal entries found.")
        return

    for entry in entries:
        click.echo(
            f"{entry.id:>5}  {entry.entry_number}  {entry.entry_date.isoformat()}  "
            f"{entry.status.value:9}  {entry.total_debit:>12,.2f}  {entry.description}"
        )


@journal_group.command("show")
@click.argument("entry_id", type=int)
@click.pass_context
def show_entry(ctx, entry_id: int):
    """Show a journal entry with its lines."""
    service = JournalService(ctx.obj["db"])

    try:
        entry, lines = service.get_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Entry {entry.entry_number} ({entry.status.value})")
    click.echo(f"  Date: {entry.entry_date}")
    click.echo(f"  Description: {entry.description}")
    if entry.reference_type:
        click.echo(f"  Reference: {entry.reference_type} {entry.reference_id or ''}".rstrip())
    click.echo("-" * 70)
    for line in lines:
        click.echo(
            f"  {line.line_order}. {line.account_name:30s} "
            f"Dr {line.debit_amount:>12,.2f}  Cr {line.credit_amount:>12,.2f}"
        )
    click.echo("-" * 70)
    click.echo(
        f"  {'Totals':33s} Dr {entry.total_debit:>12,.2f}  Cr {entry.total_credit:>12,.2f}"
    )


@journal_group.command("create")
@click.option("--description", required=True, help="Entry description")
@click.option("--date", "entry_date", default="today", help="Entry date (default today)")
@click.option(
    "--line",
    "line_values",
    multiple=True,
    required=True,
    help="Line as ACCOUNT:DEBIT:CREDIT, e.g. 'Rent:500:' (repeat for each line)",
)
@click.pass_context
def create_entry(ctx, description: str, entry_date: str, line_values: tuple[str, ...]):
    """Create a balanced draft journal entry.

    Examples:
        ledgerpost journal create --description "Owner investment" --line "Bank Account - Current:500:" --line "Capital::500"
    """
    service = JournalService(ctx.obj["db"])

    try:
        parsed_date = parse_date(entry_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        lines = [parse_line_option(value) for value in line_values]
        entry_id = service.create_entry(description=description, entry_date=parsed_date, lines=lines)
    except ValueError as e:
        handle_domain_error(ctx, e)

    entry, _ = service.get_entry(entry_id)
    click.echo(f"Created draft journal entry {entry.entry_number} (ID: {entry_id})")


@journal_group.command("post")
@click.argument("entry_id", type=int)
@click.pass_context
def post_entry(ctx, entry_id: int):
    """Post a draft journal entry."""
    service = JournalService(ctx.obj["db"])

    try:
        entry = service.post_entry(entry_id)
        click.echo(f"Posted journal entry {entry.entry_number}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@journal_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_entry(ctx, entry_id: int, yes: bool):
    """Delete a draft journal entry."""
    service = JournalService(ctx.obj["db"])

    if not yes and not click.confirm(f"Are you sure you want to delete journal entry {entry_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_entry(entry_id)
        click.echo(f"Deleted journal entry {entry_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
