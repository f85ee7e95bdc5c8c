"""Bank transaction commands."""

import click
from ledgerpost.cli.date_filters import PERIOD_CHOICE, resolve_cli_date_range
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.bank_account import BankAccountService
from ledgerpost.domain.entities import TransactionStatus, TransactionType
from ledgerpost.domain.transaction import TransactionService
from ledgerpost.utils.account_resolver import resolve_bank_account
from ledgerpost.utils.amount_parser import parse_amount, split_signed_amount
from ledgerpost.utils.date_parser import parse_date

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def transaction_group():
    """Manage bank transactions."""
    pass


@transaction_group.command("add")
@click.option("--account", required=True, help="Bank account name or ID")
@click.option(
    "--date",
    "txn_date",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--amount",
    required=True,
    help="Amount. Without --type a negative amount is money out (debit).",
)
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="credit (money in) or debit (money out)")
@click.option("--description", default="", help="Transaction description")
@click.option("--reference", help="Reference number")
@click.option("--category", help="Category (ledger account name)")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    txn_date: str,
    amount: str,
    txn_type: str | None,
    description: str,
    reference: str | None,
    category: str | None,
):
    """Record a bank transaction.

    Examples:
        ledgerpost transaction add --account "Bank Account - Current" --date 2025-01-15 --amount -150 --description "Paper"
        ledgerpost transaction add --account 1 --date today --amount 500 --type credit --category "Sales"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        bank_account = resolve_bank_account(BankAccountService(db), account)
    except ValueError as e:
        handle_domain_error(ctx, e)

    try:
        parsed_date = parse_date(txn_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if txn_type is None:
        parsed_amount, direction = split_signed_amount(parsed_amount)
    else:
        direction = TransactionType(txn_type.lower())

    try:
        transaction_id = service.create_transaction(
            bank_account_id=bank_account.id,
            transaction_date=parsed_date,
            amount=parsed_amount,
            transaction_type=direction,
            description=description,
            reference_number=reference,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Account: {bank_account.account_name}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Amount: {parsed_amount:,.2f} ({direction.value})")
    if description:
        click.echo(f"  Description: {description}")
    if category:
        click.echo(f"  Category: {category}")


@transaction_group.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in TransactionStatus], case_sensitive=False),
    help="Show only transactions in this state",
)
@click.option("--account", help="Bank account name or ID")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--period", type=PERIOD_CHOICE, help="Named period, e.g. this-month")
@click.pass_context
def list_transactions(
    ctx,
    status: str | None,
    account: str | None,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
):
    """List bank transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    bank_account_id = None
    if account is not None:
        try:
            bank_account_id = resolve_bank_account(BankAccountService(db), account).id
        except ValueError as e:
            handle_domain_error(ctx, e)

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    transactions = service.list_transactions(
        status=status.lower() if status else None,
        bank_account_id=bank_account_id,
        start_date=start,
        end_date=end,
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(
        f"{'ID':>5}  {'Date':10}  {'Type':6}  {'Amount':>12}  {'Status':13}  {'Category':20}  Description"
    )
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:>5}  {txn.transaction_date.isoformat():10}  {txn.transaction_type.value:6}  "
            f"{txn.amount:>12,.2f}  {txn.status.value:13}  {(txn.category or '-'):20}  "
            f"{txn.description}"
        )
    click.echo(f"\n{len(transactions)} transaction(s)")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD or relative)")
@click.option("--amount", help="Positive amount")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="credit (money in) or debit (money out)")
@click.option("--description", help="Transaction description")
@click.option("--reference", help="Reference number")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    txn_date: str | None,
    amount: str | None,
    txn_type: str | None,
    description: str | None,
    reference: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Use 'categorize' to change
    the category.
    """
    service = TransactionService(ctx.obj["db"])

    parsed_date = None
    if txn_date is not None:
        try:
            parsed_date = parse_date(txn_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    parsed_amount = None
    if amount is not None:
        try:
            parsed_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            description=description,
            amount=parsed_amount,
            transaction_type=txn_type.lower() if txn_type else None,
            transaction_date=parsed_date,
            reference_number=reference,
        )
        click.echo(f"Updated transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("delete")
@click.argument("transaction_ids", nargs=-1, type=int, required=True)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_ids: tuple[int, ...], yes: bool) -> None:
    """Delete one or more unposted transactions.

    With several IDs nothing is deleted unless every one of them can be.

    Examples:
        ledgerpost transaction delete 4 --yes
        ledgerpost transaction delete 4 5 6
    """
    service = TransactionService(ctx.obj["db"])
    ids = list(dict.fromkeys(transaction_ids))

    if len(ids) == 1:
        try:
            txn = service.require_transaction(ids[0])
        except ValueError as e:
            handle_domain_error(ctx, e)

        if not yes and not click.confirm(
            f"Are you sure you want to delete transaction {txn.id} ({txn.description})?"
        ):
            click.echo("Deletion cancelled.")
            return

        try:
            service.delete_transaction(txn.id)
            click.echo(f"Deleted transaction {txn.id}")
        except ValueError as e:
            handle_domain_error(ctx, e)
        return

    if not yes and not click.confirm(f"Are you sure you want to delete {len(ids)} transactions?"):
        click.echo("Deletion cancelled.")
        return

    try:
        count = service.bulk_delete_transactions(ids)
        click.echo(f"Deleted {count} transactions")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
