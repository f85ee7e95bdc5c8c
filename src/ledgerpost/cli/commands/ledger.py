"""Chart of accounts commands."""

import click
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.entities import AccountType
from ledgerpost.domain.ledger_account import LedgerAccountService
from ledgerpost.utils.amount_parser import parse_amount


@click.group()
def ledger_group():
    """Manage the chart of accounts."""
    pass


@ledger_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    required=True,
    type=click.Choice([t.value for t in AccountType], case_sensitive=False),
    help="Account type",
)
@click.option("--subtype", help="Optional account subtype (e.g. 'Current Assets')")
@click.option("--opening-balance", default="0", help="Opening balance (default 0)")
@click.pass_context
def create_account(ctx, name: str, account_type: str, subtype: str | None, opening_balance: str):
    """Create a chart of accounts entry.

    Bank accounts and transaction categories are posted to the ledger account
    with the same name.

    Examples:
        ledgerpost ledger create "Bank Account - Current" --type asset --opening-balance 1000
        ledgerpost ledger create "Office Supplies" --type expense
    """
    service = LedgerAccountService(ctx.obj["db"])

    try:
        balance = parse_amount(opening_balance)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        account_id = service.create_account(
            account_name=name,
            account_type=account_type.lower(),
            account_subtype=subtype,
            opening_balance=balance,
        )
        click.echo(f"Created ledger account '{name.strip()}' (ID: {account_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@ledger_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option("--subtype", help="New account subtype")
@click.option("--opening-balance", help="New opening balance; the running balance moves by the difference")
@click.option("--active/--inactive", "is_active", default=None, help="Activate or deactivate the account")
@click.pass_context
def update_account(
    ctx,
    account: str,
    name: str | None,
    subtype: str | None,
    opening_balance: str | None,
    is_active: bool | None,
):
    """Update a chart of accounts entry by name or ID.

    Examples:
        ledgerpost ledger update "Office Supplies" --name "Office Costs"
        ledgerpost ledger update 3 --inactive
    """
    service = LedgerAccountService(ctx.obj["db"])

    balance = None
    if opening_balance is not None:
        try:
            balance = parse_amount(opening_balance)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        updated = service.update_account(
            account,
            account_name=name,
            account_subtype=subtype,
            is_active=is_active,
            opening_balance=balance,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated ledger account '{updated.account_name}' (ID: {updated.id})")
    if not updated.is_active:
        click.echo("  Status: inactive")


@ledger_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List the chart of accounts with running balances."""
    service = LedgerAccountService(ctx.obj["db"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No ledger accounts found.")
        return

    click.echo("\nChart of accounts:")
    click.echo("-" * 80)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.account_name:30s} | {acc.account_type.value:9s} | "
            f"Balance: {acc.normal_balance:>12,.2f}"
        )


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
