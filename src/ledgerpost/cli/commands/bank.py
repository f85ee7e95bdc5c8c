"""Bank account commands."""

import click
from ledgerpost.cli.error_handling import handle_domain_error
from ledgerpost.domain.bank_account import BankAccountService
from ledgerpost.utils.amount_parser import parse_amount


@click.group()
def bank_group():
    """Manage bank accounts."""
    pass


@bank_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--bank", help="Bank name (defaults to account name if not provided)")
@click.option("--number", "account_number", help="Account number")
@click.option("--opening-balance", default="0", help="Opening balance (default 0)")
@click.pass_context
def create_account(
    ctx, name: str, bank: str | None, account_number: str | None, opening_balance: str
):
    """Create a bank account.

    Transactions of this account can only be posted once a ledger account
    with the same name exists.

    Examples:
        ledgerpost bank create "Bank Account - Current" --bank "First Bank"
    """
    service = BankAccountService(ctx.obj["db"])
    bank_name = bank if bank is not None else name

    try:
        balance = parse_amount(opening_balance)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        account_id = service.create_account(
            account_name=name,
            bank_name=bank_name,
            account_number=account_number,
            opening_balance=balance,
        )
        click.echo(f"Created bank account '{name.strip()}' (ID: {account_id})")
        if bank is None:
            click.echo(f"Bank name set to '{bank_name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@bank_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List bank accounts."""
    service = BankAccountService(ctx.obj["db"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No bank accounts found.")
        return

    click.echo("\nBank accounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.account_name:30s} | Bank: {acc.bank_name}")


def register_commands(cli):
    """Register bank account commands with main CLI."""
    cli.add_command(bank_group, name="bank")
