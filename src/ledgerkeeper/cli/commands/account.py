"""Account management commands."""

import click
from ledgerkeeper.cli.account_resolution import resolve_account_or_exit
from ledgerkeeper.cli.error_handling import handle_domain_error
from ledgerkeeper.domain.account import AccountService
from ledgerkeeper.domain.entities import AccountType
from ledgerkeeper.domain.errors import DomainError
from ledgerkeeper.utils.amount_parser import parse_amount


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice([kind.value for kind in AccountType]),
    default=AccountType.BANK.value,
    show_default=True,
    help="Kind of account",
)
@click.option("--opening-balance", default="0", help="Balance when the account was opened (e.g., 1500.00)")
@click.pass_context
def create_account(ctx, name: str, account_type: str, opening_balance: str):
    """Create a new account.

    Examples:
        ledgerkeeper account create "Main Offering"
        ledgerkeeper account create "Petty Cash" --type cash --opening-balance 200
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        balance = parse_amount(opening_balance)
    except ValueError as e:
        click.echo(f"Error: Invalid opening balance: {e}", err=True)
        ctx.exit(1)

    try:
        account_id = service.create_account(
            name=name, opening_balance=balance, account_type=account_type
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created account '{name}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their opening and stored balances."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        balance = "not calculated" if acc.balance is None else f"{acc.balance:,.2f}"
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | {acc.account_type.value:12s} | "
            f"Opening: {acc.opening_balance:>12,.2f} | Balance: {balance}"
        )


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account name or ID. Accounts that still have
    transactions cannot be deleted.

    Examples:
        ledgerkeeper account delete "Petty Cash"
        ledgerkeeper account delete 1 --yes
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, service, account)
    account_obj = service.get_account(account_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}' (ID: {account_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted account '{account_obj.name}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
