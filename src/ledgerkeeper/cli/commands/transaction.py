"""Transaction commands."""

import click
from ledgerkeeper.cli.account_resolution import resolve_account_or_exit
from ledgerkeeper.cli.error_handling import handle_domain_error
from ledgerkeeper.database.base import PRIMARY_TABLE, LEGACY_TABLE
from ledgerkeeper.domain.account import AccountService
from ledgerkeeper.domain.entities import TransactionType
from ledgerkeeper.domain.errors import DomainError
from ledgerkeeper.domain.transaction import TransactionService
from ledgerkeeper.utils.amount_parser import parse_amount
from ledgerkeeper.utils.date_parser import parse_date

TABLE_CHOICES = {"primary": PRIMARY_TABLE, "legacy": LEGACY_TABLE}


@click.group()
def transaction_group():
    """Post and inspect transactions."""
    pass


@transaction_group.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--type",
    "transaction_type",
    required=True,
    type=click.Choice([kind.value for kind in TransactionType]),
    help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount (sign is taken from --type)")
@click.option("--date", "txn_date", default="today", show_default=True, help="Transaction date (YYYY-MM-DD, 'today', 'yesterday')")
@click.option("--description", help="Transaction description")
@click.option("--legacy", is_flag=True, help="Post to the legacy ledger table")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    transaction_type: str,
    amount: str,
    txn_date: str,
    description: str | None,
    legacy: bool,
):
    """Post a transaction to an account.

    Examples:
        ledgerkeeper transaction add --account "Main Offering" --type income --amount 250
        ledgerkeeper transaction add --account 1 --type expenditure --amount 80.50 --date 2024-03-01
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

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

    table = LEGACY_TABLE if legacy else PRIMARY_TABLE
    service = TransactionService(db)
    try:
        transaction_id = service.create_transaction(
            account_id=account_id,
            amount=parsed_amount,
            transaction_type=transaction_type,
            date=parsed_date,
            description=description,
            table=table,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    txn = service.get_transaction(transaction_id, table=table)
    click.echo(f"Created transaction {transaction_id}: {txn.transaction_type.value} {txn.amount:,.2f} on {txn.date}")


@transaction_group.command("list")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--source",
    type=click.Choice(list(TABLE_CHOICES)),
    default="primary",
    show_default=True,
    help="Ledger table to list",
)
@click.pass_context
def list_transactions(ctx, account: str, source: str):
    """List an account's transactions, newest first."""
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    transactions = TransactionService(db).list_transactions(account_id, table=TABLE_CHOICES[source])
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nTransactions ({source}):")
    click.echo("-" * 80)
    for txn in transactions:
        click.echo(
            f"ID: {txn.id:4d} | {txn.date} | {txn.transaction_type.value:12s} | "
            f"{txn.amount:>12,.2f} | {txn.description or ''}"
        )


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--legacy", is_flag=True, help="Delete from the legacy ledger table")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, legacy: bool):
    """Delete a transaction by ID."""
    db = ctx.obj["db"]
    table = LEGACY_TABLE if legacy else PRIMARY_TABLE
    try:
        TransactionService(db).delete_transaction(transaction_id, table=table)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
