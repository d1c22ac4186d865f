"""Ledger summary command."""

import click
from ledgerkeeper.cli.account_resolution import resolve_account_or_exit
from ledgerkeeper.cli.error_handling import handle_domain_error
from ledgerkeeper.domain.account import AccountService
from ledgerkeeper.domain.errors import DomainError
from ledgerkeeper.domain.reconciliation import ReconciliationService


@click.command("summary")
@click.option("--account", required=True, help="Account name or ID")
@click.pass_context
def summary(ctx, account: str):
    """Show inflow, outflow and transfer totals for an account.

    Examples:
        ledgerkeeper summary --account "Main Offering"
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, account_service, account)
    account_obj = account_service.get_account(account_id)

    service = ReconciliationService(db)
    try:
        totals = service.summarize(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    rows = [
        ("Opening balance", account_obj.opening_balance),
        ("Income", totals.total_inflow),
        ("  of which loans", totals.total_loan_inflow),
        ("Transfers in", totals.total_transfers_in),
        ("Expenditure", -totals.total_outflow),
        ("Transfers out", -totals.total_transfers_out),
    ]

    click.echo(f"\nSummary for {account_obj.name} ({totals.count} transactions)")
    click.echo("-" * 50)
    for label, value in rows:
        click.echo(f"{label:<30} {value:>19,.2f}")
    click.echo("-" * 50)
    click.echo(f"{'Calculated balance':<30} {account_obj.opening_balance + totals.net:>19,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
