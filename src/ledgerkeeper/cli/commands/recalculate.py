"""Balance recalculation command."""

import click
from ledgerkeeper.cli.account_resolution import resolve_account_or_exit
from ledgerkeeper.cli.error_handling import handle_domain_error
from ledgerkeeper.config import load_settings
from ledgerkeeper.domain.account import AccountService
from ledgerkeeper.domain.balance_writer import BalanceWriter
from ledgerkeeper.domain.entities import ReconciliationResult
from ledgerkeeper.domain.errors import AccountListingError
from ledgerkeeper.domain.reconciliation import ReconciliationService


def _echo_result(result: ReconciliationResult) -> None:
    if result.success:
        click.echo(f"  OK    {result.account_name} (ID: {result.account_id}): {result.new_balance:,.2f}")
    else:
        click.echo(f"  FAIL  {result.account_name} (ID: {result.account_id}): {result.error}")


@click.command("recalculate")
@click.option("--account", help="Only recalculate this account (name or ID)")
@click.option(
    "--retries",
    type=click.IntRange(min=0),
    default=None,
    help="Retries for failed balance writes (default: LEDGERKEEPER_WRITE_RETRIES or 0)",
)
@click.pass_context
def recalculate(ctx, account: str | None, retries: int | None):
    """Recalculate stored balances from transactions.

    Every account is processed independently: a failure on one account is
    reported and the rest are still recalculated. Exits with status 1 if
    any account failed.

    Examples:
        ledgerkeeper recalculate
        ledgerkeeper recalculate --account "Main Offering"
    """
    db = ctx.obj["db"]
    if retries is None:
        retries = load_settings().write_retries
    service = ReconciliationService(db, writer=BalanceWriter(db, retries=retries))

    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), account)
        result = service.recalculate_account(account_id)
        _echo_result(result)
        if not result.success:
            ctx.exit(1)
        return

    try:
        report = service.recalculate_all()
    except AccountListingError as e:
        handle_domain_error(ctx, e)
        return

    for result in report.results:
        _echo_result(result)
    click.echo(report.message)
    if report.failed:
        ctx.exit(1)


def register_commands(cli):
    """Register recalculate command with main CLI."""
    cli.add_command(recalculate)
