"""Main CLI entry point."""

import click
from ledgerkeeper.database.factories import create_database
from ledgerkeeper.logging_config import setup_logging, teardown_logging

# Import and register all commands at module level
from ledgerkeeper.cli.commands import (
    account,
    transaction,
    recalculate,
    summary,
    serve,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides LEDGERKEEPER_DB_PATH environment variable)",
    envvar="LEDGERKEEPER_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL, takes precedence over --db-path",
    envvar="LEDGERKEEPER_DATABASE_URL",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
    envvar="LEDGERKEEPER_LOG_LEVEL",
    help="Console log level",
)
@click.pass_context
def cli(ctx, db_path: str | None, database_url: str | None, log_level: str):
    """ledgerkeeper - Account balance reconciliation.

    Keeps each account's stored balance consistent with its opening
    balance and posted transactions.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)
    ctx.call_on_close(teardown_logging)

    ctx.obj["db_path"] = db_path
    ctx.obj["database_url"] = database_url

    # Initialize database connection only when actually running a command
    # (not when showing help). The server opens its own connections.
    if ctx.invoked_subcommand not in (None, "serve"):
        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
transaction.register_commands(cli)
recalculate.register_commands(cli)
summary.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
