"""HTTP server command."""

import click
from dataclasses import replace

from ledgerkeeper.config import load_settings


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on")
@click.pass_context
def serve(ctx, host: str, port: int):
    """Run the HTTP API.

    Examples:
        ledgerkeeper serve --port 8080
    """
    import uvicorn
    from ledgerkeeper.web.app import create_app

    settings = replace(
        load_settings(),
        database_url=ctx.obj.get("database_url"),
        db_path=ctx.obj.get("db_path"),
    )
    click.echo(f"Serving ledgerkeeper API on http://{host}:{port}")
    uvicorn.run(create_app(settings=settings), host=host, port=port)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
