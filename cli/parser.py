"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.config import CalendarConfig
from monthcal.exceptions import ConfigurationError
from cli import setup_logging
from cli.commands import add, delete, edit, export, ls, month, serve
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Month calendar with events kept in a local or remote store.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Configure logging and the shared context before any command runs."""
    try:
        config = CalendarConfig.from_env()
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    setup_logging(verbose=verbose, quiet=quiet, config=config)
    cli_ctx = CLIContext(verbose=verbose, quiet=quiet, config=config)
    set_context(cli_ctx)
    ctx.call_on_close(cli_ctx.close)


app.command("month")(month)
app.command("ls")(ls)
app.command("add")(add)
app.command("edit")(edit)
app.command("delete")(delete)
app.command("export")(export)
app.command("serve")(serve)
