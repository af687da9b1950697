"""Export events to a file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from monthcal.exceptions import ExportError
from monthcal.output import setup_writer
from cli.display import console
from cli.utils import require_controller

logger = logging.getLogger(__name__)


def export(
    output: Annotated[
        Path | None,
        typer.Argument(help="Output file (default: calendar.<format>)"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Export format: ics or json"),
    ] = "ics",
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Calendar name written to the file"),
    ] = "Calendar",
) -> None:
    """Export all events as ICS or JSON."""
    controller = require_controller()

    try:
        writer = setup_writer(format)
        path = output or Path(f"calendar.{writer.get_extension()}")
        writer.write(controller.events, path, name=name)
    except ExportError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    count = len(controller.events)
    console.print(
        f"[bold green]✓[/bold green] Exported {count} event{'s' if count != 1 else ''} to {path}"
    )
