"""Delete an event."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.exceptions import EventNotFoundError
from cli.display import console, format_time_range
from cli.utils import require_controller

logger = logging.getLogger(__name__)


def delete(
    event_id: Annotated[int, typer.Argument(help="Event id (see 'ls')")],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete an event."""
    controller = require_controller()

    try:
        editor = controller.open_edit_event(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not force:
        event = controller.find_event(event_id)
        console.print(f"\nDelete event '{event.title}'")
        console.print(f"  {event.start_date:%Y-%m-%d} {format_time_range(event)}")
        console.print()
        if not typer.confirm("Continue?"):
            controller.close_editor()
            typer.echo("Delete cancelled.")
            return

    if controller.delete():
        if controller.notice:
            logger.warning(controller.notice)
        console.print(f"\n[bold green]✓[/bold green] Event {editor.event_id} deleted")
    else:
        # Editor is closed either way; the failure was already logged
        logger.warning(f"Event {event_id} may not have been deleted")
