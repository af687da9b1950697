"""Edit an existing event."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.exceptions import EventNotFoundError, EventValidationError
from cli.display import console
from cli.utils import require_controller

logger = logging.getLogger(__name__)


def edit(
    event_id: Annotated[int, typer.Argument(help="Event id (see 'ls')")],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="New title"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="New start time (HH:MM)"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", "-e", help="New end time (HH:MM)"),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="New color tag"),
    ] = None,
) -> None:
    """Change the title, times or color of an event.

    Start is applied before end, so "--start 10:00 --end 11:00" on a
    09:00-09:30 event ends up as 10:00-11:00.
    """
    controller = require_controller()

    try:
        editor = controller.open_edit_event(event_id)
        if title is not None:
            editor.set_title(title)
        if start:
            editor.set_start_time(start)
        if end:
            editor.set_end_time(end)
        if color:
            editor.set_color(color)
    except (EventNotFoundError, EventValidationError) as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not controller.save():
        logger.error(controller.notice)
        raise typer.Exit(1)

    if controller.notice:
        logger.warning(controller.notice)

    console.print(f"\n[bold green]✓[/bold green] Event {event_id} updated")
