"""Create an event."""

import logging

import typer
from typing_extensions import Annotated

from monthcal.exceptions import EventValidationError
from cli.display import console
from cli.utils import parse_day, require_controller

logger = logging.getLogger(__name__)


def add(
    title: Annotated[str, typer.Argument(help="Event title")],
    day: Annotated[
        str,
        typer.Option("--date", "-d", help="Day of the event (YYYY-MM-DD)"),
    ],
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="Start time (HH:MM)"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", "-e", help="End time (HH:MM)"),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="Color tag (blue, green, red, ...)"),
    ] = None,
) -> None:
    """Create an event on a day.

    The end time defaults to the start time. Setting a start later than the
    end moves the end along with it.

    Example:
        monthcal add "Dance rehearsal" --date 2025-02-14 --start 18:00 --end 20:00
    """
    controller = require_controller()
    editor = controller.open_new_event(parse_day(day))

    try:
        editor.set_title(title)
        if start:
            editor.set_start_time(start)
        if end:
            editor.set_end_time(end)
        if color:
            editor.set_color(color)
    except EventValidationError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not controller.save():
        logger.error(controller.notice)
        raise typer.Exit(1)

    if controller.notice:
        logger.warning(controller.notice)

    created = controller.saved_event
    console.print(f"\n[bold green]✓[/bold green] Event '{created.title}' created")
    console.print(f"  ID: {created.id}")
    console.print(
        f"  When: {created.start_date:%Y-%m-%d %H:%M} - {created.end_date:%H:%M}"
    )
