"""List events of a month grouped by day."""

import logging

import typer
from typing_extensions import Annotated

from cli.display import RichEventRenderer, format_month_title
from cli.utils import parse_month, require_controller

logger = logging.getLogger(__name__)


def ls(
    month_str: Annotated[
        str | None,
        typer.Option("--month", "-m", help="Month to list (YYYY-MM, default: current)"),
    ] = None,
) -> None:
    """List a month's events in agenda form, with their ids."""
    controller = require_controller()
    if month_str:
        controller.current_date = parse_month(month_str)

    RichEventRenderer().render_agenda(
        controller.grid(), title=format_month_title(controller.current_date)
    )
