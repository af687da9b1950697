"""Render the month grid."""

import logging

import typer
from typing_extensions import Annotated

from cli.display import MonthRenderer
from cli.utils import parse_month, require_controller

logger = logging.getLogger(__name__)


def month(
    month_str: Annotated[
        str | None,
        typer.Option("--month", "-m", help="Month to show (YYYY-MM, default: current)"),
    ] = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset", "-o", help="Months to move from the selected month (e.g. -1, 2)"
        ),
    ] = 0,
) -> None:
    """Show a six-week month grid with events.

    Examples:
        monthcal month                    # Current month
        monthcal month --month 2025-02    # February 2025
        monthcal month --offset 1         # Next month
    """
    controller = require_controller()

    if month_str:
        controller.current_date = parse_month(month_str)
    for _ in range(abs(offset)):
        if offset > 0:
            controller.next_month()
        else:
            controller.previous_month()

    MonthRenderer().render_month(controller.grid(), controller.current_date)
