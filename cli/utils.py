"""CLI utilities shared by commands."""

import logging
from datetime import date, datetime

import typer

from monthcal.controller import CalendarController
from cli.context import get_context

logger = logging.getLogger(__name__)


def parse_month(value: str) -> date:
    """Parse a YYYY-MM string as the first day of that month.

    Raises:
        typer.BadParameter: If the format is invalid.
    """
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid month: {value}. Use YYYY-MM.")


def parse_day(value: str) -> date:
    """Parse a YYYY-MM-DD string.

    Raises:
        typer.BadParameter: If the format is invalid.
    """
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date: {value}. Use YYYY-MM-DD.")


def require_controller() -> CalendarController:
    """Controller with events loaded, or exit if the store could not be read."""
    controller = get_context().controller
    if controller.notice:
        logger.error(controller.notice)
        raise typer.Exit(1)
    return controller
