"""Pure formatting functions for display output."""

from datetime import date, datetime

from monthcal.models.event import Event, EventColor

# Rich styles standing in for the palette's background classes
COLOR_STYLES = {
    EventColor.BLUE: "blue",
    EventColor.GREEN: "green",
    EventColor.RED: "red",
    EventColor.YELLOW: "yellow",
    EventColor.PURPLE: "purple",
    EventColor.PINK: "hot_pink",
    EventColor.INDIGO: "slate_blue1",
    EventColor.TEAL: "dark_cyan",
}


def color_style(color: EventColor) -> str:
    """Rich style for an event color."""
    return COLOR_STYLES.get(color, "default")


def format_time_range(event: Event) -> str:
    """Format an event's range as "HH:MM-HH:MM".

    Args:
        event: The event to format.

    Returns:
        Start and end times of day joined by a dash.
    """
    return f"{event.start_date.strftime('%H:%M')}-{event.end_date.strftime('%H:%M')}"


def format_month_title(value: date | datetime) -> str:
    """Format the month header (e.g., "February 2025")."""
    return value.strftime("%B %Y")


def format_day_label(day: date, today: date) -> str:
    """Format a date as a human-readable day label.

    Args:
        day: The date to format.
        today: Today's date for relative comparison.

    Returns:
        Formatted string like "TODAY (Thu Jan 16)" or "Mon Jan 19".
    """
    delta = (day - today).days

    if delta == 0:
        return f"TODAY ({day.strftime('%a %b %d')})"
    elif delta == 1:
        return f"Tomorrow ({day.strftime('%a %b %d')})"
    elif delta == -1:
        return f"Yesterday ({day.strftime('%a %b %d')})"
    else:
        return day.strftime("%a %b %d")


def truncate(text: str, width: int) -> str:
    """Shorten text to ``width`` characters with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: max(width - 1, 0)] + "…"
