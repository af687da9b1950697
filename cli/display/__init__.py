"""Display module for rendering calendar output.

- MonthRenderer: six-week month grid
- RichEventRenderer: agenda view grouped by day

It also provides the shared Rich console and pure formatting functions.
"""

from cli.display.console import console
from cli.display.event_renderer import RichEventRenderer
from cli.display.formatters import (
    color_style,
    format_day_label,
    format_month_title,
    format_time_range,
)
from cli.display.month_renderer import MonthRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "MonthRenderer",
    "RichEventRenderer",
    # Formatters
    "color_style",
    "format_day_label",
    "format_month_title",
    "format_time_range",
]
