"""Month grid renderer."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from monthcal.grid import CalendarDay
from cli.display.console import console as shared_console
from cli.display.formatters import color_style, format_month_title, truncate

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class MonthRenderer:
    """Render the six-week month grid as a Rich table.

    - Header: month and year
    - Day numbers: dim outside the visible month, reversed for today
    - Events: "HH:MM title" in the event's color, in start order
    """

    def __init__(self, console: Console | None = None, cell_width: int = 14):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
            cell_width: Width of each day column.
        """
        self.console = console or shared_console
        self.cell_width = cell_width

    def render_month(self, days: list[CalendarDay], title_date) -> None:
        """Render 42 grid days as six weekly rows."""
        table = Table(
            title=format_month_title(title_date),
            show_header=True,
            header_style="bold",
            show_lines=True,
        )
        for header in WEEKDAY_HEADERS:
            table.add_column(header, width=self.cell_width, vertical="top")

        for row_start in range(0, len(days), 7):
            table.add_row(*(self._cell(day) for day in days[row_start : row_start + 7]))

        self.console.print(table)

    def _cell(self, day: CalendarDay) -> Text:
        cell = Text()
        if day.is_today:
            day_style = "bold reverse"
        elif not day.in_month:
            day_style = "dim"
        else:
            day_style = "bold"
        cell.append(str(day.date.day), style=day_style)

        for event in day.events:
            label = f"{event.start_date.strftime('%H:%M')} {event.title}"
            cell.append("\n")
            cell.append(
                truncate(label, self.cell_width),
                style=color_style(event.color),
            )
        return cell
