"""Rich-based agenda renderer for terminal display."""

from datetime import date

from rich.console import Console
from rich.text import Text

from monthcal.grid import CalendarDay
from monthcal.models.event import Event
from cli.display.console import console as shared_console
from cli.display.formatters import color_style, format_day_label, format_time_range


class RichEventRenderer:
    """Render calendar events grouped by day.

    Uses neutral hierarchy-based colors:
    - Headers: bold white
    - Date/day labels: cyan
    - Ids and times: dim
    - Event titles: the event's palette color
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_agenda(
        self,
        days: list[CalendarDay],
        title: str | None = None,
        today: date | None = None,
    ) -> None:
        """Render the in-month days that have events (agenda view)."""
        days = [d for d in days if d.in_month and d.events]
        count = sum(len(d.events) for d in days)
        if not count:
            self.render_empty()
            return

        self._print_header(title)
        today = today or date.today()
        for day in days:
            self.console.print(f"\n[cyan]{format_day_label(day.date, today)}[/cyan]")
            for event in day.events:
                self._render_agenda_event(event)
        self._print_footer(count)

    def render_empty(self, message: str | None = None) -> None:
        """Render an empty state message.

        Args:
            message: Optional custom message (defaults to "No events found").
        """
        msg = message or "No events found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    def _print_header(self, title: str | None) -> None:
        self.console.print()
        self.console.print("━" * 40)
        if title:
            self.console.print(f"[bold]  {title}[/bold]")
        self.console.print("━" * 40)

    def _print_footer(self, count: int) -> None:
        self.console.print()
        self.console.print("─" * 40)
        event_word = "event" if count == 1 else "events"
        self.console.print(f"[dim]{count} {event_word}[/dim]")
        self.console.print()

    def _render_agenda_event(self, event: Event) -> None:
        line = Text()
        line.append(f"  #{event.id:<5}", style="dim")
        line.append(f"{format_time_range(event):<13}", style="dim")
        line.append(event.title, style=color_style(event.color))
        if event.end_date.date() != event.start_date.date():
            line.append(f" → {event.end_date.strftime('%a %b %d')}", style="dim")
        self.console.print(line)
