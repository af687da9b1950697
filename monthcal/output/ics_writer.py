"""ICS file writer for event collections."""

from datetime import datetime, timezone
from pathlib import Path

from icalendar import Calendar, Event as ICalEvent

from monthcal.exceptions import ExportError
from monthcal.models.event import Event

PRODID = "-//monthcal//EN"


class ICSWriter:
    """Writer for ICS calendar files."""

    def build(self, events: list[Event], name: str = "Calendar") -> Calendar:
        """Build an iCalendar object with one VEVENT per event."""
        cal = Calendar()
        cal.add("prodid", PRODID)
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", name)

        stamp = datetime.now(timezone.utc)
        for event_model in events:
            event = ICalEvent()
            event.add("summary", event_model.title)
            event.add("uid", f"event-{event_model.id}@monthcal")
            event.add("dtstamp", stamp)
            event.add("dtstart", event_model.start_date)
            event.add("dtend", event_model.end_date)
            event.add("categories", [event_model.color.short_name])
            cal.add_component(event)
        return cal

    def write(self, events: list[Event], path: Path, name: str = "Calendar") -> None:
        """Write events to ICS file.

        Raises:
            ExportError: If the file cannot be written
        """
        ical_content = self.build(events, name).to_ical()
        try:
            with open(path, "wb") as f:
                f.write(ical_content)
        except OSError as e:
            # Remove partial file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink(missing_ok=True)
            raise ExportError(f"Failed to write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
