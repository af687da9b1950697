"""Event editor state machine.

Holds the title, time range and color being edited for a new or existing
event. Changing the start time pulls the end time forward when the range
would otherwise be inverted; changing the end time never moves the start.
"""

import logging
from datetime import date, datetime, time
from typing import Callable

from monthcal.constants import TIME_INPUT_FORMAT
from monthcal.exceptions import EditorStateError, EventValidationError
from monthcal.models.event import DEFAULT_COLOR, Event, EventColor, EventPayload

logger = logging.getLogger(__name__)

TITLE_REQUIRED_MESSAGE = "Title is required"
INVERTED_RANGE_MESSAGE = "End time cannot be earlier than start time"


def parse_time(value: str) -> time:
    """Parse an HH:MM string as entered in a time input."""
    try:
        return datetime.strptime(value.strip(), TIME_INPUT_FORMAT).time()
    except ValueError:
        raise EventValidationError(f"Invalid time '{value}'. Use HH:MM.")


def _with_time(instant: datetime, value: time) -> datetime:
    """Replace the time of day, keeping the date and tzinfo."""
    return instant.replace(
        hour=value.hour, minute=value.minute, second=0, microsecond=0
    )


class TimeRangeEditor:
    """Editing session for a single event."""

    def __init__(
        self,
        title: str,
        start_date: datetime,
        end_date: datetime,
        color: EventColor = DEFAULT_COLOR,
        event_id: int | None = None,
    ):
        self.title = title
        self.start_date = start_date
        self.end_date = end_date
        self.color = color
        self.event_id = event_id
        self.is_open = True

    @classmethod
    def for_new_event(
        cls,
        day: date | datetime,
        default_time: time = time(0, 0),
        default_color: EventColor = DEFAULT_COLOR,
    ) -> "TimeRangeEditor":
        """Start a new event on ``day``; the end is seeded equal to the start."""
        if isinstance(day, datetime):
            day = day.date()
        start = datetime.combine(day, default_time.replace(second=0, microsecond=0))
        return cls(title="", start_date=start, end_date=start, color=default_color)

    @classmethod
    def for_event(cls, event: Event) -> "TimeRangeEditor":
        """Edit an existing event, seeded from its current values."""
        return cls(
            title=event.title,
            start_date=event.start_date,
            end_date=event.end_date,
            color=event.color,
            event_id=event.id,
        )

    @property
    def is_new(self) -> bool:
        """True when no existing event is selected."""
        return self.event_id is None

    def set_title(self, title: str) -> None:
        self.title = title

    def set_color(self, color: "EventColor | str") -> None:
        self.color = EventColor.parse(color)

    def set_start_time(self, value: "time | str") -> None:
        """Change the start time of day; close the gap if start passes end."""
        if isinstance(value, str):
            value = parse_time(value)
        self.start_date = _with_time(self.start_date, value)
        if self.start_date > self.end_date:
            logger.debug("Start moved past end, moving end to %s", self.start_date)
            self.end_date = self.start_date

    def set_end_time(self, value: "time | str") -> None:
        """Change the end time of day. The start is never adjusted."""
        if isinstance(value, str):
            value = parse_time(value)
        self.end_date = _with_time(self.end_date, value)

    def validate(self) -> EventPayload:
        """Check the current state and build the save payload.

        Raises:
            EventValidationError: Empty title or start after end.
        """
        if not self.title or not self.title.strip():
            raise EventValidationError(TITLE_REQUIRED_MESSAGE)
        if self.start_date > self.end_date:
            raise EventValidationError(INVERTED_RANGE_MESSAGE)
        return EventPayload(
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            color=self.color,
        )

    def submit(self, on_save: Callable[[EventPayload], object]) -> EventPayload:
        """Validate, hand the payload to ``on_save`` and close.

        The callback is never invoked when validation fails, and the editor
        stays open so the user can correct the input.
        """
        self._require_open()
        payload = self.validate()
        try:
            on_save(payload)
        finally:
            self.close()
        return payload

    def request_delete(self, on_delete: Callable[[int], object]) -> None:
        """Ask ``on_delete`` to remove the edited event, then close.

        The editor closes whatever the outcome of the callback.
        """
        self._require_open()
        if self.event_id is None:
            raise EditorStateError("Only an existing event can be deleted")
        try:
            on_delete(self.event_id)
        finally:
            self.close()

    def close(self) -> None:
        self.is_open = False

    def _require_open(self) -> None:
        if not self.is_open:
            raise EditorStateError("Editor is closed")
