"""Top-level calendar controller.

Owns the event collection, the visible month and the open editor. The
save and delete handlers are the boundary where every calendar error is
caught, logged and turned into a user-visible notice.
"""

import logging
from datetime import date, datetime, time

from monthcal.buckets import bucket_events
from monthcal.exceptions import (
    CalendarError,
    EditorStateError,
    EventNotFoundError,
    EventValidationError,
    ReloadError,
)
from monthcal.grid import CalendarDay, add_months, build_calendar_days
from monthcal.editor import TimeRangeEditor
from monthcal.models.event import DEFAULT_COLOR, Event, EventColor
from monthcal.sync import EventSyncEngine

logger = logging.getLogger(__name__)


class CalendarController:
    """State holder for the month view."""

    def __init__(
        self,
        engine: EventSyncEngine,
        current_date: date | None = None,
        default_start_time: time = time(0, 0),
        default_color: EventColor = DEFAULT_COLOR,
    ):
        self.engine = engine
        self.current_date = current_date or date.today()
        self.default_start_time = default_start_time
        self.default_color = default_color
        self.editor: TimeRangeEditor | None = None
        self.notice: str | None = None
        # Event written by the last successful save()
        self.saved_event: Event | None = None
        self._events: list[Event] = []
        self._buckets: dict[str, list[Event]] = {}

    # ─────────────────────────────────────────────────────────────────────
    # Event collection
    # ─────────────────────────────────────────────────────────────────────

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def buckets(self) -> dict[str, list[Event]]:
        """Events by start day, rebuilt whenever the collection is replaced."""
        return self._buckets

    def _replace_events(self, events: list[Event]) -> None:
        self._events = list(events)
        self._buckets = bucket_events(self._events)

    def refresh(self) -> bool:
        """Reload the collection from the store.

        Returns:
            True on success. On failure the current collection is kept.
        """
        try:
            self._replace_events(self.engine.load_all())
        except CalendarError as e:
            logger.error(f"Error fetching events: {e}")
            self.notice = "Could not load events"
            return False
        return True

    def find_event(self, event_id: int) -> Event | None:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    # ─────────────────────────────────────────────────────────────────────
    # Month navigation
    # ─────────────────────────────────────────────────────────────────────

    def previous_month(self) -> None:
        self.current_date = add_months(self.current_date, -1)

    def next_month(self) -> None:
        self.current_date = add_months(self.current_date, 1)

    def go_to_today(self) -> None:
        self.current_date = date.today()

    def grid(self, today: date | None = None) -> list[CalendarDay]:
        """The 42 visible days with their events."""
        return build_calendar_days(self.current_date, self._buckets, today)

    # ─────────────────────────────────────────────────────────────────────
    # Editor
    # ─────────────────────────────────────────────────────────────────────

    def open_new_event(self, day: date | datetime) -> TimeRangeEditor:
        """Open the editor for a new event on ``day``."""
        self.editor = TimeRangeEditor.for_new_event(
            day, self.default_start_time, self.default_color
        )
        return self.editor

    def open_edit_event(self, event_id: int) -> TimeRangeEditor:
        """Open the editor on an event of the current collection."""
        event = self.find_event(event_id)
        if event is None:
            raise EventNotFoundError(f"Event {event_id} not found")
        self.editor = TimeRangeEditor.for_event(event)
        return self.editor

    def close_editor(self) -> None:
        if self.editor is not None:
            self.editor.close()
        self.editor = None

    def _require_editor(self) -> TimeRangeEditor:
        if self.editor is None or not self.editor.is_open:
            raise EditorStateError("No event is being edited")
        return self.editor

    def save(self) -> bool:
        """Submit the open editor.

        Validation failures keep the editor open with a notice. Once the
        payload reaches the store the editor is closed whatever happens.
        A write that succeeds but cannot be reloaded still counts as saved.

        Returns:
            True if the event was persisted; ``saved_event`` then holds it.
        """
        self.saved_event = None
        try:
            editor = self._require_editor()
        except EditorStateError as e:
            self.notice = str(e)
            return False

        def persist(payload):
            if editor.is_new:
                event, events = self.engine.create(payload)
            else:
                events = self.engine.update(editor.event_id, payload)
                event = Event.from_payload(editor.event_id, payload)
            self._replace_events(events)
            self.saved_event = event

        try:
            editor.submit(persist)
        except ReloadError as e:
            self.saved_event = e.event
            self.notice = "Event saved, but events could not be reloaded"
            self.editor = None
            return True
        except EventValidationError as e:
            if editor.is_open:
                # Rejected by the editor itself; let the user correct it
                self.notice = str(e)
                return False
            logger.error(f"Error saving event: {e}")
            self.notice = f"Event was rejected: {e}"
            self.editor = None
            return False
        except EventNotFoundError as e:
            logger.error(f"Error saving event: {e}")
            self.notice = "Event no longer exists"
            self.editor = None
            return False
        except CalendarError as e:
            logger.error(f"Error saving event: {e}")
            self.notice = "Event was not saved"
            self.editor = None
            return False

        self.notice = None
        self.editor = None
        return True

    def delete(self) -> bool:
        """Delete the event being edited.

        The editor always closes, even when the store reports a failure;
        the failure is logged and otherwise absorbed.

        Returns:
            True if the event was removed from the store.
        """
        try:
            editor = self._require_editor()
        except EditorStateError as e:
            self.notice = str(e)
            return False

        def remove(event_id):
            self._replace_events(self.engine.delete(event_id))

        try:
            editor.request_delete(remove)
        except ReloadError:
            self.notice = "Event deleted, but events could not be reloaded"
            self.editor = None
            return True
        except EditorStateError as e:
            # New events cannot be deleted; editor stays as it was
            self.notice = str(e)
            return False
        except CalendarError as e:
            logger.error(f"Error deleting event: {e}")
            self.editor = None
            return False

        self.notice = None
        self.editor = None
        return True
