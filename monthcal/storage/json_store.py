"""Local persistent event store backed by a JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from monthcal.exceptions import EventNotFoundError, EventValidationError, StoreError
from monthcal.models.event import Event, EventPayload
from monthcal.storage.base import EventStore, sort_events

logger = logging.getLogger(__name__)


class JSONEventStore(EventStore):
    """Event store persisted to a single JSON document.

    File layout::

        {"next_id": 4, "events": [{"id": 1, "title": ..., ...}, ...]}

    Ids come from the persisted ``next_id`` counter, so they are never
    reused, even after the newest event is deleted.
    """

    def __init__(self, path: Path):
        """
        Initialize store.

        Args:
            path: JSON file to read and write (created on first write)
        """
        self.path = Path(path)

    def list_events(self) -> list[Event]:
        _, events = self._load()
        return sort_events(events)

    def get_event(self, event_id: int) -> Event:
        _, events = self._load()
        for event in events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(f"Event {event_id} not found")

    def create_event(self, payload: EventPayload) -> Event:
        next_id, events = self._load()
        event = Event.from_payload(next_id, payload)
        events.append(event)
        self._save(next_id + 1, events)
        logger.debug(f"Stored event {event.id} in {self.path}")
        return event

    def update_event(self, event_id: int, payload: EventPayload) -> None:
        next_id, events = self._load()
        for index, event in enumerate(events):
            if event.id == event_id:
                events[index] = Event.from_payload(event_id, payload)
                self._save(next_id, events)
                return
        raise EventNotFoundError(f"Event {event_id} not found")

    def delete_event(self, event_id: int) -> None:
        next_id, events = self._load()
        remaining = [e for e in events if e.id != event_id]
        if len(remaining) == len(events):
            raise EventNotFoundError(f"Event {event_id} not found")
        self._save(next_id, remaining)

    def _load(self) -> tuple[int, list[Event]]:
        """Read the document; a missing file is an empty store."""
        if not self.path.exists():
            return 1, []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e

        try:
            events = [Event.from_wire(item) for item in data.get("events", [])]
            stored_next = int(data.get("next_id", 1))
        except (AttributeError, TypeError, ValueError, EventValidationError) as e:
            raise StoreError(f"Corrupt event data in {self.path}: {e}") from e

        highest = max((e.id for e in events), default=0)
        next_id = max(stored_next, highest + 1)
        return next_id, events

    def _save(self, next_id: int, events: list[Event]) -> None:
        """Write the document atomically (temp file + rename)."""
        document = {
            "next_id": next_id,
            "events": [e.to_wire() for e in sort_events(events)],
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e
