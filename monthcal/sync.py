"""Event synchronization against a backing store.

Every mutation is followed by a full reload from the store, so the caller
always receives the authoritative collection and never keeps an optimistic
copy that could drift from it.
"""

import logging

from monthcal.exceptions import CalendarError, ReloadError
from monthcal.models.event import Event, EventPayload
from monthcal.storage.base import EventStore

logger = logging.getLogger(__name__)


class EventSyncEngine:
    """Single entry point for event mutations.

    The engine holds no event state of its own: each operation returns a
    freshly loaded collection for the caller to adopt. A store failure
    during the write propagates unchanged; a failure of the reload that
    follows a successful write is raised as ``ReloadError``.
    """

    def __init__(self, store: EventStore):
        self.store = store

    def load_all(self) -> list[Event]:
        """Fetch every event, ordered by start ascending."""
        events = self.store.list_events()
        logger.debug(f"Loaded {len(events)} events")
        return events

    def create(self, payload: EventPayload) -> tuple[Event, list[Event]]:
        """Persist a new event, then reload.

        Returns:
            The created event (with its assigned id) and the reloaded collection.
        """
        try:
            event = self.store.create_event(payload)
        except CalendarError as e:
            logger.error(f"Failed to create event '{payload.title}': {e}")
            raise
        logger.info(f"Created event {event.id} '{event.title}'")
        return event, self._reload(f"Created event {event.id}", event)

    def update(self, event_id: int, payload: EventPayload) -> list[Event]:
        """Persist changes to an existing event, then reload.

        Raises:
            EventNotFoundError: No event with ``event_id`` in the store.
        """
        try:
            self.store.update_event(event_id, payload)
        except CalendarError as e:
            logger.error(f"Failed to update event {event_id}: {e}")
            raise
        logger.info(f"Updated event {event_id}")
        return self._reload(
            f"Updated event {event_id}", Event.from_payload(event_id, payload)
        )

    def delete(self, event_id: int) -> list[Event]:
        """Remove an event, then reload.

        Raises:
            EventNotFoundError: No event with ``event_id`` in the store.
        """
        try:
            self.store.delete_event(event_id)
        except CalendarError as e:
            logger.error(f"Failed to delete event {event_id}: {e}")
            raise
        logger.info(f"Deleted event {event_id}")
        return self._reload(f"Deleted event {event_id}")

    def _reload(self, done: str, event: Event | None = None) -> list[Event]:
        try:
            return self.load_all()
        except CalendarError as e:
            logger.warning(f"{done}, but reloading events failed: {e}")
            raise ReloadError(
                f"{done}, but events could not be reloaded: {e}", event
            ) from e
