"""Backing store interface for calendar events."""

from abc import ABC, abstractmethod

from monthcal.models.event import Event, EventPayload


class EventStore(ABC):
    """Persistence boundary for events.

    Implementations assign ids, keep ``end_date >= start_date`` and return
    events ordered by start instant. Stores are constructed explicitly,
    injected where needed and closed on shutdown; they can be used as
    context managers.
    """

    @abstractmethod
    def list_events(self) -> list[Event]:
        """All events, ordered by start_date ascending."""

    @abstractmethod
    def get_event(self, event_id: int) -> Event:
        """Single event by id.

        Raises:
            EventNotFoundError: No such event.
        """

    @abstractmethod
    def create_event(self, payload: EventPayload) -> Event:
        """Persist a new event and return it with its assigned id."""

    @abstractmethod
    def update_event(self, event_id: int, payload: EventPayload) -> None:
        """Replace the fields of an existing event.

        Raises:
            EventNotFoundError: No such event.
        """

    @abstractmethod
    def delete_event(self, event_id: int) -> None:
        """Remove an event.

        Raises:
            EventNotFoundError: No such event.
        """

    def close(self) -> None:
        """Release resources held by the store."""

    def __enter__(self) -> "EventStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def sort_events(events: list[Event]) -> list[Event]:
    """Order events by start instant (stable for equal starts)."""
    return sorted(events, key=lambda e: e.start_date)
