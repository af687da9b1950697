"""Tests for the event synchronization engine."""

from datetime import datetime

import pytest

from monthcal.exceptions import (
    EventNotFoundError,
    ReloadError,
    StoreError,
    TransportError,
)
from monthcal.models.event import EventColor, EventPayload
from monthcal.storage.base import EventStore
from monthcal.storage.json_store import JSONEventStore
from monthcal.sync import EventSyncEngine


class RejectingStore(EventStore):
    """Store whose writes always fail."""

    def __init__(self, events=None):
        self.events = list(events or [])
        self.list_calls = 0

    def list_events(self):
        self.list_calls += 1
        return list(self.events)

    def get_event(self, event_id):
        raise EventNotFoundError(str(event_id))

    def create_event(self, payload):
        raise StoreError("disk full")

    def update_event(self, event_id, payload):
        raise StoreError("disk full")

    def delete_event(self, event_id):
        raise StoreError("disk full")


def test_load_all_empty(engine):
    assert engine.load_all() == []


def test_create_then_load_round_trip(engine):
    t0 = datetime(2025, 2, 14, 9, 0)
    t1 = datetime(2025, 2, 14, 10, 30)
    payload = EventPayload.from_wire(
        {
            "title": "A",
            "date": t0.isoformat(),
            "endDate": t1.isoformat(),
            "color": "bg-blue-500",
        }
    )

    created, refreshed = engine.create(payload)
    loaded = engine.load_all()

    assert refreshed == loaded
    assert loaded == [created]
    assert len(loaded) == 1
    event = loaded[0]
    assert event.title == "A"
    assert event.start_date == t0
    assert event.end_date == t1
    assert event.color == EventColor.BLUE


def test_create_returns_full_collection(engine, make_payload):
    engine.create(make_payload(title="Later", start=datetime(2025, 2, 20, 9, 0)))
    _, events = engine.create(
        make_payload(title="Sooner", start=datetime(2025, 2, 1, 9, 0))
    )

    assert [e.title for e in events] == ["Sooner", "Later"]


def test_update_existing(engine, make_payload):
    created, _ = engine.create(make_payload(title="Draft"))

    events = engine.update(created.id, make_payload(title="Final"))

    assert [e.title for e in events] == ["Final"]
    assert events[0].id == created.id


def test_update_missing_id_leaves_store_unchanged(engine, make_payload):
    engine.create(make_payload())
    before = engine.load_all()

    with pytest.raises(EventNotFoundError):
        engine.update(12345, make_payload(title="Ghost"))

    assert engine.load_all() == before


def test_delete_twice(engine, make_payload):
    engine.create(make_payload(title="Keep"))
    target, _ = engine.create(make_payload(title="Drop"))

    after_first = engine.delete(target.id)
    assert [e.title for e in after_first] == ["Keep"]

    with pytest.raises(EventNotFoundError):
        engine.delete(target.id)
    assert [e.title for e in engine.load_all()] == ["Keep"]


def test_rejected_create_does_not_reload(make_payload):
    store = RejectingStore()
    engine = EventSyncEngine(store)

    with pytest.raises(StoreError):
        engine.create(make_payload())

    assert store.list_calls == 0


def test_engine_keeps_no_collection(engine, make_payload):
    """Each call hands back a new list; mutating it does not affect the engine."""
    _, events = engine.create(make_payload())
    events.clear()

    assert len(engine.load_all()) == 1


class UnreadableStore(JSONEventStore):
    """Writes succeed; every read after the first write fails."""

    written = False

    def list_events(self):
        if self.written:
            raise TransportError("connection reset")
        return super().list_events()

    def create_event(self, payload):
        event = super().create_event(payload)
        self.written = True
        return event

    def update_event(self, event_id, payload):
        super().update_event(event_id, payload)
        self.written = True

    def delete_event(self, event_id):
        super().delete_event(event_id)
        self.written = True


def test_reload_failure_after_create(tmp_path, make_payload):
    store = UnreadableStore(tmp_path / "events.json")
    engine = EventSyncEngine(store)

    with pytest.raises(ReloadError) as exc_info:
        engine.create(make_payload(title="Persisted"))

    assert exc_info.value.event.title == "Persisted"
    assert exc_info.value.event.id == 1
    assert isinstance(exc_info.value.__cause__, TransportError)
    assert [e.title for e in JSONEventStore(store.path).list_events()] == ["Persisted"]


def test_reload_failure_after_update_and_delete(tmp_path, make_payload):
    store = UnreadableStore(tmp_path / "events.json")
    event = store.create_event(make_payload(title="Draft"))
    store.written = False
    engine = EventSyncEngine(store)

    with pytest.raises(ReloadError) as exc_info:
        engine.update(event.id, make_payload(title="Final"))
    assert exc_info.value.event.title == "Final"

    with pytest.raises(ReloadError):
        engine.delete(event.id)
    assert JSONEventStore(store.path).list_events() == []
