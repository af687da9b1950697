from datetime import datetime

import pytest

from monthcal import create_app
from monthcal.models.event import EventColor, EventPayload
from monthcal.storage.json_store import JSONEventStore
from monthcal.storage.sqlite_store import SQLiteEventStore
from monthcal.sync import EventSyncEngine


@pytest.fixture
def make_payload():
    """Factory for event payloads with sensible defaults."""

    def _make(
        title="Rehearsal",
        start=datetime(2025, 2, 14, 9, 0),
        end=None,
        color=EventColor.BLUE,
    ):
        return EventPayload(
            title=title,
            start_date=start,
            end_date=end or start,
            color=color,
        )

    return _make


@pytest.fixture
def json_store(tmp_path):
    """JSON file store in a temporary directory."""
    return JSONEventStore(tmp_path / "events.json")


@pytest.fixture
def sqlite_store(tmp_path):
    """SQLite store in a temporary directory."""
    store = SQLiteEventStore(tmp_path / "events.db")
    yield store
    store.close()


@pytest.fixture(params=["json", "sqlite"])
def store(request, tmp_path):
    """Each local store implementation in turn."""
    if request.param == "json":
        yield JSONEventStore(tmp_path / "events.json")
    else:
        sqlite = SQLiteEventStore(tmp_path / "events.db")
        yield sqlite
        sqlite.close()


@pytest.fixture
def engine(store):
    return EventSyncEngine(store)


@pytest.fixture
def app(json_store):
    """Create and configure a Flask app for testing."""
    app = create_app(store=json_store)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
