"""Storage layer for calendar events."""

from monthcal.config import CalendarConfig
from monthcal.exceptions import ConfigurationError
from monthcal.storage.base import EventStore
from monthcal.storage.json_store import JSONEventStore
from monthcal.storage.remote_store import RemoteEventStore
from monthcal.storage.sqlite_store import SQLiteEventStore


def create_store(config: CalendarConfig, backend: str | None = None) -> EventStore:
    """Construct the store selected by ``backend`` (or ``config.store_backend``)."""
    backend = backend or config.store_backend
    if backend == "remote":
        return RemoteEventStore(config.api_base_url, timeout=config.request_timeout)
    elif backend == "json":
        return JSONEventStore(config.events_path)
    elif backend == "sqlite":
        return SQLiteEventStore(config.database_path)
    else:
        raise ConfigurationError(f"Unsupported store backend: {backend}")


__all__ = [
    "EventStore",
    "JSONEventStore",
    "RemoteEventStore",
    "SQLiteEventStore",
    "create_store",
]
