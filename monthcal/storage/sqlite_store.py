"""Relational event store backed by SQLite."""

import logging
import sqlite3
import threading
from datetime import datetime
from pathlib import Path

from monthcal.exceptions import EventNotFoundError, StoreError
from monthcal.models.event import Event, EventPayload
from monthcal.storage.base import EventStore, sort_events

logger = logging.getLogger(__name__)

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS events (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        start_date TEXT NOT NULL,
        end_date TEXT NOT NULL,
        color TEXT NOT NULL
    )
"""


class SQLiteEventStore(EventStore):
    """Event store persisted to an ``events`` table.

    One connection is opened on construction and released by ``close()``.
    Ids come from AUTOINCREMENT and are never reused.
    """

    def __init__(self, database_path: Path | str):
        """
        Initialize the store and create the schema if needed.

        Args:
            database_path: SQLite file path, or ":memory:"
        """
        self.database_path = database_path
        self._lock = threading.Lock()
        try:
            if database_path != ":memory:":
                Path(database_path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(database_path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            with self._conn:
                self._conn.execute(_SCHEMA)
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"Failed to open database {database_path}: {e}") from e
        logger.info(f"Opened event database at {database_path}")

    def list_events(self) -> list[Event]:
        rows = self._query("SELECT * FROM events ORDER BY start_date ASC, id ASC")
        return sort_events([self._row_to_event(row) for row in rows])

    def get_event(self, event_id: int) -> Event:
        rows = self._query("SELECT * FROM events WHERE id = ?", (event_id,))
        if not rows:
            raise EventNotFoundError(f"Event {event_id} not found")
        return self._row_to_event(rows[0])

    def create_event(self, payload: EventPayload) -> Event:
        cursor = self._execute(
            "INSERT INTO events (title, start_date, end_date, color) VALUES (?, ?, ?, ?)",
            self._payload_params(payload),
        )
        return Event.from_payload(cursor.lastrowid, payload)

    def update_event(self, event_id: int, payload: EventPayload) -> None:
        cursor = self._execute(
            "UPDATE events SET title = ?, start_date = ?, end_date = ?, color = ? "
            "WHERE id = ?",
            (*self._payload_params(payload), event_id),
        )
        if cursor.rowcount == 0:
            raise EventNotFoundError(f"Event {event_id} not found")

    def delete_event(self, event_id: int) -> None:
        cursor = self._execute("DELETE FROM events WHERE id = ?", (event_id,))
        if cursor.rowcount == 0:
            raise EventNotFoundError(f"Event {event_id} not found")

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        logger.debug(f"Closed event database at {self.database_path}")

    @staticmethod
    def _payload_params(payload: EventPayload) -> tuple:
        return (
            payload.title,
            payload.start_date.isoformat(),
            payload.end_date.isoformat(),
            payload.color.value,
        )

    @staticmethod
    def _row_to_event(row: sqlite3.Row) -> Event:
        try:
            return Event(
                id=row["id"],
                title=row["title"],
                start_date=datetime.fromisoformat(row["start_date"]),
                end_date=datetime.fromisoformat(row["end_date"]),
                color=row["color"],
            )
        except ValueError as e:
            raise StoreError(f"Corrupt event row {row['id']}: {e}") from e

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            with self._lock:
                return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Database query failed: {e}") from e

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            with self._lock, self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StoreError(f"Database write failed: {e}") from e
