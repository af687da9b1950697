"""Group events by the calendar day they start on."""

from collections import defaultdict
from datetime import date, datetime
from typing import Iterable

from monthcal.constants import DAY_KEY_FORMAT
from monthcal.models.event import Event


def day_key(value: date | datetime) -> str:
    """Bucket key (YYYY-MM-DD) for a date or instant."""
    return value.strftime(DAY_KEY_FORMAT)


def bucket_events(events: Iterable[Event]) -> dict[str, list[Event]]:
    """Map each start day to its events, ordered by start instant.

    Events spanning several days are bucketed under their start day only.
    Events starting at the same instant keep their original relative order.
    """
    by_day: dict[str, list[Event]] = defaultdict(list)
    for event in events:
        by_day[day_key(event.start_date)].append(event)

    # sorted() is stable, so simultaneous starts keep input order
    return {
        key: sorted(day_events, key=lambda e: e.start_date)
        for key, day_events in by_day.items()
    }


def events_on(buckets: dict[str, list[Event]], day: date | datetime) -> list[Event]:
    """Events starting on ``day`` (empty list if none)."""
    return buckets.get(day_key(day), [])
