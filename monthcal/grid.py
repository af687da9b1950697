"""Month grid computation.

The visible month is always rendered as six rows of seven days, starting on
the Sunday on or before the first of the month. Days that belong to the
neighbouring months are kept in the grid and flagged as out of month.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from monthcal.constants import GRID_DAYS, SUNDAY
from monthcal.models.event import Event


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def month_start(value: date | datetime) -> date:
    """First day of the month containing ``value``."""
    return _as_date(value).replace(day=1)


def month_end(value: date | datetime) -> date:
    """Last day of the month containing ``value``."""
    d = _as_date(value)
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def add_months(value: date | datetime, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    d = _as_date(value)
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def is_same_month(a: date | datetime, b: date | datetime) -> bool:
    """True if both values fall in the same calendar month."""
    a, b = _as_date(a), _as_date(b)
    return (a.year, a.month) == (b.year, b.month)


def week_start(value: date | datetime, first_weekday: int = SUNDAY) -> date:
    """Start of the week containing ``value``.

    ``first_weekday`` uses ``date.weekday()`` numbering (Monday=0, Sunday=6).
    """
    d = _as_date(value)
    offset = (d.weekday() - first_weekday) % 7
    return d - timedelta(days=offset)


def build_month_grid(
    reference: date | datetime, first_weekday: int = SUNDAY
) -> list[date]:
    """Return the 42 consecutive days displayed for the reference month.

    Args:
        reference: Any date inside the month to display.
        first_weekday: Weekday that begins each row (Sunday by default).

    Returns:
        Exactly 42 dates, from the week start on/before the first of the
        month, covering the whole month and padded with the following days.
    """
    start = week_start(month_start(reference), first_weekday)
    return [start + timedelta(days=offset) for offset in range(GRID_DAYS)]


@dataclass
class CalendarDay:
    """One cell of the month grid."""

    date: date
    in_month: bool
    is_today: bool
    events: list[Event] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Day bucket key (YYYY-MM-DD)."""
        return self.date.isoformat()


def build_calendar_days(
    reference: date | datetime,
    buckets: dict[str, list[Event]],
    today: date | None = None,
) -> list[CalendarDay]:
    """Combine the month grid with bucketed events for rendering."""
    today = today or date.today()
    return [
        CalendarDay(
            date=day,
            in_month=is_same_month(day, reference),
            is_today=day == today,
            events=list(buckets.get(day.isoformat(), [])),
        )
        for day in build_month_grid(reference)
    ]
