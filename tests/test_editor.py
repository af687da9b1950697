"""Tests for the event editor state machine."""

from datetime import date, datetime, time, timezone

import pytest

from monthcal.editor import (
    INVERTED_RANGE_MESSAGE,
    TITLE_REQUIRED_MESSAGE,
    TimeRangeEditor,
    parse_time,
)
from monthcal.exceptions import EditorStateError, EventValidationError
from monthcal.models.event import Event, EventColor


@pytest.fixture
def existing_event():
    return Event(
        id=42,
        title="Standup",
        start_date=datetime(2025, 2, 14, 9, 0),
        end_date=datetime(2025, 2, 14, 9, 30),
        color=EventColor.GREEN,
    )


def test_new_event_seeding():
    """New events start on the clicked day at the default time, end == start."""
    editor = TimeRangeEditor.for_new_event(date(2025, 2, 14), time(9, 0))

    assert editor.is_new
    assert editor.title == ""
    assert editor.start_date == datetime(2025, 2, 14, 9, 0)
    assert editor.end_date == editor.start_date
    assert editor.color == EventColor.BLUE


def test_new_event_default_time_is_midnight():
    editor = TimeRangeEditor.for_new_event(datetime(2025, 2, 14, 16, 45))
    assert editor.start_date == datetime(2025, 2, 14, 0, 0)


def test_edit_event_seeding(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)

    assert not editor.is_new
    assert editor.event_id == 42
    assert editor.title == "Standup"
    assert editor.start_date == existing_event.start_date
    assert editor.end_date == existing_event.end_date
    assert editor.color == EventColor.GREEN


def test_start_change_past_end_moves_end():
    editor = TimeRangeEditor.for_new_event(date(2025, 2, 14))
    editor.set_start_time("10:15")

    assert editor.start_date == datetime(2025, 2, 14, 10, 15)
    assert editor.end_date == editor.start_date


def test_start_change_before_end_keeps_end(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)
    editor.set_start_time(time(8, 0))

    assert editor.start_date == datetime(2025, 2, 14, 8, 0)
    assert editor.end_date == datetime(2025, 2, 14, 9, 30)


def test_start_change_keeps_date():
    """Only the time of day changes; the date component is untouched."""
    editor = TimeRangeEditor.for_new_event(date(2025, 12, 31))
    editor.set_start_time("23:59")
    assert editor.start_date.date() == date(2025, 12, 31)


def test_end_change_never_moves_start(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)
    editor.set_end_time("08:00")

    assert editor.start_date == datetime(2025, 2, 14, 9, 0)
    assert editor.end_date == datetime(2025, 2, 14, 8, 0)


def test_time_change_preserves_timezone():
    start = datetime(2025, 2, 14, 9, 0, tzinfo=timezone.utc)
    editor = TimeRangeEditor(title="UTC", start_date=start, end_date=start)
    editor.set_start_time("11:00")

    assert editor.start_date.tzinfo is timezone.utc
    assert editor.end_date == datetime(2025, 2, 14, 11, 0, tzinfo=timezone.utc)


def test_submit_calls_save_and_closes():
    editor = TimeRangeEditor.for_new_event(date(2025, 2, 14))
    editor.set_title("Dance")
    editor.set_start_time("18:00")
    editor.set_end_time("20:00")
    editor.set_color("teal")

    saved = []
    payload = editor.submit(saved.append)

    assert saved == [payload]
    assert payload.title == "Dance"
    assert payload.start_date == datetime(2025, 2, 14, 18, 0)
    assert payload.end_date == datetime(2025, 2, 14, 20, 0)
    assert payload.color == EventColor.TEAL
    assert not editor.is_open


@pytest.mark.parametrize("title", ["", "   "])
def test_submit_with_empty_title_never_saves(title):
    editor = TimeRangeEditor.for_new_event(date(2025, 2, 14))
    editor.set_title(title)
    saved = []

    with pytest.raises(EventValidationError) as exc_info:
        editor.submit(saved.append)

    assert str(exc_info.value) == TITLE_REQUIRED_MESSAGE
    assert saved == []
    assert editor.is_open


def test_submit_with_inverted_range_never_saves(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)
    editor.set_end_time("08:00")
    saved = []

    with pytest.raises(EventValidationError) as exc_info:
        editor.submit(saved.append)

    assert str(exc_info.value) == INVERTED_RANGE_MESSAGE
    assert saved == []
    assert editor.is_open
    # State is left as the user entered it
    assert editor.end_date == datetime(2025, 2, 14, 8, 0)


def test_submit_closes_even_if_save_fails(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)

    def failing_save(payload):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        editor.submit(failing_save)
    assert not editor.is_open


def test_submit_on_closed_editor(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)
    editor.close()
    with pytest.raises(EditorStateError):
        editor.submit(lambda payload: None)


def test_delete_only_for_existing_event():
    editor = TimeRangeEditor.for_new_event(date(2025, 2, 14))
    deleted = []

    with pytest.raises(EditorStateError):
        editor.request_delete(deleted.append)

    assert deleted == []
    assert editor.is_open


def test_delete_closes_regardless_of_outcome(existing_event):
    editor = TimeRangeEditor.for_event(existing_event)
    deleted = []

    def failing_delete(event_id):
        deleted.append(event_id)
        raise RuntimeError("store unavailable")

    with pytest.raises(RuntimeError):
        editor.request_delete(failing_delete)

    assert deleted == [42]
    assert not editor.is_open


def test_set_color_rejects_unknown_token():
    editor = TimeRangeEditor.for_new_event(date(2025, 2, 14))
    with pytest.raises(EventValidationError):
        editor.set_color("bg-orange-500")
    assert editor.color == EventColor.BLUE


def test_parse_time():
    assert parse_time("07:05") == time(7, 5)
    assert parse_time(" 23:59 ") == time(23, 59)
    with pytest.raises(EventValidationError):
        parse_time("25:00")
    with pytest.raises(EventValidationError):
        parse_time("noon")
