"""Pydantic models for the month calendar."""

from monthcal.models.event import DEFAULT_COLOR, Event, EventColor, EventPayload

__all__ = [
    "DEFAULT_COLOR",
    "Event",
    "EventColor",
    "EventPayload",
]
