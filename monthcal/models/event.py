"""Event models with Pydantic v2 validation."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from monthcal.exceptions import EventValidationError


class EventColor(str, Enum):
    """Palette of color tags an event can carry."""

    BLUE = "bg-blue-500"
    GREEN = "bg-green-500"
    RED = "bg-red-500"
    YELLOW = "bg-yellow-500"
    PURPLE = "bg-purple-500"
    PINK = "bg-pink-500"
    INDIGO = "bg-indigo-500"
    TEAL = "bg-teal-500"

    @property
    def short_name(self) -> str:
        """Palette name without the class prefix/suffix (e.g. 'blue')."""
        return self.value.split("-")[1]

    @classmethod
    def parse(cls, value: "str | EventColor") -> "EventColor":
        """Accept either a full token ('bg-red-500') or a short name ('red')."""
        if isinstance(value, EventColor):
            return value
        token = value.strip().lower()
        for color in cls:
            if token in (color.value, color.short_name):
                return color
        allowed = ", ".join(c.short_name for c in cls)
        raise EventValidationError(f"Unknown color '{value}'. Choose one of: {allowed}")


DEFAULT_COLOR = EventColor.BLUE


def _validation_message(error: ValidationError) -> str:
    """Flatten a pydantic error into a single user-facing message."""
    messages = []
    for item in error.errors():
        if item["type"] == "missing":
            return "Missing required fields"
        msg = item["msg"]
        # pydantic prefixes custom ValueErrors
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        messages.append(msg)
    return "; ".join(messages)


class _TimeRange(BaseModel):
    """Shared title/range/color validation."""

    title: str
    start_date: datetime
    end_date: datetime
    color: EventColor = DEFAULT_COLOR

    @field_validator("title")
    @classmethod
    def require_title(cls, v: str) -> str:
        """Title must be non-empty once surrounding whitespace is removed."""
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def naive_utc(cls, v: datetime) -> datetime:
        """Offset-aware instants are stored as naive UTC so any two compare."""
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @model_validator(mode="after")
    def validate_range(self):
        """end_date must not be earlier than start_date."""
        if self.end_date < self.start_date:
            raise ValueError("End time cannot be earlier than start time")
        return self


class EventPayload(_TimeRange):
    """Write shape of an event: everything except the store-assigned id.

    On the wire the start is sent as ``date`` and the end as ``endDate``.
    """

    start_date: datetime = Field(alias="date")
    end_date: datetime = Field(alias="endDate")

    class Config:
        """Pydantic config."""

        populate_by_name = True

    @classmethod
    def from_wire(cls, data: Any) -> "EventPayload":
        """Parse a request body, raising EventValidationError on bad input."""
        if not isinstance(data, dict):
            raise EventValidationError("Request body must be a JSON object")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise EventValidationError(_validation_message(e)) from e

    def to_wire(self) -> dict:
        """Request body for POST/PUT."""
        return {
            "title": self.title,
            "date": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "color": self.color.value,
        }


class Event(_TimeRange):
    """A titled, colored time interval with a store-assigned id."""

    id: int

    @classmethod
    def from_payload(cls, event_id: int, payload: EventPayload) -> "Event":
        """Build a stored event from a validated payload."""
        return cls(
            id=event_id,
            title=payload.title,
            start_date=payload.start_date,
            end_date=payload.end_date,
            color=payload.color,
        )

    @classmethod
    def from_wire(cls, data: Any) -> "Event":
        """Parse a stored event from its snake_case wire form."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise EventValidationError(_validation_message(e)) from e

    def to_wire(self) -> dict:
        """Snake_case JSON form with ISO-8601 instants."""
        return {
            "id": self.id,
            "title": self.title,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "color": self.color.value,
        }

    def to_payload(self) -> EventPayload:
        """Editable copy of this event without its id."""
        return EventPayload(
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            color=self.color,
        )
