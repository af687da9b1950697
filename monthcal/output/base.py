"""Base classes for event writers."""

from pathlib import Path
from typing import Protocol

from monthcal.models.event import Event


class CalendarWriter(Protocol):
    """Protocol for event collection writers."""

    def write(self, events: list[Event], path: Path, name: str = "Calendar") -> None:
        """Write events to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...
