"""JSON file writer for event collections."""

import json
from pathlib import Path

from monthcal.exceptions import ExportError
from monthcal.models.event import Event


class JSONWriter:
    """Writer producing the same ``{data: [...]}`` document as the REST API."""

    def write(self, events: list[Event], path: Path, name: str = "Calendar") -> None:
        """Write events to JSON file."""
        document = {"name": name, "data": [e.to_wire() for e in events]}
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"
