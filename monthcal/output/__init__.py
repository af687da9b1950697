"""Output layer for event exports."""

from monthcal.exceptions import ExportError
from monthcal.output.base import CalendarWriter
from monthcal.output.ics_writer import ICSWriter
from monthcal.output.json_writer import JSONWriter


def setup_writer(format: str) -> CalendarWriter:
    """Get writer for format."""
    if format == "ics":
        return ICSWriter()
    elif format == "json":
        return JSONWriter()
    else:
        raise ExportError(f"Unsupported output format: {format}")


__all__ = [
    "CalendarWriter",
    "ICSWriter",
    "JSONWriter",
    "setup_writer",
]
