"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class EventValidationError(CalendarError):
    """Event payload failed validation (missing title, bad range, bad color)."""

    pass


class EventNotFoundError(CalendarError):
    """No event with the requested id exists in the store."""

    pass


class StoreError(CalendarError):
    """Underlying persistence failure."""

    pass


class TransportError(CalendarError):
    """Request never reached the store or the response was malformed."""

    pass


class EditorStateError(CalendarError):
    """Operation not available in the editor's current state."""

    pass


class ConfigurationError(CalendarError):
    """Invalid or unsupported configuration."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass


class ReloadError(CalendarError):
    """A mutation was persisted but the collection could not be reloaded."""

    def __init__(self, message: str, event=None):
        super().__init__(message)
        self.event = event
