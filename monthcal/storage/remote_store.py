"""Event store backed by the REST events API."""

import logging

import requests

from monthcal.constants import EVENTS_PATH
from monthcal.exceptions import (
    EventNotFoundError,
    EventValidationError,
    StoreError,
    TransportError,
)
from monthcal.models.event import Event, EventPayload
from monthcal.storage.base import EventStore, sort_events

logger = logging.getLogger(__name__)


class RemoteEventStore(EventStore):
    """Client for the ``/events`` collection resource.

    Status codes map onto the exception hierarchy: 400 is a validation
    error, 404 is not-found, anything else unsuccessful is a store error.
    Connection failures and unparsable responses are transport errors.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. "http://127.0.0.1:5000/api"
            timeout: Request timeout in seconds (None waits indefinitely)
            session: Optional requests session (one is created if omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, event_id: int | None = None) -> str:
        url = f"{self.base_url}{EVENTS_PATH}"
        if event_id is not None:
            url = f"{url}/{event_id}"
        return url

    def list_events(self) -> list[Event]:
        """All events the server returns, skipping rows that fail validation.

        The server may hold events written by other clients (e.g. colors
        outside the palette); those rows are logged and left out.
        """
        body = self._json(self._request("GET", self._url()))
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise TransportError("Malformed event list response: missing data array")

        events = []
        for item in data:
            try:
                events.append(Event.from_wire(item))
            except EventValidationError as e:
                item_id = item.get("id") if isinstance(item, dict) else None
                logger.warning(f"Skipping invalid event {item_id}: {e}")
        return sort_events(events)

    def get_event(self, event_id: int) -> Event:
        body = self._json(self._request("GET", self._url(event_id)))
        try:
            return Event.from_wire(body)
        except EventValidationError as e:
            raise TransportError(f"Malformed event response: {e}") from e

    def create_event(self, payload: EventPayload) -> Event:
        response = self._request("POST", self._url(), json=payload.to_wire())
        try:
            return Event.from_wire(self._json(response))
        except EventValidationError as e:
            raise TransportError(f"Malformed create response: {e}") from e

    def update_event(self, event_id: int, payload: EventPayload) -> None:
        self._request("PUT", self._url(event_id), json=payload.to_wire())

    def delete_event(self, event_id: int) -> None:
        self._request("DELETE", self._url(event_id))

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """Send a request and translate failures into calendar errors."""
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if response.ok:
            return response

        message = self._error_message(response)
        if response.status_code == 400:
            raise EventValidationError(message)
        if response.status_code == 404:
            raise EventNotFoundError(message)
        raise StoreError(f"{method} {url} returned {response.status_code}: {message}")

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the ``error`` field of an error body, if any."""
        try:
            body = response.json()
        except ValueError:
            return response.reason or f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.reason or f"HTTP {response.status_code}"

    @staticmethod
    def _json(response: requests.Response):
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Response from {response.url} is not JSON") from e
