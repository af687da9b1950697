"""Month calendar: grid computation, event editing and store synchronization."""

import logging

from flask import Flask, Response, jsonify, request

from monthcal.config import CalendarConfig
from monthcal.exceptions import (
    EventNotFoundError,
    EventValidationError,
    StoreError,
)
from monthcal.models.event import EventPayload
from monthcal.storage import EventStore, create_store

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(
    config: CalendarConfig | None = None, store: EventStore | None = None
) -> Flask:
    """Build the REST service for the events collection.

    Args:
        config: Configuration (loaded from the environment if omitted)
        store: Server-side store; built from ``config.server_backend`` if omitted.
            The caller owns it and is responsible for closing it.
    """
    if store is None:
        config = config or CalendarConfig.from_env()
        store = create_store(config, backend=config.server_backend)

    app = Flask(__name__)
    app.extensions["event_store"] = store

    @app.errorhandler(EventValidationError)
    def bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(EventNotFoundError)
    def not_found(e):
        return jsonify({"error": "Event not found"}), 404

    @app.errorhandler(StoreError)
    def store_failure(e):
        logger.error(f"Store error: {e}")
        return jsonify({"error": "Internal Server Error"}), 500

    @app.route("/api/events", methods=["GET"])
    def list_events():
        """All events ordered by start date."""
        events = store.list_events()
        return jsonify({"data": [e.to_wire() for e in events]})

    @app.route("/api/events", methods=["POST"])
    def create_event():
        payload = EventPayload.from_wire(request.get_json(silent=True))
        event = store.create_event(payload)
        logger.info(f"Created event {event.id}")
        return jsonify(event.to_wire()), 201

    @app.route("/api/events/<int:event_id>", methods=["GET"])
    def get_event(event_id: int):
        return jsonify(store.get_event(event_id).to_wire())

    @app.route("/api/events/<int:event_id>", methods=["PUT"])
    def update_event(event_id: int):
        payload = EventPayload.from_wire(request.get_json(silent=True))
        store.update_event(event_id, payload)
        logger.info(f"Updated event {event_id}")
        return jsonify({"message": "Event updated successfully"}), 200

    @app.route("/api/events/<int:event_id>", methods=["DELETE"])
    def delete_event(event_id: int):
        store.delete_event(event_id)
        logger.info(f"Deleted event {event_id}")
        return Response(status=204)

    return app


__all__ = ["create_app", "__version__"]
