"""Run the events REST service."""

import logging

import typer
from typing_extensions import Annotated

from monthcal import create_app
from monthcal.storage import create_store
from cli.context import get_context

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Bind address (default: SERVER_HOST)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port (default: SERVER_PORT)"),
    ] = None,
    backend: Annotated[
        str | None,
        typer.Option("--backend", "-b", help="Server store: json or sqlite"),
    ] = None,
) -> None:
    """Serve /api/events over HTTP from a local store."""
    config = get_context().config
    backend = backend or config.server_backend
    if backend not in ("json", "sqlite"):
        logger.error(f"Unsupported server backend: {backend}")
        raise typer.Exit(1)

    with create_store(config, backend=backend) as store:
        app = create_app(config, store)
        logger.info(f"Serving events from {backend} store")
        app.run(host=host or config.server_host, port=port or config.server_port)
