"""Shared CLI context with lazy-initialized dependencies."""

import logging

from monthcal.config import CalendarConfig
from monthcal.controller import CalendarController
from monthcal.storage import EventStore, create_store
from monthcal.sync import EventSyncEngine

logger = logging.getLogger(__name__)


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    The store is opened on first use and closed by ``close()``, which the
    Typer callback registers to run when the command finishes.

    Usage:
        ctx = CLIContext()
        ctx.controller.grid()
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: CalendarConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging
            quiet: If True, suppress non-error output
            config: Preloaded configuration (read from the environment if omitted)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: CalendarConfig | None = config
        self._store: EventStore | None = None
        self._engine: EventSyncEngine | None = None
        self._controller: CalendarController | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def store(self) -> EventStore:
        """Get the configured event store (lazy-loaded)."""
        if self._store is None:
            self._store = create_store(self.config)
        return self._store

    @property
    def engine(self) -> EventSyncEngine:
        """Get sync engine (lazy-loaded)."""
        if self._engine is None:
            self._engine = EventSyncEngine(self.store)
        return self._engine

    @property
    def controller(self) -> CalendarController:
        """Get calendar controller with events loaded (lazy-loaded)."""
        if self._controller is None:
            self._controller = CalendarController(
                self.engine,
                default_start_time=self.config.default_start_time,
                default_color=self.config.default_color,
            )
            self._controller.refresh()
        return self._controller

    def close(self) -> None:
        """Close the store if it was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
