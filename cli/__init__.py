"""Command line client for the month calendar."""

import logging
import sys

from monthcal.config import CalendarConfig
from monthcal.exceptions import CalendarError

logger = logging.getLogger(__name__)

# Chatty at DEBUG; the calendar's own DEBUG lines still reach the log file
NOISY_LOGGERS = ("urllib3",)


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: CalendarConfig | None = None
) -> None:
    """Send every record to the log file and warnings (by default) to stderr.

    Args:
        verbose: Show INFO records on stderr
        quiet: Show only ERROR records on stderr
        config: Supplies log_dir/log_filename (read from the environment if omitted)
    """
    if config is None:
        config = CalendarConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def main() -> None:
    """Entry point of the ``monthcal`` script."""
    from cli.parser import app

    try:
        app()
    except CalendarError as e:
        logger.error(f"Calendar error: {e}")
        sys.exit(1)


__all__ = ["main", "setup_logging"]
