"""Configuration for the month calendar."""

import os
from datetime import time
from pathlib import Path
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from monthcal.exceptions import ConfigurationError, EventValidationError
from monthcal.models.event import DEFAULT_COLOR, EventColor

StoreBackend = Literal["remote", "json", "sqlite"]
ServerBackend = Literal["json", "sqlite"]


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Backing store used by the client
    store_backend: StoreBackend = Field(default="json")

    # Remote store
    api_base_url: str = Field(default="http://127.0.0.1:5000/api")
    request_timeout: float | None = Field(default=None, gt=0)

    # Local stores
    data_dir: Path = Field(default=Path("data"))
    events_filename: str = Field(default="events.json")
    database_filename: str = Field(default="events.db")

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="monthcal.log")

    # Editor defaults
    default_color: EventColor = Field(default=DEFAULT_COLOR)
    default_start_time: time = Field(default=time(0, 0))

    # REST service
    server_backend: ServerBackend = Field(default="sqlite")
    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=5000, ge=1, le=65535)

    @property
    def events_path(self) -> Path:
        """Path of the JSON event file."""
        return self.data_dir / self.events_filename

    @property
    def database_path(self) -> Path:
        """Path of the SQLite database."""
        return self.data_dir / self.database_filename

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Backends
        if "STORE_BACKEND" in os.environ:
            config_dict["store_backend"] = os.environ["STORE_BACKEND"].lower()
        if "SERVER_BACKEND" in os.environ:
            config_dict["server_backend"] = os.environ["SERVER_BACKEND"].lower()

        # Remote store
        if "API_BASE_URL" in os.environ:
            config_dict["api_base_url"] = os.environ["API_BASE_URL"].rstrip("/")
        if "REQUEST_TIMEOUT" in os.environ:
            try:
                config_dict["request_timeout"] = float(os.environ["REQUEST_TIMEOUT"])
            except ValueError:
                pass  # Keep default if invalid

        # Storage paths
        if "DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["DATA_DIR"])
        if "EVENTS_FILENAME" in os.environ:
            config_dict["events_filename"] = os.environ["EVENTS_FILENAME"]
        if "DATABASE_FILENAME" in os.environ:
            config_dict["database_filename"] = os.environ["DATABASE_FILENAME"]
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Editor defaults
        if "DEFAULT_COLOR" in os.environ:
            try:
                config_dict["default_color"] = EventColor.parse(
                    os.environ["DEFAULT_COLOR"]
                )
            except EventValidationError as e:
                raise ConfigurationError(f"DEFAULT_COLOR: {e}") from e
        if "DEFAULT_START_TIME" in os.environ:
            try:
                config_dict["default_start_time"] = time.fromisoformat(
                    os.environ["DEFAULT_START_TIME"]
                )
            except ValueError:
                pass

        # Server
        if "SERVER_HOST" in os.environ:
            config_dict["server_host"] = os.environ["SERVER_HOST"]
        if "SERVER_PORT" in os.environ:
            try:
                config_dict["server_port"] = int(os.environ["SERVER_PORT"])
            except ValueError:
                pass

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
