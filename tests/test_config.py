"""Tests for configuration."""

from datetime import time
from pathlib import Path

import pytest

from monthcal.config import CalendarConfig
from monthcal.exceptions import ConfigurationError
from monthcal.models.event import EventColor

ENV_VARS = [
    "STORE_BACKEND",
    "API_BASE_URL",
    "REQUEST_TIMEOUT",
    "DATA_DIR",
    "EVENTS_FILENAME",
    "DATABASE_FILENAME",
    "LOG_DIR",
    "LOG_FILENAME",
    "DEFAULT_COLOR",
    "DEFAULT_START_TIME",
    "SERVER_BACKEND",
    "SERVER_HOST",
    "SERVER_PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any .env file."""
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_calendar_config_defaults():
    """Test CalendarConfig default values."""
    config = CalendarConfig()
    assert config.store_backend == "json"
    assert config.api_base_url == "http://127.0.0.1:5000/api"
    assert config.request_timeout is None
    assert config.events_path == Path("data/events.json")
    assert config.database_path == Path("data/events.db")
    assert config.default_color == EventColor.BLUE
    assert config.default_start_time == time(0, 0)
    assert config.server_backend == "sqlite"
    assert config.server_port == 5000


def test_calendar_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("STORE_BACKEND", "REMOTE")
    monkeypatch.setenv("API_BASE_URL", "http://calendar.test/api/")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("DATA_DIR", "/srv/calendar")
    monkeypatch.setenv("EVENTS_FILENAME", "mine.json")
    monkeypatch.setenv("DATABASE_FILENAME", "mine.db")
    monkeypatch.setenv("LOG_DIR", "/var/log/monthcal")
    monkeypatch.setenv("LOG_FILENAME", "cal.log")
    monkeypatch.setenv("DEFAULT_COLOR", "teal")
    monkeypatch.setenv("DEFAULT_START_TIME", "09:30")
    monkeypatch.setenv("SERVER_BACKEND", "json")
    monkeypatch.setenv("SERVER_HOST", "0.0.0.0")
    monkeypatch.setenv("SERVER_PORT", "8080")

    config = CalendarConfig.from_env()

    assert config.store_backend == "remote"
    assert config.api_base_url == "http://calendar.test/api"
    assert config.request_timeout == 2.5
    assert config.events_path == Path("/srv/calendar/mine.json")
    assert config.database_path == Path("/srv/calendar/mine.db")
    assert config.log_dir == Path("/var/log/monthcal")
    assert config.log_filename == "cal.log"
    assert config.default_color == EventColor.TEAL
    assert config.default_start_time == time(9, 30)
    assert config.server_backend == "json"
    assert config.server_host == "0.0.0.0"
    assert config.server_port == 8080


def test_calendar_config_from_env_file(tmp_path):
    """Test loading config from .env file."""
    (tmp_path / ".env").write_text("EVENTS_FILENAME=from-dotenv.json\n")

    config = CalendarConfig.from_env()
    assert config.events_filename == "from-dotenv.json"


@pytest.mark.parametrize(
    "name,value,attribute,default",
    [
        ("REQUEST_TIMEOUT", "soon", "request_timeout", None),
        ("DEFAULT_START_TIME", "nine", "default_start_time", time(0, 0)),
        ("SERVER_PORT", "http", "server_port", 5000),
    ],
)
def test_unparsable_values_keep_default(monkeypatch, name, value, attribute, default):
    monkeypatch.setenv(name, value)
    config = CalendarConfig.from_env()
    assert getattr(config, attribute) == default


def test_invalid_default_color(monkeypatch):
    monkeypatch.setenv("DEFAULT_COLOR", "orange")
    with pytest.raises(ConfigurationError, match="DEFAULT_COLOR"):
        CalendarConfig.from_env()


def test_invalid_store_backend(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "postgres")
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        CalendarConfig.from_env()


def test_negative_timeout_rejected(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "-1")
    with pytest.raises(ConfigurationError):
        CalendarConfig.from_env()


def test_server_port_out_of_range(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "70000")
    with pytest.raises(ConfigurationError):
        CalendarConfig.from_env()
