"""Shared constants for the month calendar."""

# Visible grid is always six weeks of seven days
GRID_WEEKS = 6
GRID_DAYS = GRID_WEEKS * 7

# datetime.weekday() value of the first column (Sunday)
SUNDAY = 6

# Day bucket key format
DAY_KEY_FORMAT = "%Y-%m-%d"

# HTML time input format used by the editor
TIME_INPUT_FORMAT = "%H:%M"

# Collection resource path on the REST service
EVENTS_PATH = "/events"
