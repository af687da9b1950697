"""Shared Rich console for calendar output."""

from rich.console import Console

# Event titles are user text; keep Rich from highlighting numbers and URLs in them
console = Console(highlight=False)
