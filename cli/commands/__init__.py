"""CLI commands package."""

from cli.commands.add import add
from cli.commands.delete import delete
from cli.commands.edit import edit
from cli.commands.export import export
from cli.commands.ls import ls
from cli.commands.month import month
from cli.commands.serve import serve

__all__ = [
    "add",
    "delete",
    "edit",
    "export",
    "ls",
    "month",
    "serve",
]
