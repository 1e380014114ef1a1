"""CLI command modules."""

from .account import register
from .export import export
from .init import init
from .journal import add, delete, edit, list_entries
from .mood import report
from .support import support

__all__ = [
    "register",
    "add",
    "list_entries",
    "edit",
    "delete",
    "report",
    "export",
    "support",
    "init",
]
