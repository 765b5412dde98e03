"""CLI command modules."""

from .app import BrowserApp
from .browse import browse_command, ls_command
from .pins import pins
from .volumes import volumes_command

__all__ = [
    "BrowserApp",
    "browse_command",
    "ls_command",
    "pins",
    "volumes_command",
]
