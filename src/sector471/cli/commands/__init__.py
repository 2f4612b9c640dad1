"""CLI command handlers."""

from .play import cmd_play
from .run import cmd_run
from .schedule import cmd_schedule
from .scripts import cmd_scripts

__all__ = [
    "cmd_play",
    "cmd_run",
    "cmd_schedule",
    "cmd_scripts",
]
