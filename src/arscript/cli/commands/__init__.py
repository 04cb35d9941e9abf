"""arscript CLI commands."""

from .classify import classify_command
from .config import config_app
from .format import format_command
from .stats import stats_command
from .watch import watch_command

__all__ = [
    "classify_command",
    "config_app",
    "format_command",
    "stats_command",
    "watch_command",
]
