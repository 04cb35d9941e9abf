"""arscript configuration: settings loading and structured logging."""

from __future__ import annotations

from typing import Any

from arscript.config.logging import configure_logging
from arscript.config.logging import get_logger as _structlog_logger
from arscript.config.settings import (
    ArScriptSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from arscript.config.settings import reset_settings as _forget_settings

__all__ = [
    "ArScriptSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

_state: dict[str, bool] = {"logging_configured": False}
_loggers: dict[str, Any] = {}


def ensure_logging() -> None:
    """Apply the logging configuration of the current settings once."""
    if not _state["logging_configured"]:
        configure_logging(get_settings())
        _state["logging_configured"] = True


def get_logger(name: str) -> Any:
    """Return the structlog logger for ``name``.

    Logging is configured from the global settings the first time any
    logger is requested; loggers are cached per name afterwards.
    """
    logger = _loggers.get(name)
    if logger is None:
        ensure_logging()
        logger = _loggers[name] = _structlog_logger(name)
    return logger


def reset_settings() -> None:
    """Forget cached settings and loggers so the next lookup starts fresh."""
    _forget_settings()
    _state["logging_configured"] = False
    _loggers.clear()
