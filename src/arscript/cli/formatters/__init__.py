"""Output formatters for arscript CLI."""

from __future__ import annotations

from arscript.cli.formatters.base import OutputFormat, OutputFormatter
from arscript.cli.formatters.element_formatter import ElementFormatter
from arscript.cli.formatters.json_formatter import JsonFormatter

__all__ = [
    "ElementFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
]
