"""Shared pieces of the CLI output formatters."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """How a command presents its result."""

    TABLE = "table"
    JSON = "json"


class OutputFormatter(ABC, Generic[T]):
    """Turn a command result into text for the terminal or a pipe."""

    default_format: OutputFormat = OutputFormat.TABLE

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat | None = None) -> str:
        """Render ``data`` as a string in the requested format."""

    def emit(self, data: T, format_type: OutputFormat | None = None) -> None:
        """Write formatted ``data`` to standard output.

        JSON bypasses Rich entirely so it stays machine readable. Tables go
        through the console with markup off, since script text can contain
        square brackets.
        """
        format_type = format_type or self.default_format
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            sys.stdout.write(output + "\n")
            return
        self.console.print(output, end="", markup=False, highlight=False)
