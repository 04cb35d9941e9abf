"""Turn exceptions raised by CLI commands into readable output and exit codes."""

from __future__ import annotations

import sys
import traceback
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from arscript.cli.formatters.json_formatter import JsonFormatter
from arscript.config import get_logger
from arscript.exceptions import ArScriptError

logger = get_logger(__name__)
console = Console()


def explain_error(error: Exception) -> tuple[str, str | None]:
    """Pick the message and hint shown to the user for an exception.

    Returns:
        Tuple of (message, hint); the hint may be None
    """
    if isinstance(error, ArScriptError):
        return error.message, error.hint
    if isinstance(error, FileNotFoundError):
        return f"File not found: {error}", "Check that the file path is correct"
    if isinstance(error, UnicodeDecodeError):
        return f"Could not decode input: {error}", "Save the file as UTF-8"
    return f"Unexpected error: {error!s}", None


def _log_error(error: Exception, exit_code: int) -> None:
    fields: dict[str, Any] = {
        "error_type": type(error).__name__,
        "exit_code": exit_code,
    }
    if isinstance(error, ArScriptError):
        logger.error(
            "Command failed",
            message=error.message,
            hint=error.hint,
            details=error.details,
            **fields,
        )
    else:
        logger.error(
            "Command failed unexpectedly", error=str(error), exc_info=True, **fields
        )


def handle_cli_error(
    error: Exception,
    verbose: bool = False,
    exit_code: int = 1,
    json_output: bool = False,
) -> None:
    """Report a failed command and exit.

    Prints a ``✗`` line with the message and a ``→`` line with the hint,
    or a JSON error document when the command was asked for JSON.

    Args:
        error: The exception that was raised
        verbose: Show error details, or the traceback of unexpected errors
        exit_code: Exit code to use when exiting
        json_output: Print a JSON error document instead of styled text

    Raises:
        typer.Exit: Always, with ``exit_code``
    """
    _log_error(error, exit_code)

    if json_output:
        sys.stdout.write(JsonFormatter().format_error_response(error, exit_code) + "\n")
        raise typer.Exit(exit_code)

    message, hint = explain_error(error)
    console.print(f"[red]✗ {escape(message)}[/red]")
    if hint:
        console.print(f"[yellow]→ {escape(hint)}[/yellow]")

    if isinstance(error, ArScriptError):
        if verbose and error.details:
            console.print("\n[dim]Details:[/dim]")
            for key, value in error.details.items():
                console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")
    elif not isinstance(error, FileNotFoundError | UnicodeDecodeError):
        if verbose:
            console.print("\n[dim]Full traceback:[/dim]")
            console.print(traceback.format_exc(), markup=False)
        else:
            console.print("[dim]Run with --verbose for full error details[/dim]")

    raise typer.Exit(exit_code)
