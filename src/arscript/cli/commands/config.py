"""Configuration display commands."""

from __future__ import annotations

from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from arscript.cli.formatters import JsonFormatter
from arscript.cli.utils.error_handler import handle_cli_error
from arscript.config import ArScriptSettings, get_settings

console = Console()

config_app = typer.Typer(
    name="config",
    help="Inspect arscript configuration",
    pretty_exceptions_enable=False,
)

_SECRET_FIELDS = frozenset({"llm_api_key"})


def settings_summary(settings: ArScriptSettings) -> dict[str, Any]:
    """Return effective settings with secrets masked."""
    summary = settings.model_dump(mode="json")
    for field_name in _SECRET_FIELDS:
        if summary.get(field_name):
            summary[field_name] = "********"
    return summary


@config_app.command(name="show")
def config_show(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Display current configuration settings.

    Shows the effective configuration after merging config files,
    environment variables and defaults.
    """
    try:
        summary = settings_summary(get_settings())

        if json_output:
            JsonFormatter().emit(summary)
            return

        table = Table(title="arscript Configuration", show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        for field_name, value in summary.items():
            table.add_row(field_name, "" if value is None else str(value))
        console.print(table)

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, json_output=json_output)
