"""Main CLI entry point for arscript."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from arscript import __version__
from arscript.cli.commands import (
    classify_command,
    config_app,
    format_command,
    stats_command,
    watch_command,
)
from arscript.cli.formatters.json_formatter import JsonFormatter
from arscript.cli.utils.error_handler import handle_cli_error
from arscript.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="arscript",
    help="Format Arabic screenplays as right-to-left HTML",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="format")(format_command)
app.command(name="classify")(classify_command)
app.command(name="stats")(stats_command)
app.command(name="watch")(watch_command)

app.add_typer(config_app, name="config")


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show arscript version."""
    version_info = {
        "name": "arscript",
        "version": __version__,
        "description": "Arabic screenplay formatting",
    }

    if json_output:
        JsonFormatter().emit(version_info)
    else:
        console.print(f"arscript v{version_info['version']}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="ARSCRIPT_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    overrides: dict[str, Any] = {}
    if debug:
        overrides.update(debug=True, log_level="DEBUG")
    elif verbose:
        overrides["log_level"] = "INFO"

    if not config and not overrides:
        return

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except Exception as e:
        handle_cli_error(e, verbose=debug)
        return

    set_settings(settings)
    configure_logging(settings)

    if config:
        logger.debug("Loaded configuration", config_file=str(config))
    if debug:
        logger.debug("Debug mode enabled")
    elif verbose:
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
