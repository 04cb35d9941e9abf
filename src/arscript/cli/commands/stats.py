"""CLI command for arscript stats - scene, word and page counts."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from arscript.cli.formatters import JsonFormatter
from arscript.cli.utils.error_handler import handle_cli_error
from arscript.config import get_settings
from arscript.ingest import load_script_text
from arscript.parser import ScreenplayClassifier
from arscript.stats import count_elements, count_text

console = Console()


def stats_command(
    file: Annotated[
        Path,
        typer.Argument(help="Plain-text script to measure"),
    ],
    elements: Annotated[
        bool,
        typer.Option(
            "--elements",
            help="Count over classified elements instead of raw text",
        ),
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scene, word and estimated page counts for a script."""
    try:
        settings = get_settings()
        text = load_script_text(file)

        if elements:
            classifier = ScreenplayClassifier(
                max_cue_words=settings.character_cue_max_words
            )
            stats = count_elements(
                classifier.classify(text), words_per_page=settings.words_per_page
            )
        else:
            stats = count_text(text, words_per_page=settings.words_per_page)

        if json_output:
            JsonFormatter().emit(stats)
            return

        table = Table(title=f"Statistics: {file.name}", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")
        table.add_row("Scenes", str(stats.scenes))
        table.add_row("Words", str(stats.words))
        table.add_row("Pages", str(stats.pages))
        console.print(table)

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, json_output=json_output)
