"""CLI command for arscript classify - show the element sequence."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from arscript.cli.formatters import ElementFormatter, OutputFormat
from arscript.cli.utils.error_handler import handle_cli_error
from arscript.config import get_settings
from arscript.ingest import load_script_text
from arscript.parser import ScreenplayClassifier

console = Console()


def classify_command(
    file: Annotated[
        Path,
        typer.Argument(help="Plain-text script to classify"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Print how each line of a script is classified."""
    try:
        settings = get_settings()
        text = load_script_text(file)
        classifier = ScreenplayClassifier(max_cue_words=settings.character_cue_max_words)
        elements = classifier.classify(text)

        ElementFormatter(console).emit(
            elements, OutputFormat.JSON if json_output else OutputFormat.TABLE
        )

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, json_output=json_output)
