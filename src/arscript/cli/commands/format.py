"""CLI command for arscript format - render a script as HTML."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from arscript.cli.utils.error_handler import handle_cli_error
from arscript.cli.utils.paths import check_output_path
from arscript.config import ArScriptSettings, get_logger, get_settings
from arscript.ingest import load_script_text
from arscript.parser import ScreenplayClassifier, ScreenplayElement
from arscript.remote import RemoteClassifier
from arscript.render import HtmlRenderer

logger = get_logger(__name__)
console = Console()


async def classify_remotely(
    text: str, settings: ArScriptSettings
) -> tuple[ScreenplayElement, ...]:
    """Classify text with the configured remote service."""
    async with RemoteClassifier.from_settings(settings) as classifier:
        return await classifier.classify(text)


def format_command(
    file: Annotated[
        Path,
        typer.Argument(help="Plain-text script to format"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write HTML to this file instead of standard output",
        ),
    ] = None,
    fragment: Annotated[
        bool,
        typer.Option(
            "--fragment",
            help="Emit only the screenplay block, without page and stylesheet",
        ),
    ] = False,
    remote: Annotated[
        bool,
        typer.Option(
            "--remote",
            help="Classify with the configured remote model instead of locally",
        ),
    ] = False,
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Page title (default: file name)"),
    ] = None,
) -> None:
    """Format an Arabic screenplay as right-to-left HTML.

    Each line of the script is classified as basmala, scene heading, action,
    character, parenthetical, dialogue or transition, then rendered with
    its own styling.
    """
    try:
        settings = get_settings()
        if output:
            check_output_path(file, output)
        text = load_script_text(file)

        if remote:
            elements = asyncio.run(classify_remotely(text, settings))
        else:
            classifier = ScreenplayClassifier(
                max_cue_words=settings.character_cue_max_words
            )
            elements = classifier.classify(text)

        renderer = HtmlRenderer()
        if fragment:
            markup = renderer.render(elements)
        else:
            markup = renderer.render_document(elements, title=title or file.stem)

        if output:
            output.write_text(markup + "\n", encoding="utf-8")
            console.print(
                f"[green]✓[/green] Wrote {len(elements)} elements to {output}"
            )
        else:
            # Pure HTML on stdout, no Rich markup processing
            print(markup)

        logger.info(
            "Formatted script",
            file=str(file),
            elements=len(elements),
            remote=remote,
        )

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e)
