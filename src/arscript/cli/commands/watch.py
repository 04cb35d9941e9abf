"""CLI command for arscript watch - re-render a script when it changes."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from watchdog.observers import Observer

from arscript.cli.utils.error_handler import handle_cli_error
from arscript.cli.utils.file_watcher import ScriptFileHandler
from arscript.cli.utils.paths import check_output_path
from arscript.config import get_logger, get_settings
from arscript.exceptions import ScriptFileNotFoundError
from arscript.history import ScriptHistory
from arscript.parser import ScreenplayClassifier
from arscript.render import render_document

logger = get_logger(__name__)
console = Console()


def watch_command(
    file: Annotated[
        Path,
        typer.Argument(help="Plain-text script to watch"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="HTML file to keep up to date (default: script name with .html)",
        ),
    ] = None,
    debounce: Annotated[
        float | None,
        typer.Option(
            "--debounce",
            "-d",
            help="Seconds to wait for changes to settle before rendering",
            min=0.0,
        ),
    ] = None,
    timeout: Annotated[
        int,
        typer.Option(
            "--timeout",
            help="Maximum watch duration in seconds (0 for unlimited)",
        ),
    ] = 0,
) -> None:
    """Watch a script and re-render its HTML whenever it is saved.

    Bursts of saves are coalesced: only the file contents present once the
    debounce period has passed are rendered.

    Press Ctrl+C to stop watching.
    """
    observer = None
    handler = None
    try:
        settings = get_settings()
        script_path = file.resolve()
        if not script_path.is_file():
            raise ScriptFileNotFoundError(
                message=f"Script file not found: {file}",
                hint="Create the script before watching it",
                details={"file": str(file)},
            )

        target = check_output_path(
            script_path, output or script_path.with_suffix(".html")
        )
        classifier = ScreenplayClassifier(
            max_cue_words=settings.character_cue_max_words
        )

        def render(text: str) -> None:
            elements = classifier.classify(text)
            target.write_text(
                render_document(elements, title=script_path.stem) + "\n",
                encoding="utf-8",
            )

        def update_status(status: str, path: Path, error: str | None = None) -> None:
            timestamp = time.strftime("%H:%M:%S")
            if status == "completed":
                console.print(f"[{timestamp}] [green]✓ Rendered {path.name}[/green]")
            elif status == "error":
                safe_error = str(error)[:100] if error else "Unknown error"
                console.print(f"[{timestamp}] [red]✗ {path.name}: {safe_error}[/red]")

        handler = ScriptFileHandler(
            script_path,
            on_change=render,
            debounce_seconds=(
                settings.watch_debounce_seconds if debounce is None else debounce
            ),
            history=ScriptHistory(limit=settings.history_limit),
            callback=update_status,
        )
        handler.flush()

        observer = Observer()
        observer.schedule(handler, str(script_path.parent), recursive=False)
        observer.start()

        console.print(f"\n[green]Watching {script_path.name} → {target}[/green]")
        console.print("[dim]Press Ctrl+C to stop[/dim]\n")

        start_time = time.time()
        try:
            while True:
                time.sleep(1)
                if timeout > 0 and (time.time() - start_time) >= timeout:
                    console.print(
                        f"\n[yellow]Watch timeout reached ({timeout}s)[/yellow]"
                    )
                    break
        except KeyboardInterrupt:
            console.print("\n[yellow]Stopping file watch...[/yellow]")

        console.print("[green]✓ Watch stopped[/green]")

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e)
    finally:
        if handler is not None:
            handler.stop()
        if observer is not None and observer.is_alive():
            observer.stop()
            observer.join(timeout=10.0)
