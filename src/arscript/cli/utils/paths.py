"""Path checks shared by commands that write rendered HTML."""

from __future__ import annotations

from pathlib import Path

from arscript.exceptions import ValidationError


def check_output_path(script: Path, output: Path) -> Path:
    """Make sure rendering ``script`` to ``output`` cannot destroy the script.

    Args:
        script: Script file being read
        output: HTML file about to be written

    Returns:
        The output path

    Raises:
        ValidationError: If the output is the script itself or a directory
    """
    if output.resolve() == script.resolve():
        raise ValidationError(
            message=f"Output file is the script itself: {output}",
            hint="Choose a different path with --output",
            details={"script": str(script), "output": str(output)},
        )
    if output.is_dir():
        raise ValidationError(
            message=f"Output path is a directory: {output}",
            hint="Pass a file name, for example script.html",
            details={"output": str(output)},
        )
    return output
