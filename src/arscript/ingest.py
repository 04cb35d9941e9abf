"""Read script text from plain-text files."""

from __future__ import annotations

from pathlib import Path

from arscript.config import get_logger
from arscript.exceptions import (
    FileReadError,
    ScriptFileNotFoundError,
    UnsupportedFormatError,
)

logger = get_logger(__name__)

SUPPORTED_SUFFIXES = frozenset({"", ".txt", ".text", ".md"})


def load_script_text(path: Path | str) -> str:
    """Load a script file as text with LF line endings.

    Args:
        path: Path to a plain-text script

    Returns:
        File contents decoded as UTF-8 (a leading BOM is dropped)

    Raises:
        UnsupportedFormatError: If the extension is not a plain-text format
        ScriptFileNotFoundError: If the file does not exist
        FileReadError: If the file cannot be read or is not valid UTF-8
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFormatError(
            message=f"Unsupported script format: {suffix}",
            hint="Save the script as plain text (.txt) and try again",
            details={
                "file": str(path),
                "detected_format": suffix,
                "supported_formats": sorted(s for s in SUPPORTED_SUFFIXES if s),
            },
        )

    if not path.is_file():
        raise ScriptFileNotFoundError(
            message=f"Script file not found: {path}",
            hint="Check that the file path is correct",
            details={"file": str(path), "current_dir": str(Path.cwd())},
        )

    try:
        raw = path.read_bytes()
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileReadError(
            message=f"Script file is not valid UTF-8: {path}",
            hint="Re-save the file with UTF-8 encoding",
            details={"file": str(path), "position": e.start, "reason": e.reason},
        ) from e
    except OSError as e:
        raise FileReadError(
            message=f"Failed to read script file: {path}",
            hint="Check file permissions",
            details={"file": str(path), "error": str(e)},
        ) from e

    logger.debug("Loaded script file", file=str(path), size=len(raw))
    return text.replace("\r\n", "\n").replace("\r", "\n")
