"""Line normalization and the lookahead cursor used by the classifier."""

from __future__ import annotations


def normalize_lines(text: str) -> list[str]:
    """Split raw text into trimmed lines.

    Blank lines are kept as empty strings so paragraph breaks survive; no
    line is merged or dropped. A trailing carriage return from CRLF input is
    removed by the trim.

    Args:
        text: Raw script text

    Returns:
        Ordered list of trimmed lines
    """
    return [line.strip() for line in text.split("\n")]


class LineCursor:
    """Forward-only cursor over normalized lines with peek support."""

    def __init__(self, lines: list[str]) -> None:
        """Initialize the cursor at the first line.

        Args:
            lines: Normalized lines to walk
        """
        self._lines = lines
        self.position = 0

    @property
    def at_end(self) -> bool:
        """Whether every line has been consumed."""
        return self.position >= len(self._lines)

    @property
    def current(self) -> str:
        """The line under the cursor."""
        return self._lines[self.position]

    def peek(self, offset: int = 1) -> str | None:
        """Return the line ``offset`` positions ahead without consuming it."""
        index = self.position + offset
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward by ``count`` lines."""
        if count < 1:
            raise ValueError(f"Cursor must advance by at least one line, got {count}")
        self.position = min(self.position + count, len(self._lines))

    def __len__(self) -> int:
        return len(self._lines)
