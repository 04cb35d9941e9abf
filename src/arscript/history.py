"""Bounded undo/redo history of script text snapshots."""

from __future__ import annotations

from collections import deque


class ScriptHistory:
    """Capped ring buffer of text snapshots with undo and redo.

    The newest snapshot on the undo stack is the current text. Pushing a new
    snapshot discards the redo stack; once ``limit`` snapshots are held the
    oldest one is dropped. Not thread-safe: one history per editing session.
    """

    def __init__(self, limit: int = 20) -> None:
        """Initialize an empty history.

        Args:
            limit: Maximum number of snapshots kept for undo
        """
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self._undo: deque[str] = deque(maxlen=limit)
        self._redo: list[str] = []

    @property
    def current(self) -> str | None:
        """The latest snapshot, if any."""
        return self._undo[-1] if self._undo else None

    @property
    def can_undo(self) -> bool:
        return len(self._undo) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def push(self, text: str) -> None:
        """Record a new snapshot; a repeat of the current text is ignored."""
        if self._undo and self._undo[-1] == text:
            return
        self._undo.append(text)
        self._redo.clear()

    def undo(self) -> str | None:
        """Step back one snapshot.

        Returns:
            The snapshot that is now current, or None when there is nothing
            to go back to
        """
        if not self.can_undo:
            return None
        self._redo.append(self._undo.pop())
        return self._undo[-1]

    def redo(self) -> str | None:
        """Step forward one snapshot.

        Returns:
            The restored snapshot, or None when nothing was undone
        """
        if not self._redo:
            return None
        snapshot = self._redo.pop()
        self._undo.append(snapshot)
        return snapshot

    def clear(self) -> None:
        """Forget every snapshot."""
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)
