"""File watching utilities for arscript CLI."""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from arscript.config import get_logger
from arscript.exceptions import ArScriptError
from arscript.history import ScriptHistory
from arscript.ingest import load_script_text

logger = get_logger(__name__)


class StatusCallback(Protocol):
    """Protocol for status update callbacks."""

    def __call__(self, status: str, path: Path, error: str | None = None) -> None:
        """Update status callback.

        Args:
            status: Status type (processing, completed, unchanged, error)
            path: File path being processed
            error: Optional error message
        """
        ...


class ScriptFileHandler(FileSystemEventHandler):
    """Re-render one script file after its changes settle.

    Every event restarts the debounce timer, so a burst of saves produces a
    single render of whatever is on disk when the timer fires. Snapshots are
    recorded in a bounded history; a snapshot equal to the current one is
    not rendered again.
    """

    def __init__(
        self,
        script_path: Path,
        on_change: Callable[[str], None],
        debounce_seconds: float = 0.5,
        history: ScriptHistory | None = None,
        callback: StatusCallback | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            script_path: Script file to follow
            on_change: Called with the new text of each settled change
            debounce_seconds: Quiet period before a change is processed
            history: Snapshot history, a fresh one when omitted
            callback: Callback for status updates
        """
        self.script_path = script_path.resolve()
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self.history = history if history is not None else ScriptHistory()
        self.callback = callback
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        # Serializes flushes so a late timer cannot interleave with a newer one
        self._flush_lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """Whether a change is waiting for its debounce timer."""
        with self._lock:
            return self._timer is not None

    def should_process(self, path: Path) -> bool:
        """Check whether a path refers to the watched script."""
        try:
            return path.resolve() == self.script_path
        except OSError:
            return False

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        self._handle_path(event, event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events."""
        self._handle_path(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle editors that save by renaming a temporary file over the script."""
        self._handle_path(event, event.dest_path)

    def _handle_path(self, event: FileSystemEvent, src_path: str | bytes) -> None:
        if event.is_directory:
            return
        if isinstance(src_path, bytes):
            src_path = src_path.decode()
        if src_path and self.should_process(Path(src_path)):
            self.schedule()

    def schedule(self) -> None:
        """Restart the debounce timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.debounce_seconds, self.flush)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> bool:
        """Process the latest file contents now.

        A snapshot enters the history only once it has been rendered, so a
        failed render is retried on the next change event.

        Returns:
            True when a new snapshot was rendered
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

        with self._flush_lock:
            return self._process()

    def _process(self) -> bool:
        if self.callback:
            self.callback("processing", self.script_path)

        try:
            text = load_script_text(self.script_path)
        except ArScriptError as e:
            logger.warning(
                "Could not read watched script",
                path=str(self.script_path),
                error=e.message,
            )
            if self.callback:
                self.callback("error", self.script_path, e.message)
            return False

        if text == self.history.current:
            if self.callback:
                self.callback("unchanged", self.script_path)
            return False

        try:
            self.on_change(text)
        except Exception as e:
            logger.error(
                "Error rendering watched script",
                path=str(self.script_path),
                error=str(e),
            )
            if self.callback:
                self.callback("error", self.script_path, str(e))
            return False

        self.history.push(text)
        logger.info(
            "Rendered watched script",
            path=str(self.script_path),
            revisions=len(self.history),
        )
        if self.callback:
            self.callback("completed", self.script_path)
        return True

    def stop(self) -> None:
        """Cancel any pending debounce timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
