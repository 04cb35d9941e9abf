"""Errors raised by arscript, each carrying a message, a hint and details."""

from __future__ import annotations

from typing import Any


class ArScriptError(Exception):
    """Root of every error arscript raises on purpose.

    ``message`` says what went wrong, ``hint`` what to try next, and
    ``details`` holds values worth showing with ``--verbose``.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render message, hint and details as plain multi-line text."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(ArScriptError):
    """Settings or configuration files that cannot be used as given."""

    pass


class ValidationError(ArScriptError):
    """A value supplied by the user is out of range or malformed."""

    pass


class IngestionError(ArScriptError):
    """Base error for reading script files from disk."""

    pass


class UnsupportedFormatError(IngestionError):
    """The file extension is not one of the plain-text formats we read."""

    pass


class ScriptFileNotFoundError(IngestionError):
    """The script path does not exist."""

    pass


class FileReadError(IngestionError):
    """The file exists but could not be read or decoded."""

    pass


class RemoteClassificationError(ArScriptError):
    """Base error for the remote classification service."""

    pass


class RemoteNetworkError(RemoteClassificationError):
    """Transport failure or non-success status from the remote service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize network error.

        Args:
            message: Error message
            status_code: HTTP status code, when a response was received
            endpoint: URL that was called
            original_error: The transport exception that caused this error
        """
        self.status_code = status_code
        self.endpoint = endpoint
        self.original_error = original_error

        details: dict[str, Any] = {}
        if endpoint:
            details["endpoint"] = endpoint
        if status_code is not None:
            details["status_code"] = status_code
        if original_error:
            details["original_error"] = (
                f"{type(original_error).__name__}: {original_error}"
            )

        super().__init__(
            message=message,
            hint="Check the endpoint URL, API key and network connectivity",
            details=details,
        )


class MalformedResponseError(RemoteClassificationError):
    """The remote service answered with a payload that violates the schema."""

    pass


class EmptyResultError(RemoteClassificationError):
    """The remote service returned no elements for non-empty input."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "api_key": "llm_api_key",  # pragma: allowlist secret
        "endpoint": "llm_endpoint",
        "model": "llm_model",
        "max_cue_words": "character_cue_max_words",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
