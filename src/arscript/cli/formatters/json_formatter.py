"""JSON output for CLI commands."""

from __future__ import annotations

import json
from typing import Any

from arscript.cli.formatters.base import OutputFormat, OutputFormatter


def to_jsonable(data: Any) -> Any:
    """Reduce models, result objects and containers to plain JSON values."""
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if isinstance(data, dict | list | tuple):
        return data
    return {"value": data}


class JsonFormatter(OutputFormatter[Any]):
    """Serialize any command result as indented JSON.

    Arabic text is written as-is rather than as ``\\u`` escapes.
    """

    default_format = OutputFormat.JSON

    def format(self, data: Any, format_type: OutputFormat | None = None) -> str:  # noqa: ARG002
        return json.dumps(to_jsonable(data), default=str, ensure_ascii=False, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Describe a failure as a ``{"success": false, ...}`` object.

        ``ArScriptError`` hints are carried along under ``hint``.
        """
        message = getattr(error, "message", None) or str(error)
        response: dict[str, Any] = {"success": False, "error": message, "code": code}
        hint = getattr(error, "hint", None)
        if hint:
            response["hint"] = hint
        return json.dumps(response, ensure_ascii=False, indent=2)
