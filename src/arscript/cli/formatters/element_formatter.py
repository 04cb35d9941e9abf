"""Table and JSON output for classified screenplay elements."""

from __future__ import annotations

import io
import json
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from arscript.cli.formatters.base import OutputFormat, OutputFormatter
from arscript.parser.models import SceneHeading, ScreenplayElement


def _element_text(element: ScreenplayElement) -> str:
    if isinstance(element, SceneHeading):
        return " | ".join(
            part
            for part in (element.scene_number, element.time, element.location)
            if part
        )
    return element.text


class ElementFormatter(OutputFormatter[Sequence[ScreenplayElement]]):
    """Format an element sequence as a numbered table or a JSON array."""

    def format(
        self,
        data: Sequence[ScreenplayElement],
        format_type: OutputFormat | None = None,
    ) -> str:
        if format_type == OutputFormat.JSON:
            return json.dumps(
                [element.to_dict() for element in data], ensure_ascii=False, indent=2
            )
        if not data:
            return "No elements found"
        return self._format_table(data)

    def _format_table(self, data: Sequence[ScreenplayElement]) -> str:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", style="cyan")
        table.add_column("Text")

        for index, element in enumerate(data, start=1):
            table.add_row(str(index), element.element_type.value, _element_text(element))

        string_io = io.StringIO()
        temp_console = Console(
            file=string_io, force_terminal=False, width=self.console.width
        )
        temp_console.print(table)
        return string_io.getvalue()
