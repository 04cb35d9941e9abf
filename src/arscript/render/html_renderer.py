"""Render screenplay elements as escaped HTML."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape
from typing import Any

from arscript.config import get_logger
from arscript.parser.models import ElementType
from arscript.render.templates import (
    ACTION_TEMPLATE,
    DEFAULT_STYLESHEET,
    DOCUMENT_TEMPLATE,
    ELEMENT_TEMPLATES,
    BlockTemplate,
)

logger = get_logger(__name__)


class HtmlRenderer:
    """Map each element to its block template, escaping every text field."""

    def __init__(
        self,
        templates: Mapping[ElementType, BlockTemplate] = ELEMENT_TEMPLATES,
        stylesheet: str = DEFAULT_STYLESHEET,
    ) -> None:
        """Initialize the renderer.

        Args:
            templates: Element kind to template table
            stylesheet: CSS embedded by ``render_document``
        """
        self.templates = templates
        self.stylesheet = stylesheet

    def _template_for(self, element: Any) -> BlockTemplate | None:
        template = self.templates.get(getattr(element, "element_type", None))
        if template is not None:
            return template
        # Unknown kinds still show their prose when they carry any
        if getattr(element, "text", None):
            return ACTION_TEMPLATE
        return None

    def render_block(self, element: Any) -> str:
        """Render one element, or an empty string when it has no template."""
        template = self._template_for(element)
        if template is None:
            return ""
        values = {
            name: escape(str(getattr(element, name, "") or ""), quote=True)
            for name in template.fields
        }
        return template.markup.format(**values)

    def render(self, elements: Iterable[Any]) -> str:
        """Render elements as a screenplay fragment.

        Args:
            elements: Element sequence in document order

        Returns:
            One block per renderable element inside a right-to-left wrapper
        """
        blocks = [block for block in map(self.render_block, elements) if block]
        logger.debug("Rendered screenplay", blocks=len(blocks))
        body = "\n".join(blocks)
        return f'<div class="screenplay" dir="rtl" lang="ar">\n{body}\n</div>'

    def render_document(self, elements: Iterable[Any], title: str = "سيناريو") -> str:
        """Render elements as a complete HTML page with the stylesheet.

        Args:
            elements: Element sequence in document order
            title: Page title

        Returns:
            Standalone HTML document
        """
        return DOCUMENT_TEMPLATE.format(
            title=escape(title, quote=True),
            stylesheet=self.stylesheet,
            body=self.render(elements),
        )


def render_elements(elements: Iterable[Any]) -> str:
    """Render elements as a fragment with the default templates."""
    return HtmlRenderer().render(elements)


def render_document(elements: Iterable[Any], title: str = "سيناريو") -> str:
    """Render elements as a standalone page with the default templates."""
    return HtmlRenderer().render_document(elements, title=title)
