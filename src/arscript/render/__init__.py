"""HTML rendering of classified screenplays."""

from __future__ import annotations

from .extract import extract_plain_text
from .html_renderer import HtmlRenderer, render_document, render_elements
from .templates import DEFAULT_STYLESHEET, ELEMENT_TEMPLATES, BlockTemplate

__all__ = [
    "DEFAULT_STYLESHEET",
    "ELEMENT_TEMPLATES",
    "BlockTemplate",
    "HtmlRenderer",
    "extract_plain_text",
    "render_document",
    "render_elements",
]
