"""Recover plain script text from rendered screenplay HTML."""

from __future__ import annotations

from html.parser import HTMLParser

VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link", "wbr"})


class _BlockTextParser(HTMLParser):
    """Collect the text of every ``data-element`` block in document order."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.blocks: list[str] = []
        self._fragments: list[str] = []
        self._depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in VOID_TAGS:
            return
        if self._depth:
            self._depth += 1
        elif any(name == "data-element" for name, _ in attrs):
            self._depth = 1
            self._fragments = []

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_TAGS or not self._depth:
            return
        self._depth -= 1
        if not self._depth:
            self.blocks.append(" ".join(self._fragments))

    def handle_data(self, data: str) -> None:
        if self._depth and data.strip():
            self._fragments.append(data.strip())


def extract_plain_text(markup: str) -> str:
    """Extract script text from a document produced by the HTML renderer.

    Each element block becomes one paragraph; the parts of a scene heading
    are joined with spaces onto a single line. Paragraphs are separated by a
    blank line, which keeps a heading from absorbing the next block as its
    location when the text is classified again.

    Args:
        markup: Rendered fragment or document

    Returns:
        Plain text with character references decoded
    """
    parser = _BlockTextParser()
    parser.feed(markup)
    parser.close()
    return "\n\n".join(parser.blocks)
