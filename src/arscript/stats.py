"""Scene, word and page counts for scripts."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from arscript.parser.models import SceneHeading, ScreenplayElement
from arscript.parser.patterns import SCENE_COUNTER

DEFAULT_WORDS_PER_PAGE = 250


@dataclass(frozen=True)
class ScriptStats:
    """Summary counts of a script."""

    scenes: int
    words: int
    pages: int

    def to_dict(self) -> dict[str, int]:
        """Return the counts as a plain dictionary."""
        return asdict(self)


def estimate_pages(words: int, words_per_page: int = DEFAULT_WORDS_PER_PAGE) -> int:
    """Estimate pages from a word count, never fewer than one."""
    if words_per_page <= 0:
        raise ValueError(f"words_per_page must be positive, got {words_per_page}")
    return max(1, math.ceil(words / words_per_page))


def count_text(text: str, words_per_page: int = DEFAULT_WORDS_PER_PAGE) -> ScriptStats:
    """Count scenes, words and pages in raw script text.

    Args:
        text: Raw script text
        words_per_page: Words on one page

    Returns:
        Counts for the text
    """
    words = len(text.split())
    return ScriptStats(
        scenes=len(SCENE_COUNTER.findall(text)),
        words=words,
        pages=estimate_pages(words, words_per_page),
    )


def _element_words(element: ScreenplayElement) -> int:
    if isinstance(element, SceneHeading):
        parts = (element.scene_number, element.time, element.location)
        return sum(len(part.split()) for part in parts)
    return len(element.text.split())


def count_elements(
    elements: Iterable[ScreenplayElement],
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
) -> ScriptStats:
    """Count scenes, words and pages over a classified element sequence.

    Args:
        elements: Classified elements
        words_per_page: Words on one page

    Returns:
        Counts for the sequence
    """
    scenes = 0
    words = 0
    for element in elements:
        if isinstance(element, SceneHeading):
            scenes += 1
        words += _element_words(element)
    return ScriptStats(
        scenes=scenes,
        words=words,
        pages=estimate_pages(words, words_per_page),
    )
