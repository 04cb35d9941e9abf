"""Single-pass classifier turning raw script text into screenplay elements."""

from __future__ import annotations

from dataclasses import dataclass

from arscript.config import get_logger
from arscript.parser.lines import LineCursor, normalize_lines
from arscript.parser.models import ScreenplayElement
from arscript.parser.rules import ClassificationContext, rule_for

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClassifiedSpan:
    """Lines consumed at one cursor stop.

    ``element`` is None for a blank line, which marks a paragraph break.
    """

    start: int
    length: int
    element: ScreenplayElement | None
    rule: str | None = None


class ScreenplayClassifier:
    """Classify Arabic screenplay text line by line.

    The classifier walks the normalized lines once. At each non-blank line it
    applies the first matching rule of the rule table, records the element
    and advances by the number of lines the rule consumed. Blank lines are
    recorded as breaks and leave the previous element type untouched, so a
    character cue followed by a blank line still introduces dialogue.

    Instances hold only their options; every call owns its own cursor.
    """

    def __init__(self, max_cue_words: int = 1) -> None:
        """Initialize the classifier.

        Args:
            max_cue_words: Word ceiling for colon-less character cues
                (0 accepts only cues ending with a colon)
        """
        if max_cue_words < 0:
            raise ValueError(f"max_cue_words must be >= 0, got {max_cue_words}")
        self.max_cue_words = max_cue_words

    def trace(self, text: str) -> tuple[ClassifiedSpan, ...]:
        """Classify text and report which lines produced each element.

        Args:
            text: Raw script text

        Returns:
            Spans covering every line exactly once, in order
        """
        cursor = LineCursor(normalize_lines(text))
        context = ClassificationContext(max_cue_words=self.max_cue_words)
        spans: list[ClassifiedSpan] = []

        while not cursor.at_end:
            start = cursor.position
            line = cursor.current

            if not line:
                spans.append(ClassifiedSpan(start, 1, None))
                cursor.advance()
                continue

            rule = rule_for(line, context)
            element, consumed = rule.build(line, cursor, context)
            spans.append(ClassifiedSpan(start, consumed, element, rule.name))
            cursor.advance(consumed)
            context = ClassificationContext(
                previous_type=element.element_type,
                max_cue_words=self.max_cue_words,
            )

        return tuple(spans)

    def classify(self, text: str) -> tuple[ScreenplayElement, ...]:
        """Classify text into an ordered element sequence.

        Args:
            text: Raw script text

        Returns:
            Elements in document order; blank lines produce none
        """
        spans = self.trace(text)
        elements = tuple(span.element for span in spans if span.element is not None)
        logger.debug(
            "Classified script",
            lines=sum(span.length for span in spans),
            elements=len(elements),
        )
        return elements


def classify(text: str, max_cue_words: int = 1) -> tuple[ScreenplayElement, ...]:
    """Classify text with a fresh classifier.

    Args:
        text: Raw script text
        max_cue_words: Word ceiling for colon-less character cues

    Returns:
        Elements in document order
    """
    return ScreenplayClassifier(max_cue_words=max_cue_words).classify(text)
