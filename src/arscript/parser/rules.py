"""Precedence-ordered classification rules for screenplay lines.

Each rule pairs a predicate with a builder. The classifier applies the first
rule whose predicate accepts the line, so the order of ``RULE_TABLE`` is the
precedence order. The last rule accepts every line, which keeps
classification total.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from arscript.parser.lines import LineCursor
from arscript.parser.models import (
    Action,
    Basmala,
    Character,
    Dialogue,
    ElementType,
    Parenthetical,
    ScreenplayElement,
    Transition,
)
from arscript.parser.patterns import (
    BASMALA,
    CHARACTER_BULLETS,
    PARENTHETICAL,
    SCENE_PREFIX,
    TRAILING_COLONS,
    TRANSITIONS,
    is_bare_name,
)
from arscript.parser.scene_heading import SceneHeadingAssembler

SPEAKER_TYPES = frozenset({ElementType.CHARACTER, ElementType.PARENTHETICAL})


@dataclass(frozen=True)
class ClassificationContext:
    """What a rule may know beyond the line itself."""

    previous_type: ElementType | None = None
    max_cue_words: int = 1

    @property
    def after_speaker(self) -> bool:
        """Whether the last emitted element opens or directs a speech."""
        return self.previous_type in SPEAKER_TYPES


Predicate = Callable[[str, ClassificationContext], bool]
Builder = Callable[
    [str, LineCursor, ClassificationContext], tuple[ScreenplayElement, int]
]


@dataclass(frozen=True)
class Rule:
    """A named classification rule."""

    name: str
    predicate: Predicate
    build: Builder

    def matches(self, line: str, context: ClassificationContext) -> bool:
        """Whether this rule accepts the line."""
        return self.predicate(line, context)


def _is_basmala(line: str, _context: ClassificationContext) -> bool:
    return BASMALA in line


def _build_basmala(
    line: str, _cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    return Basmala(line), 1


def _is_scene_heading(line: str, _context: ClassificationContext) -> bool:
    return SCENE_PREFIX.match(line) is not None


_assembler = SceneHeadingAssembler()


def _build_scene_heading(
    line: str, cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    match = SCENE_PREFIX.match(line)
    # Guarded by the predicate; kept total for direct callers.
    if match is None:
        return Action(line), 1
    # Only colon cues stop the lookahead; a bare word here is a place name.
    lookahead_context = ClassificationContext(
        previous_type=ElementType.SCENE_HEADING,
        max_cue_words=0,
    )
    return _assembler.assemble(
        match, cursor, lambda candidate: is_boundary(candidate, lookahead_context)
    )


def _is_transition(line: str, _context: ClassificationContext) -> bool:
    return any(keyword in line for keyword in TRANSITIONS)


def _build_transition(
    line: str, _cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    return Transition(line), 1


def character_name(line: str) -> str:
    """Strip bullet glyphs and the trailing colon from a cue line."""
    name = TRAILING_COLONS.sub("", line)
    return CHARACTER_BULLETS.sub("", name).strip()


def _is_character(line: str, context: ClassificationContext) -> bool:
    name = character_name(line)
    if not name:
        return False
    if line.endswith(":"):
        return True
    # Colon-less fallback: a short run of bare letters, never straight after
    # a cue or direction, where the line is the speech itself.
    if context.max_cue_words < 1 or context.after_speaker:
        return False
    return is_bare_name(name) and len(name.split()) <= context.max_cue_words


def _build_character(
    line: str, _cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    return Character(character_name(line)), 1


def _is_parenthetical(line: str, _context: ClassificationContext) -> bool:
    match = PARENTHETICAL.match(line)
    return match is not None and bool(match.group(1).strip())


def _build_parenthetical(
    line: str, _cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    match = PARENTHETICAL.match(line)
    text = match.group(1).strip() if match else line
    return Parenthetical(text), 1


def _is_dialogue(_line: str, context: ClassificationContext) -> bool:
    return context.after_speaker


def _build_dialogue(
    line: str, _cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    return Dialogue(line), 1


def _is_action(_line: str, _context: ClassificationContext) -> bool:
    return True


def _build_action(
    line: str, _cursor: LineCursor, _context: ClassificationContext
) -> tuple[ScreenplayElement, int]:
    return Action(line), 1


BASMALA_RULE = Rule("basmala", _is_basmala, _build_basmala)
SCENE_HEADING_RULE = Rule("scene_heading", _is_scene_heading, _build_scene_heading)
TRANSITION_RULE = Rule("transition", _is_transition, _build_transition)
CHARACTER_RULE = Rule("character", _is_character, _build_character)
PARENTHETICAL_RULE = Rule("parenthetical", _is_parenthetical, _build_parenthetical)
DIALOGUE_RULE = Rule("dialogue", _is_dialogue, _build_dialogue)
ACTION_RULE = Rule("action", _is_action, _build_action)

RULE_TABLE: tuple[Rule, ...] = (
    BASMALA_RULE,
    SCENE_HEADING_RULE,
    TRANSITION_RULE,
    CHARACTER_RULE,
    PARENTHETICAL_RULE,
    DIALOGUE_RULE,
    ACTION_RULE,
)

# Rules whose match means a line starts an element of its own.
BOUNDARY_RULES: tuple[Rule, ...] = RULE_TABLE[:4]


def rule_for(line: str, context: ClassificationContext) -> Rule:
    """Return the first rule in precedence order that accepts the line."""
    for rule in RULE_TABLE:
        if rule.matches(line, context):
            return rule
    # The action rule accepts everything.
    return ACTION_RULE


def is_boundary(line: str, context: ClassificationContext) -> bool:
    """Whether the line matches any of the basmala to character rules."""
    return any(rule.matches(line, context) for rule in BOUNDARY_RULES)
