"""Arabic screenplay classification for arscript."""

from __future__ import annotations

from .classifier import ClassifiedSpan, ScreenplayClassifier, classify
from .lines import LineCursor, normalize_lines
from .models import (
    Action,
    Basmala,
    Character,
    Dialogue,
    ElementType,
    Parenthetical,
    SceneHeading,
    ScreenplayElement,
    Transition,
    element_from_dict,
)
from .rules import RULE_TABLE, ClassificationContext, Rule, rule_for
from .scene_heading import SceneHeadingAssembler

__all__ = [
    "RULE_TABLE",
    "Action",
    "Basmala",
    "Character",
    "ClassificationContext",
    "ClassifiedSpan",
    "Dialogue",
    "ElementType",
    "LineCursor",
    "Parenthetical",
    "Rule",
    "SceneHeading",
    "SceneHeadingAssembler",
    "ScreenplayClassifier",
    "ScreenplayElement",
    "Transition",
    "classify",
    "element_from_dict",
    "normalize_lines",
    "rule_for",
]
