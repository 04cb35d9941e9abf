"""Data models for classified Arabic screenplay elements."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ElementType(str, Enum):
    """Kinds of screenplay element, valued by their wire tags."""

    BASMALA = "BASMALA"
    SCENE_HEADING = "SCENE_HEADING"
    ACTION = "ACTION"
    CHARACTER = "CHARACTER"
    PARENTHETICAL = "PARENTHETICAL"
    DIALOGUE = "DIALOGUE"
    TRANSITION = "TRANSITION"


@dataclass(frozen=True)
class _TextElement:
    """Shared shape of the single-text variants."""

    element_type: ClassVar[ElementType]

    text: str

    def to_dict(self) -> dict[str, str]:
        """Serialize to the wire shape used by JSON consumers."""
        return {"type": self.element_type.value, "text": self.text}


@dataclass(frozen=True)
class Basmala(_TextElement):
    """The ceremonial opening line, verbatim."""

    element_type: ClassVar[ElementType] = ElementType.BASMALA


@dataclass(frozen=True)
class Action(_TextElement):
    """Narrative or descriptive prose."""

    element_type: ClassVar[ElementType] = ElementType.ACTION


@dataclass(frozen=True)
class Parenthetical(_TextElement):
    """A performance direction, stored without its parentheses."""

    element_type: ClassVar[ElementType] = ElementType.PARENTHETICAL


@dataclass(frozen=True)
class Dialogue(_TextElement):
    """A line of spoken content."""

    element_type: ClassVar[ElementType] = ElementType.DIALOGUE


@dataclass(frozen=True)
class Transition(_TextElement):
    """A scene transition cue, verbatim."""

    element_type: ClassVar[ElementType] = ElementType.TRANSITION


@dataclass(frozen=True)
class Character:
    """The speaking character's name without colon or bullet glyphs."""

    element_type: ClassVar[ElementType] = ElementType.CHARACTER

    name: str

    @property
    def text(self) -> str:
        """The name, under the field name shared by the other text variants."""
        return self.name

    def to_dict(self) -> dict[str, str]:
        """Serialize to the wire shape used by JSON consumers."""
        return {"type": self.element_type.value, "text": self.name}


@dataclass(frozen=True)
class SceneHeading:
    """A scene header split into number, time/setting and location.

    ``time`` and ``location`` are empty strings when absent, never None.
    """

    element_type: ClassVar[ElementType] = ElementType.SCENE_HEADING

    scene_number: str
    time: str = ""
    location: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize to the wire shape used by JSON consumers."""
        return {
            "type": self.element_type.value,
            "scene_number": self.scene_number,
            "scene_time": self.time,
            "scene_location": self.location,
        }


ScreenplayElement = (
    Basmala
    | SceneHeading
    | Action
    | Character
    | Parenthetical
    | Dialogue
    | Transition
)

_TEXT_VARIANTS: dict[ElementType, type[_TextElement]] = {
    ElementType.BASMALA: Basmala,
    ElementType.ACTION: Action,
    ElementType.PARENTHETICAL: Parenthetical,
    ElementType.DIALOGUE: Dialogue,
    ElementType.TRANSITION: Transition,
}


def _optional_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def element_from_dict(data: Mapping[str, Any]) -> ScreenplayElement:
    """Build an element from its wire shape.

    Args:
        data: Mapping with a ``type`` tag and the variant's fields

    Returns:
        The matching element variant

    Raises:
        ValueError: If the tag is unknown or a scene heading has no number
    """
    raw_type = data.get("type")
    try:
        element_type = ElementType(raw_type)
    except ValueError as e:
        raise ValueError(f"Unknown element type: {raw_type!r}") from e

    if element_type is ElementType.SCENE_HEADING:
        scene_number = _optional_str(data, "scene_number").strip()
        if not scene_number:
            raise ValueError("Scene heading is missing 'scene_number'")
        return SceneHeading(
            scene_number=scene_number,
            time=_optional_str(data, "scene_time").strip(),
            location=_optional_str(data, "scene_location").strip(),
        )

    text = _optional_str(data, "text").strip()
    if element_type is ElementType.CHARACTER:
        return Character(name=text)
    return _TEXT_VARIANTS[element_type](text=text)
