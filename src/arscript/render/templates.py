"""Per-element HTML templates and the default screenplay stylesheet."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from arscript.parser.models import ElementType


@dataclass(frozen=True)
class BlockTemplate:
    """Markup for one element kind and the element fields it embeds."""

    markup: str
    fields: tuple[str, ...] = ("text",)


ACTION_TEMPLATE = BlockTemplate(
    '<div class="action" data-element="action">{text}</div>'
)

ELEMENT_TEMPLATES: Mapping[ElementType, BlockTemplate] = MappingProxyType(
    {
        ElementType.BASMALA: BlockTemplate(
            '<div class="basmala" data-element="basmala">{text}</div>'
        ),
        ElementType.SCENE_HEADING: BlockTemplate(
            '<div class="scene-header" data-element="scene_heading">'
            '<div class="scene-header-top-line">'
            '<span class="scene-number">{scene_number}</span>'
            '<span class="scene-time">{time}</span>'
            "</div>"
            '<div class="scene-location">{location}</div>'
            "</div>",
            fields=("scene_number", "time", "location"),
        ),
        ElementType.ACTION: ACTION_TEMPLATE,
        ElementType.CHARACTER: BlockTemplate(
            '<div class="character" data-element="character">{text}:</div>'
        ),
        ElementType.PARENTHETICAL: BlockTemplate(
            '<div class="parenthetical" data-element="parenthetical">({text})</div>'
        ),
        ElementType.DIALOGUE: BlockTemplate(
            '<div class="dialogue" data-element="dialogue">{text}</div>'
        ),
        ElementType.TRANSITION: BlockTemplate(
            '<div class="transition" data-element="transition">{text}</div>'
        ),
    }
)

DEFAULT_STYLESHEET = """\
.screenplay { direction: rtl; font-family: "Amiri", "Traditional Arabic", serif; }
.basmala { text-align: center; font-weight: bold; font-size: 1.125rem; margin-bottom: 2rem; }
.scene-header { margin: 2rem 0 1rem; font-weight: bold; }
.scene-header-top-line { display: flex; justify-content: space-between; width: 100%; }
.scene-location { text-align: center; margin-top: 0.25rem; }
.action { text-align: right; margin: 1rem 0; }
.character { text-align: center; font-weight: bold; width: 2.5in; margin: 1rem auto 0; }
.parenthetical { text-align: center; font-style: italic; width: 2in; margin: 0 auto; }
.dialogue { text-align: center; width: 2.5in; margin: 0 auto 0.3rem; line-height: 1.2; }
.transition { text-align: center; font-weight: bold; margin: 1rem 0; }
"""

DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="ar" dir="rtl">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{stylesheet}</style>
</head>
<body>
{body}
</body>
</html>
"""
