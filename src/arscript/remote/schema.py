"""Output schema and prompt for the remote screenplay classifier."""

from __future__ import annotations

from typing import Any

from arscript.parser.models import ElementType

ELEMENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {
            "type": "string",
            "enum": [element_type.value for element_type in ElementType],
            "description": "نوع عنصر السيناريو.",
        },
        "text": {
            "type": "string",
            "description": "المحتوى النصي للعنصر، فارغ لرأس المشهد.",
        },
        "scene_number": {
            "type": "string",
            "description": "لرأس المشهد فقط: رقم المشهد، مثل 'مشهد 1'.",
        },
        "scene_time": {
            "type": "string",
            "description": "لرأس المشهد فقط: الوقت ونوع المكان، مثل 'ليل - داخلي'.",
        },
        "scene_location": {
            "type": "string",
            "description": "لرأس المشهد فقط: المكان، مثل 'المستشفى – غرفة'.",
        },
    },
    "required": ["type"],
}

ELEMENT_ARRAY_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": ELEMENT_SCHEMA,
}

# Structured-output APIs want an object at the root, so the array is wrapped.
RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {"elements": ELEMENT_ARRAY_SCHEMA},
    "required": ["elements"],
}

SYSTEM_PROMPT = (
    "You format Arabic screenplays. Split the raw script into an ordered list "
    "of elements and return JSON only. Element types: "
    f"{ElementType.BASMALA.value} for the phrase 'بسم الله الرحمن الرحيم'; "
    f"{ElementType.SCENE_HEADING.value} for a scene header, split into "
    "scene_number (e.g. 'مشهد 1'), scene_time (time of day and interior or "
    "exterior, e.g. 'ليل - داخلي') and scene_location, with text left empty; "
    f"{ElementType.ACTION.value} for description; "
    f"{ElementType.CHARACTER.value} for the speaker's name without a colon; "
    f"{ElementType.DIALOGUE.value} for spoken lines; "
    f"{ElementType.PARENTHETICAL.value} for performance directions without "
    f"their parentheses; {ElementType.TRANSITION.value} for cues such as "
    "'قطع إلى'. Keep the original wording of every line."
)


def build_messages(raw_text: str) -> list[dict[str, str]]:
    """Build the chat messages asking the service to classify ``raw_text``."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": f"النص الخام:\n---\n{raw_text}\n---"},
    ]


def build_response_format() -> dict[str, Any]:
    """Build the OpenAI-style ``response_format`` requesting schema output."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": "screenplay_elements",
            "schema": RESPONSE_SCHEMA,
            "strict": False,
        },
    }
