"""Vocabularies and compiled patterns for Arabic screenplay lines."""

from __future__ import annotations

import re
import unicodedata

BASMALA = "بسم الله الرحمن الرحيم"

# "مشهد" or its abbreviation "م." followed by a numeral; \d also covers
# Arabic-Indic digits.
SCENE_PREFIX = re.compile(r"^(?:مشهد|م\.)\s*(\d+)")
SCENE_MARKER = "مشهد"
SCENE_COUNTER = re.compile(r"(?:مشهد|م\.)\s*\d+")

TIMES_OF_DAY = (
    "نهاراً",
    "نهارا",
    "نهار",
    "ليلاً",
    "ليلا",
    "ليل",
    "صباح",
    "مساء",
    "فجر",
    "ظهر",
    "عصر",
    "غروب",
    "شروق",
)
SETTINGS = ("داخلي", "خارجي")
SEPARATORS = "-–—:،,"

_time = "|".join(TIMES_OF_DAY)
_setting = "|".join(SETTINGS)
_sep = rf"\s*[{re.escape(SEPARATORS)}]\s*"
_token_end = rf"(?=$|\s|[{re.escape(SEPARATORS)}])"

# Time and setting pair in either order, e.g. "ليل-داخلي" or "خارجي - نهار"
TIME_SETTING_PAIR = re.compile(
    rf"^(?:(?:{_time}){_sep}(?:{_setting})|(?:{_setting}){_sep}(?:{_time})){_token_end}"
)
PAIR_SEPARATOR = re.compile(_sep)
LEADING_SEPARATORS = re.compile(rf"^[\s{re.escape(SEPARATORS)}]+")

TRANSITIONS = (
    "قطع إلى",
    "انتقال إلى",
    "قطع.",
    "انتقال",
    "فيد إلى",
    "فيد من",
    "مزج إلى",
    "ظهور تدريجي",
    "اختفاء تدريجي",
)

CHARACTER_BULLETS = re.compile(r"^[\s•·▪◦●\-–*]+")
TRAILING_COLONS = re.compile(r"\s*:+$")

PARENTHETICAL = re.compile(r"^\((.+)\)$", re.DOTALL)


def canonical_scene_number(numeral: str) -> str:
    """Render a matched numeral as the canonical "مشهد N" form.

    Digits are mapped one by one, so numerals of any length are accepted.
    """
    digits = "".join(str(unicodedata.digit(ch)) for ch in numeral).lstrip("0")
    return f"{SCENE_MARKER} {digits or '0'}"


def is_bare_name(line: str) -> bool:
    """Whether the line holds only letters, diacritics and spaces."""
    return bool(line.strip()) and all(
        ch.isalpha() or ch == " " or unicodedata.category(ch) == "Mn" for ch in line
    )
