"""Assemble scene headings from a matched scene line and its successor."""

from __future__ import annotations

import re
from collections.abc import Callable

from arscript.parser.lines import LineCursor
from arscript.parser.models import SceneHeading
from arscript.parser.patterns import (
    LEADING_SEPARATORS,
    PAIR_SEPARATOR,
    TIME_SETTING_PAIR,
    canonical_scene_number,
)


class SceneHeadingAssembler:
    """Split a scene line into number, time/setting and location.

    The assembler never fails: text it cannot decompose ends up in the
    location with an empty time.
    """

    def split_remainder(self, remainder: str) -> tuple[str, str]:
        """Separate the time/setting pair from the location.

        Args:
            remainder: Text of the scene line after the scene number

        Returns:
            Tuple of (time, location), either of which may be empty
        """
        remainder = LEADING_SEPARATORS.sub("", remainder).strip()
        pair = TIME_SETTING_PAIR.match(remainder)
        if not pair:
            return "", remainder

        time = PAIR_SEPARATOR.sub(" - ", pair.group(0), count=1)
        location = LEADING_SEPARATORS.sub("", remainder[pair.end() :]).strip()
        return time, location

    def assemble(
        self,
        match: re.Match[str],
        cursor: LineCursor,
        is_boundary: Callable[[str], bool],
    ) -> tuple[SceneHeading, int]:
        """Build the heading for the line under the cursor.

        Args:
            match: Scene prefix match against the current line
            cursor: Cursor positioned on the scene line; only peeked at
            is_boundary: Whether a line would start an element of its own
                (basmala, scene heading, transition or character cue)

        Returns:
            Tuple of (heading, number of lines consumed)
        """
        scene_number = canonical_scene_number(match.group(1))
        time, location = self.split_remainder(match.string[match.end() :])

        if not location:
            following = cursor.peek()
            if following and not is_boundary(following):
                return SceneHeading(scene_number, time, following), 2

        return SceneHeading(scene_number, time, location), 1
