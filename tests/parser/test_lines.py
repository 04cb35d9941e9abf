"""Tests for line normalization and the lookahead cursor."""

import pytest

from arscript.parser.lines import LineCursor, normalize_lines


class TestNormalizeLines:
    """Test splitting raw text into trimmed lines."""

    def test_trims_each_line(self):
        """Leading and trailing whitespace is removed from every line."""
        assert normalize_lines("  أحمد:  \n\tمرحباً\t") == ["أحمد:", "مرحباً"]

    def test_keeps_blank_lines(self):
        """Blank lines survive as empty strings."""
        assert normalize_lines("أ\n\n   \nب") == ["أ", "", "", "ب"]

    def test_crlf_input(self):
        """Carriage returns from CRLF input are trimmed."""
        assert normalize_lines("أ\r\nب\r\n") == ["أ", "ب", ""]

    def test_empty_text(self):
        """Empty text is a single blank line."""
        assert normalize_lines("") == [""]


class TestLineCursor:
    """Test the forward-only cursor."""

    def test_walks_lines(self):
        """Current follows advance until the end."""
        cursor = LineCursor(["أ", "ب", "ج"])
        assert cursor.current == "أ"
        cursor.advance()
        assert cursor.current == "ب"
        assert cursor.position == 1
        cursor.advance(2)
        assert cursor.at_end

    def test_peek_does_not_consume(self):
        """Peeking leaves the position untouched."""
        cursor = LineCursor(["أ", "ب"])
        assert cursor.peek() == "ب"
        assert cursor.peek(0) == "أ"
        assert cursor.position == 0

    def test_peek_past_end(self):
        """Peeking beyond the last line returns None."""
        cursor = LineCursor(["أ"])
        assert cursor.peek() is None
        assert cursor.peek(5) is None

    def test_advance_clamps_at_end(self):
        """Advancing past the end stops at the end."""
        cursor = LineCursor(["أ", "ب"])
        cursor.advance(10)
        assert cursor.position == 2
        assert cursor.at_end

    @pytest.mark.parametrize("count", [0, -1])
    def test_advance_requires_progress(self, count):
        """The cursor never stands still or moves backwards."""
        cursor = LineCursor(["أ"])
        with pytest.raises(ValueError, match="at least one line"):
            cursor.advance(count)

    def test_len(self):
        """Length is the number of lines."""
        assert len(LineCursor(["أ", "", "ب"])) == 3
