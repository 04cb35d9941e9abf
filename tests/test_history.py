"""Tests for the bounded undo/redo history."""

import pytest

from arscript.history import ScriptHistory


class TestScriptHistory:
    """Test snapshot history."""

    def test_empty(self):
        history = ScriptHistory()
        assert history.current is None
        assert len(history) == 0
        assert not history.can_undo
        assert not history.can_redo
        assert history.undo() is None
        assert history.redo() is None

    def test_undo_and_redo(self):
        history = ScriptHistory()
        for text in ("أ", "أب", "أبج"):
            history.push(text)

        assert history.undo() == "أب"
        assert history.undo() == "أ"
        assert history.undo() is None
        assert history.current == "أ"
        assert history.redo() == "أب"
        assert history.redo() == "أبج"
        assert history.redo() is None

    def test_push_clears_redo(self):
        history = ScriptHistory()
        history.push("أ")
        history.push("ب")
        history.undo()
        assert history.can_redo

        history.push("ج")
        assert not history.can_redo
        assert history.current == "ج"

    def test_repeated_snapshot_ignored(self):
        history = ScriptHistory()
        history.push("أ")
        history.push("أ")
        assert len(history) == 1

    def test_limit_drops_oldest(self):
        history = ScriptHistory(limit=3)
        for index in range(5):
            history.push(str(index))

        assert len(history) == 3
        assert history.undo() == "3"
        assert history.undo() == "2"
        assert history.undo() is None

    def test_default_limit(self):
        assert ScriptHistory().limit == 20

    @pytest.mark.parametrize("limit", [0, -1])
    def test_rejects_bad_limit(self, limit):
        with pytest.raises(ValueError, match="at least 1"):
            ScriptHistory(limit=limit)

    def test_clear(self):
        history = ScriptHistory()
        history.push("أ")
        history.push("ب")
        history.undo()
        history.clear()
        assert history.current is None
        assert not history.can_redo
