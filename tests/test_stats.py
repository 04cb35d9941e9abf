"""Tests for script statistics."""

import pytest

from arscript.parser import Action, Character, Dialogue, SceneHeading, classify
from arscript.stats import ScriptStats, count_elements, count_text, estimate_pages


class TestEstimatePages:
    """Test page estimation."""

    @pytest.mark.parametrize(
        ("words", "expected"),
        [(0, 1), (1, 1), (250, 1), (251, 2), (1000, 4)],
    )
    def test_default_page_size(self, words, expected):
        assert estimate_pages(words) == expected

    def test_custom_page_size(self):
        assert estimate_pages(10, words_per_page=3) == 4

    @pytest.mark.parametrize("words_per_page", [0, -5])
    def test_rejects_non_positive_page_size(self, words_per_page):
        with pytest.raises(ValueError, match="words_per_page"):
            estimate_pages(10, words_per_page=words_per_page)


class TestCountText:
    """Test counting raw text."""

    def test_sample_script(self, sample_script):
        stats = count_text(sample_script)
        assert stats.scenes == 2
        assert stats.words == len(sample_script.split())
        assert stats.pages == 1

    def test_scene_markers_anywhere(self):
        """Scene numbers are counted wherever they appear."""
        assert count_text("مشهد 1\nيعود إلى مشهد 2\nم.3").scenes == 3

    def test_empty_text(self):
        assert count_text("") == ScriptStats(scenes=0, words=0, pages=1)

    def test_rejects_bad_page_size(self):
        with pytest.raises(ValueError):
            count_text("نص", words_per_page=0)


class TestCountElements:
    """Test counting classified elements."""

    def test_counts_headings_and_words(self):
        elements = [
            SceneHeading("مشهد 1", "ليل - داخلي", "المستشفى"),
            Action("يدخل الطبيب."),
            Character("أحمد"),
            Dialogue("هل سينجو؟"),
        ]
        # 2 + 3 + 1 words in the heading, then 2, 1 and 2
        assert count_elements(elements) == ScriptStats(scenes=1, words=11, pages=1)

    def test_matches_classified_sample(self, sample_script):
        stats = count_elements(classify(sample_script), words_per_page=10)
        assert stats.scenes == 2
        assert stats.pages == -(-stats.words // 10)

    def test_to_dict(self):
        assert ScriptStats(2, 30, 1).to_dict() == {"scenes": 2, "words": 30, "pages": 1}
