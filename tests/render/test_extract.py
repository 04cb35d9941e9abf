"""Tests for plain-text extraction from rendered HTML."""

from arscript.parser import Action, Character, Dialogue, SceneHeading, classify
from arscript.render import extract_plain_text, render_document, render_elements


class TestExtractPlainText:
    """Test recovering script text from markup."""

    def test_one_paragraph_per_block(self):
        html = render_elements([Character("أحمد"), Dialogue("نعم")])
        assert extract_plain_text(html) == "أحمد:\n\nنعم"

    def test_scene_heading_on_one_line(self):
        html = render_elements(
            [SceneHeading("مشهد 1", "ليل - داخلي", "المستشفى – غرفة")]
        )
        assert extract_plain_text(html) == "مشهد 1 ليل - داخلي المستشفى – غرفة"

    def test_empty_scene_parts_are_skipped(self):
        html = render_elements([SceneHeading("مشهد 4")])
        assert extract_plain_text(html) == "مشهد 4"

    def test_entities_are_decoded(self):
        html = render_elements([Action("3 < 5 & \"نعم\"")])
        assert extract_plain_text(html) == '3 < 5 & "نعم"'

    def test_ignores_document_chrome(self):
        """Title and stylesheet are not script text."""
        html = render_document([Action("يجلس.")], title="فيلم")
        assert extract_plain_text(html) == "يجلس."

    def test_no_blocks(self):
        assert extract_plain_text("<p>نص</p>") == ""


class TestIdempotence:
    """Classifying extracted text reproduces the original elements."""

    def test_sample_script_round_trip(self, sample_script):
        elements = classify(sample_script)
        text = extract_plain_text(render_document(elements))
        assert classify(text) == elements

    def test_continuation_heading_round_trip(self):
        """A location pulled from the next line stays on the heading line."""
        elements = classify("مشهد 2 نهار-خارجي\nشارع المدينة المزدحم\nتمر السيارات.")
        assert classify(extract_plain_text(render_elements(elements))) == elements

    def test_heading_without_location_round_trip(self):
        """The blank line after a bare heading keeps the next block out of it."""
        elements = classify("مشهد 3 ليل-داخلي\n\nيصمت الجميع طويلاً.")
        assert classify(extract_plain_text(render_elements(elements))) == elements
