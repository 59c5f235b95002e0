"""
Tests for input sanitization utilities
"""

from metabox.utils.sanitize import (
    autop,
    filter_rich_text,
    sanitize_html,
    sanitize_plain_text,
    sanitize_rich_content,
)


class TestPlainTextSanitization:
    """Test plain text sanitization (strip all HTML)"""

    def test_strips_script_tags(self):
        clean = sanitize_plain_text("<script>alert('xss')</script>Hello World")
        assert "<script>" not in clean
        assert "Hello World" in clean

    def test_normalizes_whitespace(self):
        assert sanitize_plain_text("Hello    \n\n\t  World ") == "Hello World"

    def test_keeps_literal_ampersands_and_brackets(self):
        assert sanitize_plain_text("Fish & Chips < 5") == "Fish & Chips < 5"

    def test_drops_percent_encoded_octets(self):
        assert sanitize_plain_text("a%20b%3Cc") == "abc"

    def test_handles_none_input(self):
        assert sanitize_plain_text(None) == ""


class TestRichContentSanitization:
    """Test rich content sanitization (allow safe HTML)"""

    def test_preserves_safe_html(self):
        clean = sanitize_rich_content("<p>This is <strong>bold</strong> text</p>")
        assert clean == "<p>This is <strong>bold</strong> text</p>"

    def test_removes_onclick_attributes(self):
        clean = sanitize_rich_content("<div onclick=\"alert('xss')\">Click me</div>")
        assert "onclick" not in clean
        assert "Click me" in clean

    def test_escapes_script_tags(self):
        clean = sanitize_html("<script>alert(1)</script>")
        assert "<script>" not in clean

    def test_strip_mode_removes_all_tags(self):
        assert sanitize_html("<p>hi</p>", strip=True) == "hi"


class TestFilterPipeline:
    """Test the rich-text filter pipeline"""

    def test_filters_run_in_order(self):
        calls = []

        def first(html):
            calls.append("first")
            return html + "1"

        def second(html):
            calls.append("second")
            return html + "2"

        assert filter_rich_text("<p>x</p>", [first, second]) == "<p>x</p>12"
        assert calls == ["first", "second"]

    def test_no_filters_only_sanitizes(self):
        assert filter_rich_text("<em>ok</em>") == "<em>ok</em>"

    def test_none_is_empty(self):
        assert filter_rich_text(None) == ""


class TestAutop:
    """Test paragraph wrapping"""

    def test_wraps_blocks_in_paragraphs(self):
        assert autop("One\n\nTwo") == "<p>One</p>\n<p>Two</p>"

    def test_single_newlines_become_breaks(self):
        assert autop("Line 1\nLine 2") == "<p>Line 1<br />\nLine 2</p>"

    def test_block_level_html_is_left_alone(self):
        assert autop("<ul><li>a</li></ul>\n\nText") == "<ul><li>a</li></ul>\n<p>Text</p>"
