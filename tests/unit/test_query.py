"""Unit tests for tag stripping and glyph queries."""
import pytest

from tmpnotation.query import (
    get_unicode_subscripts,
    get_unicode_superscripts,
    has_formatting,
    has_unicode_scripts,
    has_unicode_subscript,
    has_unicode_superscript,
    plain_text,
)

WATER = "H<sub><size=60%>2</size></sub>O"


class TestPlainText:
    """Test plain_text()."""

    def test_strips_generated_tags(self):
        assert plain_text("A<sub><size=60%>0</size></sub>") == "A0"

    def test_strips_fraction(self):
        markup = "<sup><size=70%>1</size></sup>/<sub><size=70%>2</size></sub>"
        assert plain_text(markup) == "1/2"

    def test_strips_any_tag(self):
        assert plain_text("<b>bold</b> and <i>it</i>") == "bold and it"

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_or_empty(self, text):
        assert plain_text(text) == text

    def test_idempotent(self):
        once = plain_text(WATER + " <<x>>")
        assert plain_text(once) == once

    def test_text_without_tags_unchanged(self):
        assert plain_text("a - b = c") == "a - b = c"


class TestHasFormatting:
    """Test has_formatting()."""

    def test_generated_markup(self):
        assert has_formatting(WATER) is True

    def test_size_tag_alone(self):
        assert has_formatting("<size=50%>big</size>") is True

    def test_plain_text(self):
        assert has_formatting("H2O") is False

    def test_unrelated_tags(self):
        assert has_formatting("<b>bold</b>") is False

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_or_empty(self, text):
        assert has_formatting(text) is False


class TestGlyphDetection:
    """Test has_unicode_*()."""

    def test_superscript(self):
        assert has_unicode_superscript("x²y³") is True
        assert has_unicode_superscript("H₂O") is False

    def test_subscript(self):
        assert has_unicode_subscript("H₂O") is True
        assert has_unicode_subscript("x²") is False

    def test_either(self):
        assert has_unicode_scripts("x²₁") is True
        assert has_unicode_scripts("x2") is False

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_or_empty(self, text):
        assert has_unicode_superscript(text) is False
        assert has_unicode_subscript(text) is False
        assert has_unicode_scripts(text) is False


class TestGlyphListing:
    """Test get_unicode_superscripts() / get_unicode_subscripts()."""

    def test_superscripts_in_order(self):
        assert get_unicode_superscripts("x²y³z⁴") == ["²", "³", "⁴"]

    def test_duplicates_listed_once(self):
        assert get_unicode_subscripts("H₂O + CO₂") == ["₂"]

    def test_first_occurrence_order(self):
        assert get_unicode_superscripts("a³b²c³") == ["³", "²"]

    def test_other_table_ignored(self):
        assert get_unicode_superscripts("H₂O") == []
        assert get_unicode_subscripts("x²") == []

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_or_empty(self, text):
        assert get_unicode_superscripts(text) == []
        assert get_unicode_subscripts(text) == []
