"""Tests for devboard.sanitize.entities."""

import pytest

from devboard.sanitize.entities import decode_entities, decode_then_escape, escape_html


class TestEscapeHtml:
    @pytest.mark.parametrize("value", ["", None])
    def test_empty_input(self, value) -> None:
        assert escape_html(value) == ""

    def test_special_characters(self) -> None:
        assert escape_html("<script>") == "&lt;script&gt;"
        assert escape_html('"quotes"') == "&quot;quotes&quot;"
        assert escape_html("'apostrophe'") == "&#039;apostrophe&#039;"
        assert escape_html("a & b") == "a &amp; b"

    def test_mixed_content(self) -> None:
        result = escape_html('<div class="test">Hello & goodbye</div>')
        assert result == "&lt;div class=&quot;test&quot;&gt;Hello &amp; goodbye&lt;/div&gt;"

    def test_already_escaped_content_is_escaped_again(self) -> None:
        assert escape_html("&amp;") == "&amp;amp;"

    def test_other_characters_untouched(self) -> None:
        assert escape_html("café ✓ 100%") == "café ✓ 100%"


class TestDecodeEntities:
    def test_named_entities(self) -> None:
        text = "&nbsp;&lt;&gt;&amp;&quot;&#039;&#x27;"
        assert decode_entities(text) == " <>&\"''"

    def test_numeric_references(self) -> None:
        assert decode_entities("&#60;b&#62;") == "<b>"
        assert decode_entities("&#x3C;&#x3c;") == "<<"
        assert decode_entities("&#128512;") == "\U0001F600"

    def test_unknown_entities_left_verbatim(self) -> None:
        assert decode_entities("&copy; &bogus; & alone") == "&copy; &bogus; & alone"

    def test_out_of_range_reference_left_verbatim(self) -> None:
        assert decode_entities("&#9999999999;") == "&#9999999999;"
        assert decode_entities("&#xD800;") == "&#xD800;"

    def test_overlong_reference_left_verbatim(self) -> None:
        long_decimal = "&#" + "1" * 5000 + ";"
        long_hex = "&#x" + "f" * 9 + ";"
        assert decode_entities(long_decimal) == long_decimal
        assert decode_entities(long_hex) == long_hex
        assert decode_entities("&#00000065;") == "A"

    def test_single_pass(self) -> None:
        assert decode_entities("&amp;lt;") == "&lt;"
        assert decode_entities("&amp;#60;") == "&#60;"

    def test_empty_input(self) -> None:
        assert decode_entities(None) == ""


class TestDecodeThenEscape:
    def test_encoded_tag_stays_inert(self) -> None:
        assert decode_then_escape("&lt;script&gt;") == "&lt;script&gt;"

    def test_numeric_encoded_tag_stays_inert(self) -> None:
        assert decode_then_escape("&#60;img src=x&#62;") == "&lt;img src=x&gt;"

    def test_nbsp_becomes_space(self) -> None:
        assert decode_then_escape("a&nbsp;b") == "a b"
