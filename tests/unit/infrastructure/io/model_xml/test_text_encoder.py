"""Unit tests for TextEncoder escaping and CDATA selection."""

import pytest

from modelxml.domain.entities.element import Text
from modelxml.infrastructure.io.model_xml.text_encoder import TextEncoder


@pytest.fixture
def encoder():
    return TextEncoder()


class TestAttributeEscaping:
    def test_newline_becomes_character_reference(self, encoder):
        assert encoder.escape_attribute("FOO\nBAR") == "FOO&#10;BAR"

    def test_carriage_return_and_tab_become_character_references(self, encoder):
        assert encoder.escape_attribute("A\r\nB\tC") == "A&#13;&#10;B&#9;C"

    def test_markup_characters_and_quotes(self, encoder):
        assert encoder.escape_attribute('<a href="x">&</a>') == (
            "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
        )

    def test_single_quotes_are_kept(self, encoder):
        assert encoder.escape_attribute("it's") == "it's"


class TestTextEscaping:
    def test_escapes_ampersand_and_angle_brackets(self, encoder):
        assert encoder.escape_text("1 < 2 & 3 > 2") == "1 &lt; 2 &amp; 3 &gt; 2"

    def test_quotes_and_newlines_are_untouched(self, encoder):
        assert encoder.escape_text('say "hi"\nbye') == 'say "hi"\nbye'


class TestCDATA:
    @pytest.mark.parametrize(
        "value",
        [
            "<h2>HTML markup</h2>",
            "before <br/> after",
            '<a href="x">link',
            "text</p>",
            "<!-- note -->",
        ],
    )
    def test_markup_is_detected(self, encoder, value):
        assert encoder.is_markup(value)

    @pytest.mark.parametrize("value", ["textContent", "a < b", "x > y", "1 <2", "<>"])
    def test_plain_text_is_not_markup(self, encoder, value):
        assert not encoder.is_markup(value)

    def test_encode_text_tags_markup(self, encoder):
        assert encoder.encode_text("<b>x</b>") == Text("<b>x</b>", cdata=True)
        assert encoder.encode_text("plain") == Text("plain", cdata=False)

    def test_render_cdata_verbatim(self, encoder):
        rendered = encoder.render(Text("<h2>HTML & markup</h2>", cdata=True))

        assert rendered == "<![CDATA[<h2>HTML & markup</h2>]]>"

    def test_render_splits_cdata_terminator(self, encoder):
        rendered = encoder.render(Text("<b>a]]>b</b>", cdata=True))

        assert rendered == "<![CDATA[<b>a]]]]><![CDATA[>b</b>]]>"

    def test_render_plain_text_escapes(self, encoder):
        assert encoder.render(Text("a & b")) == "a &amp; b"
