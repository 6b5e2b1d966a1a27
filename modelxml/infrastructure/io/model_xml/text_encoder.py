"""Escaping and CDATA decisions for attribute values and text content."""

import re
from xml.sax.saxutils import escape

from modelxml.domain.entities.element import Text

from .constants import CDATA_END, CDATA_START

# Opening, closing and empty tags, plus comments.
_MARKUP = re.compile(
    r"<(?:/?[A-Za-z_][\w.:-]*(?:\s[^<>]*)?/?|!--.*?--)>", re.DOTALL
)


class TextEncoder:
    # Whitespace other than a plain space is normalized away by parsers.
    ATTRIBUTE_ENTITIES = {
        '"': "&quot;",
        "\n": "&#10;",
        "\r": "&#13;",
        "\t": "&#9;",
    }

    def escape_attribute(self, value: str) -> str:
        return escape(value, self.ATTRIBUTE_ENTITIES)

    def escape_text(self, value: str) -> str:
        return escape(value)

    def is_markup(self, value: str) -> bool:
        return _MARKUP.search(value) is not None

    def encode_text(self, value: str) -> Text:
        return Text(value, cdata=self.is_markup(value))

    def render(self, text: Text) -> str:
        if not text.cdata:
            return self.escape_text(text.value)
        # "]]>" cannot appear inside a section; close and reopen around the ">".
        body = text.value.replace(CDATA_END, f"]]{CDATA_END}{CDATA_START}>")
        return f"{CDATA_START}{body}{CDATA_END}"
