"""Stringification of model XML element trees.

Output is compact: no indentation and no whitespace between tags. Namespace
declarations are written on the root element only, ahead of its own
attributes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .constants import XML_DECLARATION
from .text_encoder import TextEncoder

if TYPE_CHECKING:
    from modelxml.domain.entities.element import Element

    from .namespaces import Namespace


class Emitter:
    pass

    def __init__(self, encoder: TextEncoder | None = None) -> None:
        self.encoder = encoder or TextEncoder()

    def emit(
        self,
        root: Element,
        namespaces: Sequence[Namespace] = (),
        *,
        preamble: bool = False,
    ) -> str:
        parts: list[str] = []
        if preamble:
            parts.append(f"{XML_DECLARATION}\n")
        declarations = [(ns.declaration, ns.uri) for ns in namespaces]
        self._write(parts, root, declarations)
        return "".join(parts)

    def _write(
        self,
        parts: list[str],
        root: Element,
        declarations: Iterable[tuple[str, str]] = (),
    ) -> None:
        if not self._open_tag(parts, root, declarations):
            return
        # Elements whose start tag is written but whose end tag is not.
        stack = [(root, iter(root.children))]
        while stack:
            element, children = stack[-1]
            child = next(children, None)
            if child is None:
                parts.append(f"</{element.name}>")
                stack.pop()
            elif self._open_tag(parts, child):
                stack.append((child, iter(child.children)))

    def _open_tag(
        self,
        parts: list[str],
        element: Element,
        declarations: Iterable[tuple[str, str]] = (),
    ) -> bool:
        """Write the start tag and text of ``element``.

        Returns:
            False when the element was self-closed
        """
        parts.append(f"<{element.name}")
        for name, value in (*declarations, *element.attributes):
            parts.append(f' {name}="{self.encoder.escape_attribute(value)}"')
        if element.is_empty():
            parts.append(" />")
            return False
        parts.append(">")
        if element.text is not None:
            parts.append(self.encoder.render(element.text))
        return True
