from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Text:
    value: str
    cdata: bool = False


@dataclass(slots=True)
class Element:
    prefix: str
    local: str
    uri: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[Element] = field(default_factory=list)
    text: Text | None = None

    @property
    def name(self) -> str:
        return f"{self.prefix}:{self.local}" if self.prefix else self.local

    def set(self, name: str, value: str) -> None:
        self.attributes.append((name, value))

    def append(self, child: Element) -> Element:
        self.children.append(child)
        return child

    def get(self, name: str) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def is_empty(self) -> bool:
        return not self.children and self.text is None

    def iter(self) -> Iterator[Element]:
        """Yield this element and its descendants in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))
