"""Namespace discovery for model XML documents.

The resolver is fed while the element tree is built: every visited
instance registers its package, discriminators register ``xsi`` and
extension attributes register or require prefixes. Once the tree is
complete, ``finalize`` yields the declarations for the document root in
first-use order. Every fatal namespace problem surfaces before any text is
produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import NamespaceConflictError, UnknownNamespaceError
from .constants import BUILTIN_NAMESPACES, XML_PREFIX, XMLNS

if TYPE_CHECKING:
    from modelxml.application.ports.services import LoggerPort
    from modelxml.domain.entities.metamodel import Package


@dataclass(frozen=True, slots=True)
class Namespace:
    prefix: str
    uri: str

    @property
    def declaration(self) -> str:
        return f"{XMLNS}:{self.prefix}"


class NamespaceResolver:
    pass

    def __init__(self, logger: LoggerPort | None = None) -> None:
        self._logger = logger
        self._by_prefix: dict[str, Namespace] = {}
        self._by_uri: dict[str, Namespace] = {}
        self._required: dict[str, str] = {}

    def register(self, prefix: str, uri: str) -> Namespace:
        known = self._by_prefix.get(prefix)
        if known is not None:
            if known.uri != uri:
                raise NamespaceConflictError(
                    f"Prefix '{prefix}' is bound to both '{known.uri}' and '{uri}'"
                )
            return known
        other = self._by_uri.get(uri)
        if other is not None:
            raise NamespaceConflictError(
                f"Namespace '{uri}' is bound to both '{other.prefix}' and '{prefix}'"
            )
        namespace = Namespace(prefix, uri)
        self._by_prefix[prefix] = namespace
        self._by_uri[uri] = namespace
        if self._logger is not None:
            self._logger.log_namespace_registered(prefix, uri)
        return namespace

    def register_package(self, package: Package) -> Namespace:
        return self.register(package.prefix, package.uri)

    def register_builtin(self, prefix: str) -> Namespace:
        return self.register(prefix, BUILTIN_NAMESPACES[prefix])

    def require(self, prefix: str, used_by: str) -> None:
        if prefix == XML_PREFIX or prefix in self._by_prefix:
            return
        if prefix in BUILTIN_NAMESPACES:
            self.register_builtin(prefix)
            return
        self._required.setdefault(prefix, used_by)

    def lookup(self, prefix: str) -> str | None:
        namespace = self._by_prefix.get(prefix)
        return namespace.uri if namespace is not None else None

    def finalize(self) -> tuple[Namespace, ...]:
        missing = [
            f"'{prefix}' (used by {used_by})"
            for prefix, used_by in self._required.items()
            if prefix not in self._by_prefix
        ]
        if missing:
            raise UnknownNamespaceError(
                f"Undeclared namespace prefix: {', '.join(missing)}"
            )
        return tuple(self._by_prefix.values())

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._by_prefix
