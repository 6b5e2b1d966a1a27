from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ..io.model_xml.namespaces import Namespace


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_serialization_start(self, type_name: str) -> None:
        return None

    @override
    def log_namespace_registered(self, prefix: str, uri: str) -> None:
        return None

    @override
    def log_serialization_complete(
        self,
        root_tag: str,
        element_count: int,
        namespaces: tuple[Namespace, ...],
    ) -> None:
        return None
