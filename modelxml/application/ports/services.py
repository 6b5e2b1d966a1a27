from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...infrastructure.io.model_xml.namespaces import Namespace


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_serialization_start(self, type_name: str) -> None: ...

    def log_namespace_registered(self, prefix: str, uri: str) -> None: ...

    def log_serialization_complete(
        self,
        root_tag: str,
        element_count: int,
        namespaces: tuple[Namespace, ...],
    ) -> None: ...
