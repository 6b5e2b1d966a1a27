from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels

if TYPE_CHECKING:
    from ..io.model_xml.namespaces import Namespace


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    type_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "documents_written": 0,
        "elements_written": 0,
        "namespaces_declared": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_serialization_start(self, type_name: str) -> None:
        self.set_context(type_name=type_name, operation="serialize")
        if self._context is not None:
            self._context.start_time = datetime.now()
        self.debug(f"Serializing {type_name}")

    @override
    def log_namespace_registered(self, prefix: str, uri: str) -> None:
        self._stats["namespaces_declared"] += 1
        self.debug(f"  xmlns:{prefix} -> {uri}")

    @override
    def log_serialization_complete(
        self,
        root_tag: str,
        element_count: int,
        namespaces: tuple[Namespace, ...],
    ) -> None:
        self._stats["documents_written"] += 1
        self._stats["elements_written"] += element_count
        msg = (
            f"Wrote <{root_tag}>: {element_count:,} elements, "
            f"{len(namespaces)} namespace declarations"
        )
        if self._context is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" in {self._context.elapsed_ms():.1f} ms"
        self.verbose(msg)
        self.clear_context()

    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        self.console.print()
        self.console.print("[bold]Serialization statistics[/bold]")
        self.console.print(
            f"[dim]  Documents written: {self._stats['documents_written']}[/dim]"
        )
        self.console.print(
            f"[dim]  Elements written: {self._stats['elements_written']:,}[/dim]"
        )
        if self._stats["warnings"] > 0:
            self.console.print(
                f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
            )
        if self._stats["errors"] > 0:
            self.console.print(f"[dim red]  Errors: {self._stats['errors']}[/dim red]")

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.type_name:
            parts.append(self._context.type_name)
        if self._context.operation:
            parts.append(self._context.operation)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
