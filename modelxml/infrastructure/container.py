from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..config import ConfigLoader, WriterConfig
from .io.model_xml.writer import ModelXMLWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.repositories import TypeRegistryPort
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: WriterConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._config = config
        self._logger_instance: LoggerPort | None = None

    @property
    def config(self) -> WriterConfig:
        if self._config is None:
            self._config = ConfigLoader.load()
        return self._config

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_writer(self, registry: TypeRegistryPort) -> ModelXMLWriter:
        return ModelXMLWriter(registry, self.config, logger=self.create_logger())

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
