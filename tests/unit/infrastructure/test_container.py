"""Tests for dependency injection container."""

from rich.console import Console

from modelxml.config import WriterConfig
from modelxml.infrastructure import DependencyContainer, create_default_container
from modelxml.infrastructure.io.model_xml.writer import ModelXMLWriter
from modelxml.infrastructure.logging import ConsoleLogger, NullLogger


class MockLogger:
    """Mock logger for testing overrides."""

    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def log_serialization_start(self, type_name: str) -> None:
        self.messages.append(("start", type_name))

    def log_namespace_registered(self, prefix: str, uri: str) -> None:
        self.messages.append(("namespace", prefix))

    def log_serialization_complete(self, root_tag, element_count, namespaces) -> None:
        self.messages.append(("complete", root_tag))


class TestDependencyContainer:
    def test_create_container_with_defaults(self):
        container = DependencyContainer()

        assert container.verbose == 0
        assert container.console is not None
        assert container.use_null_logger is False

    def test_logger_is_singleton(self):
        container = DependencyContainer(console=Console(file=None))

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert container.create_logger() is logger

    def test_null_logger(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_logger(), NullLogger)

    def test_config_is_loaded_lazily(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "modelxml.toml").write_text("[writer]\npreamble = false\n")

        assert DependencyContainer().config.preamble is False

    def test_create_writer(self, model):
        container = DependencyContainer(
            use_null_logger=True, config=WriterConfig(preamble=False)
        )

        writer = container.create_writer(model)

        assert isinstance(writer, ModelXMLWriter)
        assert writer.to_xml(model.create("props:Root")) == (
            '<props:root xmlns:props="http://properties" />'
        )

    def test_override_logger(self, model):
        container = DependencyContainer(config=WriterConfig(preamble=False))
        mock_logger = MockLogger()
        container.override_logger(mock_logger)

        container.create_writer(model).to_xml(model.create("props:Root"))

        assert mock_logger.messages == [
            ("start", "props:Root"),
            ("namespace", "props"),
            ("complete", "props:root"),
        ]

    def test_create_default_container(self):
        container = create_default_container(verbose=1)

        assert container.verbose == 1
