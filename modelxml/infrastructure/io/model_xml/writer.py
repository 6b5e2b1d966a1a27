"""Writer for model XML documents.

This module ties the builder, the namespace resolver and the emitter
together. Serialization is two-phase: the whole element tree is built first
so every namespace in use is known before the root tag is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modelxml.config import WriterConfig
from modelxml.infrastructure.logging.null_logger import NullLogger

from ..exceptions import ModelXMLError
from .builder import ElementSerializer
from .emitter import Emitter
from .namespaces import Namespace, NamespaceResolver
from .text_encoder import TextEncoder

if TYPE_CHECKING:
    from modelxml.application.ports.repositories import TypeRegistryPort
    from modelxml.application.ports.services import LoggerPort
    from modelxml.domain.entities.element import Element
    from modelxml.domain.entities.metamodel import Instance


class ModelXMLWriter:
    pass

    def __init__(
        self,
        registry: TypeRegistryPort,
        config: WriterConfig | None = None,
        *,
        logger: LoggerPort | None = None,
        encoder: TextEncoder | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or WriterConfig()
        self.logger = logger or NullLogger()
        self.encoder = encoder or TextEncoder()

    def build_tree(self, root: Instance) -> tuple[Element, tuple[Namespace, ...]]:
        """Build the element tree for ``root`` and its namespace declarations.

        Raises:
            ModelXMLError: If a type cannot be resolved, a reference has no
                identifier or the namespaces in use conflict
        """
        namespaces = NamespaceResolver(self.logger)
        serializer = ElementSerializer(
            self.registry, namespaces, encoder=self.encoder, logger=self.logger
        )
        element = serializer.build(root)
        return element, namespaces.finalize()

    def to_xml(self, root: Instance) -> str:
        """Serialize ``root`` and everything it contains to an XML string."""
        type_name = getattr(root, "type_name", type(root).__name__)
        self.logger.log_serialization_start(type_name)
        try:
            element, namespaces = self.build_tree(root)
        except ModelXMLError as exc:
            self.logger.error(f"Cannot serialize {type_name}: {exc}")
            raise
        text = Emitter(self.encoder).emit(
            element, namespaces, preamble=self.config.preamble
        )
        self.logger.log_serialization_complete(
            element.name, sum(1 for _ in element.iter()), namespaces
        )
        return text


def build_model_xml_tree(
    root: Instance,
    registry: TypeRegistryPort,
) -> tuple[Element, tuple[Namespace, ...]]:
    """Build the abstract element tree for ``root``.

    Args:
        root: The instance to serialize
        registry: Meta-model the instance graph was built against

    Returns:
        The root element and the namespace declarations it must carry
    """
    return ModelXMLWriter(registry).build_tree(root)


def serialize(
    config: WriterConfig | None,
    root: Instance,
    registry: TypeRegistryPort,
    *,
    logger: LoggerPort | None = None,
) -> str:
    """Serialize an instance graph to XML text.

    Args:
        config: Writer configuration; defaults to ``WriterConfig()``
        root: The document root instance
        registry: Meta-model the instance graph was built against
        logger: Optional logger for progress and warnings

    Returns:
        The XML document as a string
    """
    return ModelXMLWriter(registry, config, logger=logger).to_xml(root)
