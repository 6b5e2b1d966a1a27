"""Model XML generation module.

This module serializes model instance graphs to namespace-qualified XML.

The module is organized into focused components:
- constants: Namespace bindings and markup constants
- utils: Value helpers (absence, scalar formatting)
- text_encoder: Escaping and CDATA decisions
- namespaces: Namespace discovery and root declarations
- builder: Element tree construction
- emitter: Stringification
- writer: The public writer
"""

from .builder import ElementSerializer
from .emitter import Emitter
from .namespaces import Namespace, NamespaceResolver
from .text_encoder import TextEncoder
from .writer import ModelXMLWriter, build_model_xml_tree, serialize

__all__ = [
    "ElementSerializer",
    "Emitter",
    "ModelXMLWriter",
    "Namespace",
    "NamespaceResolver",
    "TextEncoder",
    "build_model_xml_tree",
    "serialize",
]
