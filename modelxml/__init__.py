"""modelxml package.

Serializes instance graphs built against a declared meta-model of typed,
namespaced packages into compact, namespace-qualified XML.

Features:
- Namespace discovery with all declarations hoisted to the document root
- Attribute, element, reference and embedded-object property shapes
- Polymorphic values with ``xsi:type`` discriminators
- Entity escaping with CDATA for markup-like body text
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("modelxml")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from modelxml.config import ConfigLoader, WriterConfig
from modelxml.domain.entities.metamodel import (
    AliasPolicy,
    Instance,
    Package,
    PropertyDescriptor,
    TypeDescriptor,
)
from modelxml.infrastructure.io.exceptions import ModelXMLError
from modelxml.infrastructure.io.model_xml.writer import ModelXMLWriter, serialize
from modelxml.infrastructure.registry.type_registry import MetaModelRegistry

__all__ = [
    "__version__",
    # Writer
    "ModelXMLWriter",
    "serialize",
    "WriterConfig",
    "ConfigLoader",
    "ModelXMLError",
    # Meta-model
    "AliasPolicy",
    "Instance",
    "MetaModelRegistry",
    "Package",
    "PropertyDescriptor",
    "TypeDescriptor",
]
