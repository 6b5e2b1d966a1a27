"""I/O infrastructure: model XML writer, XML helpers and error types."""

from .exceptions import (
    AttributeConflictError,
    CyclicContainmentError,
    ModelXMLError,
    NamespaceConflictError,
    UnknownNamespaceError,
    UnknownPackageError,
    UnknownTypeError,
    UnresolvedReferenceError,
    UnresolvedTypeError,
)
from .model_xml import ModelXMLWriter, serialize

__all__ = [
    "AttributeConflictError",
    "CyclicContainmentError",
    "ModelXMLError",
    "ModelXMLWriter",
    "NamespaceConflictError",
    "UnknownNamespaceError",
    "UnknownPackageError",
    "UnknownTypeError",
    "UnresolvedReferenceError",
    "UnresolvedTypeError",
    "serialize",
]
