from .element import Element, Text
from .metamodel import (
    AliasPolicy,
    Instance,
    Package,
    PropertyDescriptor,
    PropertyShape,
    TypeDescriptor,
)

__all__ = [
    "AliasPolicy",
    "Element",
    "Instance",
    "Package",
    "PropertyDescriptor",
    "PropertyShape",
    "Text",
    "TypeDescriptor",
]
