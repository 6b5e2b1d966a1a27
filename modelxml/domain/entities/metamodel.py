"""Meta-model descriptors and model instances.

Packages own types, types own ordered properties. Descriptors are immutable;
instances are plain caller-owned containers that the writer only reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Any

from ...constants import Defaults, Primitives


class AliasPolicy(StrEnum):
    NONE = "none"
    LOWER_CASE = "lowerCase"

    def apply(self, name: str) -> str:
        if self is AliasPolicy.LOWER_CASE and name:
            return name[0].lower() + name[1:]
        return name


class PropertyShape(Enum):
    ATTRIBUTE = "attribute"
    BODY_TEXT = "body"
    REFERENCE = "reference"
    REFERENCE_COLLECTION = "reference-collection"
    EMBEDDED_SINGLE = "embedded"
    EMBEDDED_SINGLE_WRAPPED = "embedded-wrapped"
    EMBEDDED_COLLECTION_OPEN = "embedded-collection"
    EMBEDDED_COLLECTION_WRAPPED = "embedded-collection-wrapped"
    SCALAR_SINGLE = "scalar"
    SCALAR_COLLECTION = "scalar-collection"


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    name: str
    type: str = Defaults.PROPERTY_TYPE
    is_many: bool = False
    is_attribute: bool = False
    is_body: bool = False
    is_reference: bool = False
    is_id: bool = False
    as_type: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("property name must not be empty")
        if self.is_attribute and self.is_many:
            raise ValueError(f"attribute property '{self.name}' cannot be a collection")
        if self.is_body and (self.is_many or self.is_attribute or self.is_reference):
            raise ValueError(
                f"body property '{self.name}' must be a single, non-attribute value"
            )
        if self.as_type and (self.is_reference or self.is_primitive):
            raise ValueError(
                f"only embedded properties can be serialized by type, got '{self.name}'"
            )
        if self.is_reference and self.is_primitive:
            raise ValueError(
                f"reference property '{self.name}' must point to a model type"
            )

    @property
    def is_primitive(self) -> bool:
        return self.type in Primitives.ALL

    @property
    def is_embedded(self) -> bool:
        return not self.is_primitive and not self.is_reference

    @property
    def shape(self) -> PropertyShape:
        if self.is_body:
            return PropertyShape.BODY_TEXT
        if self.is_reference:
            if self.is_many:
                return PropertyShape.REFERENCE_COLLECTION
            return PropertyShape.REFERENCE
        if self.is_embedded:
            if self.is_many:
                if self.as_type:
                    return PropertyShape.EMBEDDED_COLLECTION_WRAPPED
                return PropertyShape.EMBEDDED_COLLECTION_OPEN
            if self.as_type:
                return PropertyShape.EMBEDDED_SINGLE_WRAPPED
            return PropertyShape.EMBEDDED_SINGLE
        if self.is_many:
            return PropertyShape.SCALAR_COLLECTION
        if self.is_attribute:
            return PropertyShape.ATTRIBUTE
        return PropertyShape.SCALAR_SINGLE


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    name: str
    properties: tuple[PropertyDescriptor, ...] = ()
    supertypes: tuple[str, ...] = ()
    # Owning package prefix, assigned when the type is registered.
    package: str = ""

    @property
    def qualified_name(self) -> str:
        return f"{self.package}:{self.name}" if self.package else self.name


@dataclass(frozen=True, slots=True)
class Package:
    prefix: str
    uri: str
    types: tuple[TypeDescriptor, ...] = ()
    alias: AliasPolicy = AliasPolicy.NONE

    def __post_init__(self) -> None:
        if not self.prefix or ":" in self.prefix:
            raise ValueError(f"invalid namespace prefix {self.prefix!r}")
        if not self.uri:
            raise ValueError(f"package '{self.prefix}' needs a namespace URI")

    def tag_name(self, type_name: str) -> str:
        return self.alias.apply(type_name)


@dataclass(slots=True, eq=False)
class Instance:
    type_name: str
    values: dict[str, Any] = field(default_factory=dict)
    attrs: dict[str, str] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.values[name] = value

    def collection(self, name: str) -> list[Any]:
        items = self.values.get(name)
        if items is None:
            items = self.values[name] = []
        elif not isinstance(items, list):
            items = self.values[name] = list(items)
        return items

    def __repr__(self) -> str:
        return f"<Instance {self.type_name} {sorted(self.values)}>"
