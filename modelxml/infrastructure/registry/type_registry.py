"""In-memory meta-model registry.

Indexes declared packages and answers the type, package, property and
hierarchy queries the writer needs. Types may name their supertypes and
property types either qualified (``props:Base``) or local (``Base``); local
names resolve inside the declaring package.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from ...application.ports.repositories import TypeRegistryPort
from ...domain.entities.metamodel import (
    Instance,
    Package,
    PropertyDescriptor,
    TypeDescriptor,
)
from ..io.exceptions import (
    NamespaceConflictError,
    UnknownPackageError,
    UnknownTypeError,
)
from ..io.xml_utils import qualified, split_qualified


class MetaModelRegistry(TypeRegistryPort):
    pass

    def __init__(self, packages: Iterable[Package]) -> None:
        super().__init__()
        self._packages: dict[str, Package] = {}
        self._uris: dict[str, str] = {}
        self._types: dict[str, TypeDescriptor] = {}
        self._properties: dict[str, tuple[PropertyDescriptor, ...]] = {}
        for package in packages:
            self._register(package)
        for name in self._types:
            self._resolve_supertypes(name, ())
        for descriptor in self._types.values():
            self.properties_of(descriptor)

    def _register(self, package: Package) -> None:
        if package.prefix in self._packages:
            raise NamespaceConflictError(
                f"Prefix '{package.prefix}' is declared by more than one package"
            )
        if package.uri in self._uris:
            raise NamespaceConflictError(
                f"Namespace '{package.uri}' is already bound to prefix "
                f"'{self._uris[package.uri]}'"
            )
        self._packages[package.prefix] = package
        self._uris[package.uri] = package.prefix
        for descriptor in package.types:
            name = qualified(package.prefix, descriptor.name)
            if name in self._types:
                raise ValueError(f"Type '{name}' is declared twice")
            self._types[name] = replace(
                descriptor,
                package=package.prefix,
                supertypes=tuple(
                    self._qualify(package.prefix, st) for st in descriptor.supertypes
                ),
                properties=tuple(
                    self._qualify_property(package.prefix, p)
                    for p in descriptor.properties
                ),
            )

    @staticmethod
    def _qualify(prefix: str, name: str) -> str:
        return name if ":" in name else qualified(prefix, name)

    def _qualify_property(
        self, prefix: str, prop: PropertyDescriptor
    ) -> PropertyDescriptor:
        if prop.is_primitive:
            return prop
        return replace(prop, type=self._qualify(prefix, prop.type))

    def _resolve_supertypes(self, name: str, path: tuple[str, ...]) -> None:
        if name in path:
            cycle = " -> ".join((*path, name))
            raise ValueError(f"Cyclic type hierarchy: {cycle}")
        for supertype in self._types[name].supertypes:
            self.get_type(supertype)
            self._resolve_supertypes(supertype, (*path, name))

    # Lookups

    def get_package(self, prefix: str) -> Package:
        try:
            return self._packages[prefix]
        except KeyError:
            raise UnknownPackageError(f"No package declares prefix '{prefix}'") from None

    def get_type(self, name: str) -> TypeDescriptor:
        prefix, _ = split_qualified(name)
        if not prefix:
            raise UnknownTypeError(f"Type name '{name}' is not namespace-qualified")
        self.get_package(prefix)
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError(
                f"Unknown type '{name}' in package '{prefix}'"
            ) from None

    def create(self, type_name: str, **values: Any) -> Instance:
        descriptor = self.get_type(type_name)
        return Instance(descriptor.qualified_name, dict(values))

    # TypeRegistryPort

    def type_of(self, instance: Instance) -> TypeDescriptor:
        if not isinstance(instance, Instance):
            raise UnknownTypeError(
                f"Cannot determine the model type of {type(instance).__name__!r}"
            )
        return self.get_type(instance.type_name)

    def package_of(self, descriptor: TypeDescriptor) -> Package:
        return self.get_package(descriptor.package)

    def properties_of(
        self, descriptor: TypeDescriptor
    ) -> tuple[PropertyDescriptor, ...]:
        name = descriptor.qualified_name
        cached = self._properties.get(name)
        if cached is not None:
            return cached
        merged: dict[str, PropertyDescriptor] = {}
        for supertype in descriptor.supertypes:
            for prop in self.properties_of(self.get_type(supertype)):
                merged[prop.name] = prop
        for prop in descriptor.properties:
            merged[prop.name] = prop
        properties = tuple(merged.values())
        self._properties[name] = properties
        return properties

    def is_instance_of(self, instance: Instance, type_name: str) -> bool:
        return self.is_subtype(self.type_of(instance).qualified_name, type_name)

    def is_subtype(self, name: str, ancestor: str) -> bool:
        if name == ancestor:
            return True
        return any(
            self.is_subtype(supertype, ancestor)
            for supertype in self.get_type(name).supertypes
        )
