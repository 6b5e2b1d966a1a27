"""Builder for model XML element trees.

This module converts model instances into the abstract ``Element`` tree,
one property at a time, dispatching on the property's serialization shape.
Namespace usage is recorded in the ``NamespaceResolver`` as the tree is
built.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from modelxml.constants import Defaults
from modelxml.domain.entities.element import Element, Text
from modelxml.domain.entities.metamodel import Instance, PropertyShape

from ..exceptions import (
    AttributeConflictError,
    CyclicContainmentError,
    UnknownNamespaceError,
    UnresolvedReferenceError,
    UnresolvedTypeError,
)
from .constants import TYPE_ATTRIBUTE, XMLNS, XSI_PREFIX
from .text_encoder import TextEncoder
from .utils import format_value, is_null, items_of, split_qualified

if TYPE_CHECKING:
    from modelxml.application.ports.repositories import TypeRegistryPort
    from modelxml.application.ports.services import LoggerPort
    from modelxml.domain.entities.metamodel import (
        PropertyDescriptor,
        TypeDescriptor,
    )

    from .namespaces import NamespaceResolver


_EMBEDDED_SHAPES = frozenset(
    {
        PropertyShape.EMBEDDED_SINGLE,
        PropertyShape.EMBEDDED_SINGLE_WRAPPED,
        PropertyShape.EMBEDDED_COLLECTION_OPEN,
        PropertyShape.EMBEDDED_COLLECTION_WRAPPED,
    }
)


class ElementSerializer:
    pass

    def __init__(
        self,
        registry: TypeRegistryPort,
        namespaces: NamespaceResolver,
        *,
        encoder: TextEncoder | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self.registry = registry
        self.namespaces = namespaces
        self.encoder = encoder or TextEncoder()
        self.logger = logger

    def build(
        self,
        instance: Instance,
        *,
        parent: Element | None = None,
        prop: PropertyDescriptor | None = None,
    ) -> Element:
        """Build the element for ``instance`` and everything it contains.

        Nested instances are expanded depth-first with an explicit stack of
        open elements, so nesting depth is not bounded by the interpreter's
        recursion limit.

        Args:
            instance: The instance to serialize
            parent: Element the instance is nested in, if any
            prop: Property of ``parent`` holding the instance; when it is
                serialized by type, the element takes the property's name in
                the parent's namespace instead of the instance's own tag

        Returns:
            The element with all populated properties serialized

        Raises:
            CyclicContainmentError: If an instance contains itself
        """
        root = self._open(instance, parent, prop)
        stack = [(instance, self._populate(root, instance))]
        open_instances = {id(instance)}
        while stack:
            current, pending = stack[-1]
            request = next(pending, None)
            if request is None:
                stack.pop()
                open_instances.discard(id(current))
                continue
            element, child, child_prop = request
            if id(child) in open_instances:
                raise CyclicContainmentError(
                    f"{child.type_name} is embedded in itself through "
                    f"'{child_prop.name}' of {current.type_name}"
                )
            child_element = element.append(self._open(child, element, child_prop))
            stack.append((child, self._populate(child_element, child)))
            open_instances.add(id(child))
        return root

    def _open(
        self,
        instance: Instance,
        parent: Element | None,
        prop: PropertyDescriptor | None,
    ) -> Element:
        descriptor = self.registry.type_of(instance)
        package = self.registry.package_of(descriptor)
        self.namespaces.register_package(package)

        if parent is not None and prop is not None and prop.as_type:
            element = Element(parent.prefix, prop.name, parent.uri)
            if descriptor.qualified_name != prop.type:
                self._add_discriminator(element, instance, descriptor, prop)
            return element
        return Element(package.prefix, package.tag_name(descriptor.name), package.uri)

    def _populate(
        self, element: Element, instance: Instance
    ) -> Iterator[tuple[Element, Instance, PropertyDescriptor]]:
        """Serialize the properties of ``instance`` onto ``element``.

        Embedded values are yielded back to ``build`` in document order
        instead of being built here.
        """
        descriptor = self.registry.type_of(instance)
        for prop in self.registry.properties_of(descriptor):
            value = instance.get(prop.name)
            if is_null(value):
                continue
            if prop.shape in _EMBEDDED_SHAPES:
                for item in items_of(value):
                    yield element, self._embedded(item, prop), prop
            else:
                self._serialize_property(element, prop, value)

        self._serialize_extension_attributes(element, instance)

    def _serialize_property(
        self, element: Element, prop: PropertyDescriptor, value: object
    ) -> None:
        match prop.shape:
            case PropertyShape.ATTRIBUTE:
                element.set(prop.name, format_value(value))
            case PropertyShape.BODY_TEXT:
                element.text = self.encoder.encode_text(format_value(value))
            case PropertyShape.REFERENCE:
                element.set(prop.name, self._identifier_of(value, prop))
            case PropertyShape.REFERENCE_COLLECTION:
                for item in items_of(value):
                    child = element.append(self._value_element(element, prop))
                    child.text = Text(self._identifier_of(item, prop))
            case PropertyShape.SCALAR_SINGLE | PropertyShape.SCALAR_COLLECTION:
                for item in items_of(value):
                    child = element.append(self._value_element(element, prop))
                    child.text = self.encoder.encode_text(format_value(item))

    @staticmethod
    def _value_element(parent: Element, prop: PropertyDescriptor) -> Element:
        return Element(parent.prefix, prop.name, parent.uri)

    def _add_discriminator(
        self,
        element: Element,
        instance: Instance,
        descriptor: TypeDescriptor,
        prop: PropertyDescriptor,
    ) -> None:
        if self.logger is not None and not self.registry.is_instance_of(
            instance, prop.type
        ):
            self.logger.warning(
                f"{descriptor.qualified_name} is not a subtype of {prop.type} "
                f"(property '{prop.name}')"
            )
        self.namespaces.register_builtin(XSI_PREFIX)
        element.set(TYPE_ATTRIBUTE, descriptor.qualified_name)

    @staticmethod
    def _embedded(value: object, prop: PropertyDescriptor) -> Instance:
        if not isinstance(value, Instance):
            raise UnresolvedTypeError(
                f"Property '{prop.name}' holds {type(value).__name__!r}, "
                f"expected an instance of {prop.type}"
            )
        return value

    def _identifier_of(self, value: object, prop: PropertyDescriptor) -> str:
        if not isinstance(value, Instance):
            return format_value(value)
        properties = self.registry.properties_of(self.registry.type_of(value))
        id_name = next(
            (p.name for p in properties if p.is_id),
            Defaults.ID_PROPERTY,
        )
        identifier = value.get(id_name)
        if is_null(identifier):
            raise UnresolvedReferenceError(
                f"{value.type_name} referenced by '{prop.name}' has no identifier"
            )
        return format_value(identifier)

    def _serialize_extension_attributes(
        self, element: Element, instance: Instance
    ) -> None:
        if not instance.attrs:
            return
        for name, value in instance.attrs.items():
            prefix, local = split_qualified(name)
            if prefix == XMLNS:
                self.namespaces.register(local, str(value))
        for name, value in instance.attrs.items():
            prefix, local = split_qualified(name)
            if prefix == XMLNS:
                continue
            if not prefix and local == XMLNS:
                raise UnknownNamespaceError(
                    f"{element.name} declares a default namespace; only prefixed "
                    "declarations are supported"
                )
            if element.get(name) is not None:
                raise AttributeConflictError(
                    f"Extension attribute '{name}' on {element.name} collides "
                    "with an attribute written from the model"
                )
            if prefix:
                self.namespaces.require(prefix, f"{element.name}@{name}")
            element.set(name, format_value(value))
