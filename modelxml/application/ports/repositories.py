from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.metamodel import (
        Instance,
        Package,
        PropertyDescriptor,
        TypeDescriptor,
    )


@runtime_checkable
class TypeRegistryPort(Protocol):
    pass

    def type_of(self, instance: Instance) -> TypeDescriptor: ...

    def package_of(self, descriptor: TypeDescriptor) -> Package: ...

    def properties_of(
        self, descriptor: TypeDescriptor
    ) -> Sequence[PropertyDescriptor]: ...

    def is_instance_of(self, instance: Instance, type_name: str) -> bool: ...
