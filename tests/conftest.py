from collections.abc import Callable

import pytest

from modelxml.config import WriterConfig
from modelxml.domain.entities.metamodel import (
    AliasPolicy,
    Package,
    PropertyDescriptor as P,
    TypeDescriptor as T,
)
from modelxml.infrastructure.io.model_xml.writer import ModelXMLWriter
from modelxml.infrastructure.registry.type_registry import MetaModelRegistry

PROPERTIES = Package(
    prefix="props",
    uri="http://properties",
    alias=AliasPolicy.LOWER_CASE,
    types=(
        T("Base"),
        T(
            "BaseWithId",
            supertypes=("Base",),
            properties=(P("id", is_attribute=True, is_id=True),),
        ),
        T(
            "Attributes",
            supertypes=("BaseWithId",),
            properties=(
                P("booleanValue", "Boolean", is_attribute=True),
                P("integerValue", "Integer", is_attribute=True),
                P("realValue", "Real", is_attribute=True),
            ),
        ),
        T("Root", properties=(P("any", "Base", is_many=True),)),
        T("SimpleBody", supertypes=("Base",), properties=(P("body", is_body=True),)),
        T(
            "SimpleBodyProperties",
            supertypes=("Base",),
            properties=(
                P("intValue", "Integer"),
                P("boolValue", "Boolean"),
                P("str", is_many=True),
            ),
        ),
        T(
            "ContainedCollection",
            supertypes=("BaseWithId",),
            properties=(P("children", "Base", is_many=True),),
        ),
        T("Complex", supertypes=("BaseWithId",)),
        T(
            "ComplexCount",
            supertypes=("Complex",),
            properties=(P("count", "Integer", is_attribute=True),),
        ),
        T(
            "ComplexNesting",
            supertypes=("Complex",),
            properties=(P("nested", "Complex", is_many=True),),
        ),
        T(
            "Embedding",
            supertypes=("Base",),
            properties=(P("embeddedComplex", "Complex"),),
        ),
        T(
            "ReferencingSingle",
            supertypes=("BaseWithId",),
            properties=(P("referencedComplex", "Complex", is_reference=True),),
        ),
        T(
            "ReferencingCollection",
            supertypes=("BaseWithId",),
            properties=(
                P("references", "Complex", is_many=True, is_reference=True),
            ),
        ),
    ),
)

EXTENDED = Package(
    prefix="ext",
    uri="http://extended",
    alias=AliasPolicy.LOWER_CASE,
    types=(
        T("Base", supertypes=("props:Base",)),
        T(
            "Root",
            supertypes=("props:Root",),
            properties=(P("elements", "ext:Base", is_many=True),),
        ),
        T(
            "ExtendedComplex",
            supertypes=("props:ComplexCount",),
            properties=(P("numCount", "Integer", is_attribute=True),),
        ),
    ),
)

DATATYPES = Package(
    prefix="dt",
    uri="http://datatypes",
    alias=AliasPolicy.LOWER_CASE,
    types=(
        T(
            "Root",
            properties=(
                P("bounds", "Rect", as_type=True),
                P("otherBounds", "do:Rect", is_many=True, as_type=True),
            ),
        ),
        T(
            "Rect",
            properties=(
                P("x", "Integer", is_attribute=True),
                P("y", "Integer", is_attribute=True),
            ),
        ),
        T(
            "Square",
            supertypes=("Rect",),
            properties=(P("side", "Integer", is_attribute=True),),
        ),
    ),
)

DATATYPES_EXTERNAL = Package(
    prefix="do",
    uri="http://datatypes2",
    alias=AliasPolicy.LOWER_CASE,
    types=(
        T(
            "Rect",
            properties=(
                P("x", "Integer", is_attribute=True),
                P("y", "Integer", is_attribute=True),
            ),
        ),
    ),
)

NOALIAS = Package(
    prefix="na",
    uri="http://noalias",
    alias=AliasPolicy.NONE,
    types=(T("Root"),),
)


@pytest.fixture(autouse=True)
def _no_preamble_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MODELXML_PREAMBLE from the developer shell out of config tests."""
    monkeypatch.delenv("MODELXML_PREAMBLE", raising=False)


@pytest.fixture
def model() -> MetaModelRegistry:
    return MetaModelRegistry([PROPERTIES])


@pytest.fixture
def extended_model() -> MetaModelRegistry:
    return MetaModelRegistry([PROPERTIES, EXTENDED])


@pytest.fixture
def datatypes_model() -> MetaModelRegistry:
    return MetaModelRegistry([DATATYPES, DATATYPES_EXTERNAL])


@pytest.fixture
def noalias_model() -> MetaModelRegistry:
    return MetaModelRegistry([NOALIAS])


@pytest.fixture
def create_writer() -> Callable[..., ModelXMLWriter]:
    """Writer factory with the XML declaration switched off."""

    def factory(registry: MetaModelRegistry, **kwargs: object) -> ModelXMLWriter:
        return ModelXMLWriter(registry, WriterConfig(preamble=False), **kwargs)

    return factory
