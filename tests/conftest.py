import pytest

from pinmodel.codegen.core.config import GeneratorConfig
from pinmodel.codegen.core.resolver import DictSchemaResolver
from pinmodel.codegen.core.schema import (
    ArrayProperty,
    EnumValue,
    IntegerProperty,
    ReferenceProperty,
    SchemaDefinition,
    StringFormat,
    StringProperty,
)
from pinmodel.codegen.languages.objc.property import ObjCProperty
from pinmodel.codegen.languages.objc.types import ObjCTypeMapper


@pytest.fixture()
def resolver():
    return DictSchemaResolver.from_schemas(
        [
            SchemaDefinition(name="board"),
            SchemaDefinition(name="user"),
            SchemaDefinition(name="pin_image"),
        ]
    )


@pytest.fixture()
def type_mapper(resolver):
    return ObjCTypeMapper(GeneratorConfig(), resolver)


@pytest.fixture()
def strict_mapper(resolver):
    return ObjCTypeMapper(GeneratorConfig(strict_references=True), resolver)


@pytest.fixture()
def make_property(type_mapper):
    def _make(descriptor, class_name="Pin", mapper=None):
        return ObjCProperty(descriptor, class_name, mapper or type_mapper)

    return _make


@pytest.fixture()
def board_type_property():
    return IntegerProperty(
        name="board_type",
        enum_values=(
            EnumValue(description="public_board", default=1),
            EnumValue(description="secret_board", default=5),
        ),
    )


@pytest.fixture()
def privacy_property():
    return StringProperty(
        name="privacy",
        enum_values=(
            EnumValue(description="public", default="public"),
            EnumValue(description="secret", default="secret"),
        ),
    )


@pytest.fixture()
def boards_property():
    return ArrayProperty(name="boards", items=ReferenceProperty(name="board", ref="board"))


@pytest.fixture()
def link_property():
    return StringProperty(name="link", format=StringFormat.URI)
