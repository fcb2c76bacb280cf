import dataclasses

import pytest

from pinmodel.codegen.core.schema import (
    ArrayProperty,
    BooleanProperty,
    EnumValue,
    IntegerProperty,
    ObjectProperty,
    ReferenceProperty,
    SchemaDefinition,
    StringProperty,
    ValueKind,
    collect_references,
    element_of,
    enum_values_from_dicts,
    enum_values_of,
)


def test_value_kind_is_fixed_per_variant():
    assert BooleanProperty("flag").value_kind == ValueKind.BOOLEAN
    assert ReferenceProperty("board", ref="board").value_kind == ValueKind.REFERENCE
    assert ArrayProperty("boards").value_kind == ValueKind.ARRAY


def test_descriptors_are_immutable():
    prop = StringProperty("name")

    with pytest.raises(dataclasses.FrozenInstanceError):
        prop.name = "other"


def test_enum_values_only_on_integer_and_string():
    values = (EnumValue("public", "public"),)

    assert enum_values_of(StringProperty("privacy", enum_values=values)) == values
    assert enum_values_of(BooleanProperty("flag")) == ()
    assert enum_values_of(ArrayProperty("things")) == ()


def test_enum_values_from_dicts_keeps_order():
    values = enum_values_from_dicts(
        [
            {"description": "secret_board", "default": 5},
            {"description": "public_board", "default": 1},
        ]
    )

    assert [v.description for v in values] == ["secret_board", "public_board"]
    assert values[0].default == 5


def test_element_of_containers():
    item = ReferenceProperty("board", ref="board")

    assert element_of(ArrayProperty("boards", items=item)) is item
    assert element_of(ObjectProperty("by_id", additional_properties=item)) is item
    assert element_of(IntegerProperty("count")) is None


def test_collect_references_walks_nested_containers():
    nested = ObjectProperty(
        "groups",
        additional_properties=ArrayProperty(
            "items", items=ReferenceProperty("board", ref="board")
        ),
    )

    assert collect_references(nested) == ["board"]
    assert collect_references(StringProperty("name")) == []


def test_schema_definition_get_property():
    schema = SchemaDefinition(
        name="board", properties=(StringProperty("name"), IntegerProperty("pin_count"))
    )

    assert schema.get_property("pin_count") == IntegerProperty("pin_count")
    assert schema.get_property("missing") is None
