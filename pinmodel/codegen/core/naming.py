"""
Naming utilities for safe code generation.

Derives accessor names, enum type/member names and generated class names
from raw snake_case schema names. The rules are exact: hand-written call
sites in surrounding generated code depend on these spellings.
"""

from .schema import EnumValue, SchemaDefinition


def _uppercase_first(component: str) -> str:
    return component[:1].upper() + component[1:]


def snake_case_to_camel_case(name: str) -> str:
    """Convert ``board_type`` to ``BoardType``.

    Only the first character of each component changes case, so
    ``image_URL`` becomes ``ImageURL``.
    """
    return "".join(_uppercase_first(part) for part in name.split("_"))


def snake_case_to_property_name(name: str) -> str:
    """Convert ``board_type`` to ``boardType``."""
    camel = snake_case_to_camel_case(name)
    return camel[:1].lower() + camel[1:]


def enum_type_name(class_name: str, property_name: str) -> str:
    """Name of the enum synthesized for ``property_name`` inside ``class_name``.

    ``privacy`` in ``Pin`` becomes ``PinPrivacyType``. Names already ending
    in ``_type`` are not suffixed twice: ``board_type`` becomes ``PinBoardType``.
    """
    if property_name != "type" and not property_name.endswith("_type"):
        property_name = property_name + "_type"
    return class_name + snake_case_to_camel_case(property_name)


def enum_member_name(type_name: str, value: EnumValue) -> str:
    """Name of one enum member, namespaced by its enum type name."""
    return type_name + snake_case_to_camel_case(value.description)


def class_name_for_schema(schema: SchemaDefinition, class_prefix: str = "") -> str:
    """
    Canonical generated class name for a resolved schema.

    Args:
        schema: Resolved schema definition
        class_prefix: Generation parameter prepended to the class name

    Returns:
        Class name such as ``PIBoard`` for schema ``board`` and prefix ``PI``
    """
    return f"{class_prefix}{snake_case_to_camel_case(schema.name)}"
