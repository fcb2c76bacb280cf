"""
Core schema representation for code generation.

Property descriptors form a closed tagged union: one frozen dataclass per
value kind, each carrying only the fields that kind needs. Generators
dispatch on the variant instead of downcasting a generic field.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union
from enum import Enum


class ValueKind(Enum):
    """Value kinds a schema property can declare."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    REFERENCE = "reference"


class StringFormat(Enum):
    """String formats that change the generated type."""

    URI = "uri"
    DATE_TIME = "date-time"


@dataclass(frozen=True)
class EnumValue:
    """One entry of an enumerated value set."""

    description: str
    default: Union[int, str]


@dataclass(frozen=True)
class BooleanProperty:
    name: str
    value_kind: ValueKind = field(default=ValueKind.BOOLEAN, init=False)


@dataclass(frozen=True)
class IntegerProperty:
    name: str
    enum_values: Tuple[EnumValue, ...] = ()
    value_kind: ValueKind = field(default=ValueKind.INTEGER, init=False)


@dataclass(frozen=True)
class NumberProperty:
    name: str
    value_kind: ValueKind = field(default=ValueKind.NUMBER, init=False)


@dataclass(frozen=True)
class StringProperty:
    name: str
    format: Optional[StringFormat] = None
    enum_values: Tuple[EnumValue, ...] = ()
    value_kind: ValueKind = field(default=ValueKind.STRING, init=False)


@dataclass(frozen=True)
class ArrayProperty:
    """Array property; ``items`` describes the elements when known."""

    name: str
    items: Optional["PropertyDescriptor"] = None
    value_kind: ValueKind = field(default=ValueKind.ARRAY, init=False)


@dataclass(frozen=True)
class ObjectProperty:
    """String-keyed dictionary; ``additional_properties`` describes the values."""

    name: str
    additional_properties: Optional["PropertyDescriptor"] = None
    value_kind: ValueKind = field(default=ValueKind.OBJECT, init=False)


@dataclass(frozen=True)
class ReferenceProperty:
    """Pointer to another schema, resolved by name through a SchemaResolver."""

    name: str
    ref: str
    value_kind: ValueKind = field(default=ValueKind.REFERENCE, init=False)


PropertyDescriptor = Union[
    BooleanProperty,
    IntegerProperty,
    NumberProperty,
    StringProperty,
    ArrayProperty,
    ObjectProperty,
    ReferenceProperty,
]


@dataclass(frozen=True)
class SchemaDefinition:
    """A resolved schema. Only ``name`` is needed to derive class names."""

    name: str
    properties: Tuple[PropertyDescriptor, ...] = ()
    description: Optional[str] = None

    def get_property(self, name: str) -> Optional[PropertyDescriptor]:
        """Get property by raw schema name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


def enum_values_of(descriptor: PropertyDescriptor) -> Tuple[EnumValue, ...]:
    """Return the enumerated values of a descriptor (empty for kinds without them)."""
    if isinstance(descriptor, (IntegerProperty, StringProperty)):
        return descriptor.enum_values
    return ()


def element_of(descriptor: PropertyDescriptor) -> Optional[PropertyDescriptor]:
    """Return the element/value descriptor of a container, if any."""
    if isinstance(descriptor, ArrayProperty):
        return descriptor.items
    if isinstance(descriptor, ObjectProperty):
        return descriptor.additional_properties
    return None


def collect_references(descriptor: PropertyDescriptor) -> List[str]:
    """
    Collect every reference name reachable from a descriptor.

    Returns:
        Reference names in discovery order, without duplicates
    """
    refs: List[str] = []
    current: Optional[PropertyDescriptor] = descriptor

    while current is not None:
        if isinstance(current, ReferenceProperty):
            if current.ref not in refs:
                refs.append(current.ref)
            break
        current = element_of(current)

    return refs


def enum_values_from_dicts(values: List[Dict[str, Union[int, str]]]) -> Tuple[EnumValue, ...]:
    """Build EnumValue entries from ``{"description", "default"}`` mappings."""
    return tuple(
        EnumValue(description=str(v["description"]), default=v["default"])
        for v in values
    )
