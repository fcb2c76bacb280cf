"""
Objective-C type system for code generation.

Classifies properties as scalar or reference kinds, picks ownership
qualifiers and maps schema value kinds to Objective-C type names.
"""

from enum import Enum
from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import SchemaAuthoringError, UnresolvedReferenceError
from ...core.naming import class_name_for_schema, enum_type_name
from ...core.resolver import DictSchemaResolver, SchemaResolver
from ...core.schema import (
    ArrayProperty,
    BooleanProperty,
    IntegerProperty,
    NumberProperty,
    ObjectProperty,
    PropertyDescriptor,
    ReferenceProperty,
    SchemaDefinition,
    StringFormat,
    StringProperty,
    enum_values_of,
)

logger = get_logger(__name__)


class MemoryAssignmentType(Enum):
    """Ownership qualifiers for @property declarations."""

    COPY = "copy"
    STRONG = "strong"
    WEAK = "weak"
    ASSIGN = "assign"


class AtomicityType(Enum):
    ATOMIC = "atomic"
    NONATOMIC = "nonatomic"


class MutabilityType(Enum):
    READONLY = "readonly"
    READWRITE = "readwrite"


class PrimitiveType(Enum):
    """Objective-C scalar type names."""

    FLOAT = "CGFloat"
    INTEGER = "NSInteger"
    BOOLEAN = "BOOL"


# Foundation classes used by generated code
NSSTRING = "NSString"
NSURL = "NSURL"
NSDATE = "NSDate"
NSARRAY = "NSArray"
NSDICTIONARY = "NSDictionary"
NSOBJECT = "NSObject"


def _unknown_variant(descriptor: object) -> TypeError:
    return TypeError(f"Unknown property descriptor: {type(descriptor).__name__}")


class ObjCTypeMapper:
    """
    Central engine for mapping schema properties to Objective-C types.

    All answers are pure functions of the descriptor, the owning class
    name, the configuration and the resolver. Nothing is cached here.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        resolver: Optional[SchemaResolver] = None,
    ):
        """Initialize with configuration and a schema resolver."""
        self.config = config or GeneratorConfig()
        self.resolver = resolver if resolver is not None else DictSchemaResolver()

    # Classification

    def is_enumeration(self, descriptor: PropertyDescriptor) -> bool:
        return len(enum_values_of(descriptor)) > 0

    def is_scalar(self, descriptor: PropertyDescriptor) -> bool:
        """Scalar kinds are copied by value; everything else is held by reference."""
        if isinstance(descriptor, (BooleanProperty, IntegerProperty, NumberProperty)):
            return True
        if isinstance(descriptor, StringProperty):
            return self.is_enumeration(descriptor)
        return False

    def memory_assignment_type(self, descriptor: PropertyDescriptor) -> MemoryAssignmentType:
        if self.is_scalar(descriptor):
            return MemoryAssignmentType.ASSIGN
        # Generated models are immutable, so reference kinds never need "copy".
        return MemoryAssignmentType.STRONG

    def element_property(self, descriptor: PropertyDescriptor) -> Optional[PropertyDescriptor]:
        """
        Return the element/value descriptor of an array or dictionary.

        Raises:
            SchemaAuthoringError: If the element/value kind is scalar
        """
        if isinstance(descriptor, ArrayProperty):
            element, container = descriptor.items, "Arrays"
        elif isinstance(descriptor, ObjectProperty):
            element, container = descriptor.additional_properties, "Dictionaries"
        else:
            return None

        if element is not None and self.is_scalar(element):
            raise SchemaAuthoringError(
                f"{container} cannot contain primitive types: property "
                f"'{descriptor.name}' has {element.value_kind.value} elements"
            )
        return element

    def requires_assignment_logic(self, descriptor: PropertyDescriptor) -> bool:
        """
        Whether a raw dictionary value needs converting before assignment.

        References and URI/date-time strings always do. Containers do when
        their elements do.
        """
        if isinstance(descriptor, ReferenceProperty):
            return True
        if isinstance(descriptor, StringProperty):
            return not self.is_enumeration(descriptor) and descriptor.format in (
                StringFormat.URI,
                StringFormat.DATE_TIME,
            )
        if isinstance(descriptor, (ArrayProperty, ObjectProperty)):
            element = self.element_property(descriptor)
            return element is not None and self.requires_assignment_logic(element)
        return False

    # Reference resolution

    def resolve_reference(self, descriptor: ReferenceProperty) -> Optional[SchemaDefinition]:
        """
        Resolve a reference property through the schema resolver.

        Raises:
            UnresolvedReferenceError: If resolution fails and strict references are on
        """
        schema = self.resolver.resolve(descriptor.ref)
        if schema is None:
            if self.config.strict_references:
                raise UnresolvedReferenceError(descriptor.ref, descriptor.name)
            logger.debug(
                "Unable to resolve schema '%s' for property '%s'",
                descriptor.ref,
                descriptor.name,
            )
        return schema

    def reference_class_name(self, descriptor: ReferenceProperty) -> str:
        """Generated class name for a reference, or "" when it cannot be resolved."""
        schema = self.resolve_reference(descriptor)
        if schema is None:
            return ""
        return class_name_for_schema(schema, self.config.class_prefix)

    def is_resolvable(self, descriptor: PropertyDescriptor) -> bool:
        """Whether every reference inside a descriptor's type resolves."""
        if isinstance(descriptor, ReferenceProperty):
            return self.resolve_reference(descriptor) is not None
        element = self.element_property(descriptor)
        if element is not None:
            return self.is_resolvable(element)
        return True

    # Type names

    def enum_type_name(self, descriptor: PropertyDescriptor, class_name: str) -> str:
        return enum_type_name(class_name, descriptor.name)

    def type_name(self, descriptor: PropertyDescriptor, class_name: str) -> str:
        """Map a property to its Objective-C type name (without pointer marker)."""
        if isinstance(descriptor, BooleanProperty):
            return PrimitiveType.BOOLEAN.value
        if isinstance(descriptor, IntegerProperty):
            if self.is_enumeration(descriptor):
                return self.enum_type_name(descriptor, class_name)
            return PrimitiveType.INTEGER.value
        if isinstance(descriptor, NumberProperty):
            return PrimitiveType.FLOAT.value
        if isinstance(descriptor, StringProperty):
            # String enums are backed by an integer enum type
            if self.is_enumeration(descriptor):
                return self.enum_type_name(descriptor, class_name)
            return self.string_class_name(descriptor)
        if isinstance(descriptor, ArrayProperty):
            element = self.element_property(descriptor)
            if element is None:
                return NSARRAY
            return f"{NSARRAY} <{self.type_name(element, class_name)} *>"
        if isinstance(descriptor, ObjectProperty):
            element = self.element_property(descriptor)
            if element is None:
                return f"{NSDICTIONARY} <{NSSTRING} *, __kindof {NSOBJECT} *>"
            return f"{NSDICTIONARY} <{NSSTRING} *, {self.type_name(element, class_name)} *>"
        if isinstance(descriptor, ReferenceProperty):
            return self.reference_class_name(descriptor)
        raise _unknown_variant(descriptor)

    def string_class_name(self, descriptor: StringProperty) -> str:
        if descriptor.format == StringFormat.URI:
            return NSURL
        if descriptor.format == StringFormat.DATE_TIME:
            return NSDATE
        return NSSTRING

    # Archiving

    def archive_classes(self, descriptor: PropertyDescriptor) -> List[str]:
        """
        Concrete classes a keyed unarchiver may materialize for a value.

        Containers list their own class first, then the classes of their
        elements. Duplicates are dropped, order is otherwise preserved.
        """
        if isinstance(descriptor, StringProperty) and not self.is_enumeration(descriptor):
            classes = [self.string_class_name(descriptor)]
        elif isinstance(descriptor, ReferenceProperty):
            class_name = self.reference_class_name(descriptor)
            classes = [class_name] if class_name else []
        elif isinstance(descriptor, ArrayProperty):
            classes = [NSARRAY]
            element = self.element_property(descriptor)
            if element is not None:
                classes.extend(self.archive_classes(element))
        elif isinstance(descriptor, ObjectProperty):
            # Keys are always strings
            classes = [NSDICTIONARY, NSSTRING]
            element = self.element_property(descriptor)
            if element is not None:
                classes.extend(self.archive_classes(element))
        elif isinstance(descriptor, (BooleanProperty, IntegerProperty, NumberProperty, StringProperty)):
            raise SchemaAuthoringError(
                f"Scalar property '{descriptor.name}' is not archived as an object"
            )
        else:
            raise _unknown_variant(descriptor)

        return list(dict.fromkeys(classes))
