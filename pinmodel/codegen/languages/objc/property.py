"""
Objective-C property code generation.

One ObjCProperty wraps a single schema property and renders every
statement the model class needs for it: the @property declaration, the
enum type behind enumerated values, NSCoding encode/decode expressions,
and the assignments used by initWithDictionary: and mergeWithDictionary:.

Statements are keyed by the raw schema name wherever something is
persisted or read from a dictionary; only the accessor uses the derived
camelCase name.
"""

from typing import List, Optional

from ....logging_config import get_logger
from ...core.generator import SchemaAuthoringError
from ...core.naming import enum_member_name, snake_case_to_property_name
from ...core.schema import (
    ArrayProperty,
    BooleanProperty,
    IntegerProperty,
    NumberProperty,
    ObjectProperty,
    PropertyDescriptor,
    ReferenceProperty,
    StringFormat,
    StringProperty,
)
from ...core.templates import TemplateEngine, get_default_template_engine
from .types import (
    AtomicityType,
    MutabilityType,
    ObjCTypeMapper,
)

logger = get_logger(__name__)


class ObjCProperty:
    """Renders the Objective-C statements for one model property."""

    atomicity_type = AtomicityType.NONATOMIC

    def __init__(
        self,
        descriptor: PropertyDescriptor,
        class_name: str = "",
        type_mapper: Optional[ObjCTypeMapper] = None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize property renderer.

        Args:
            descriptor: Schema property to render
            class_name: Owning class, used to namespace enum type names
            type_mapper: Type mapper carrying configuration and schema resolver
            template_engine: Engine holding the fragment templates
        """
        self.descriptor = descriptor
        self.class_name = class_name
        self.type_mapper = type_mapper or ObjCTypeMapper()
        self.templates = template_engine or get_default_template_engine()

    @property
    def config(self):
        return self.type_mapper.config

    @property
    def property_name(self) -> str:
        """Accessor name, e.g. ``boardType`` for ``board_type``."""
        return snake_case_to_property_name(self.descriptor.name)

    def _nested(self, descriptor: PropertyDescriptor) -> "ObjCProperty":
        return ObjCProperty(descriptor, self.class_name, self.type_mapper, self.templates)

    # Classification

    def is_scalar_type(self) -> bool:
        return self.type_mapper.is_scalar(self.descriptor)

    def is_enum_property_type(self) -> bool:
        return self.type_mapper.is_enumeration(self.descriptor)

    def memory_assignment_type(self):
        return self.type_mapper.memory_assignment_type(self.descriptor)

    def objc_type_name(self) -> str:
        return self.type_mapper.type_name(self.descriptor, self.class_name)

    def property_requires_assignment_logic(self) -> bool:
        return self.type_mapper.requires_assignment_logic(self.descriptor)

    # Enumerations

    def enum_property_type_name(self) -> str:
        return self.type_mapper.enum_type_name(self.descriptor, self.class_name)

    def _validated_enum_values(self):
        if isinstance(self.descriptor, IntegerProperty):
            expected = int
        elif isinstance(self.descriptor, StringProperty):
            expected = str
        else:
            raise SchemaAuthoringError(
                f"Enumerations must be integer or string values: property "
                f"'{self.descriptor.name}' is {self.descriptor.value_kind.value}"
            )

        if not self.descriptor.enum_values:
            raise SchemaAuthoringError(
                f"Property '{self.descriptor.name}' has no enumerated values"
            )

        for value in self.descriptor.enum_values:
            # bool is an int subclass but never a valid integer default
            if not isinstance(value.default, expected) or isinstance(value.default, bool):
                raise SchemaAuthoringError(
                    f"Enum value '{value.description}' of property "
                    f"'{self.descriptor.name}' must have a {expected.__name__} default"
                )
        return self.descriptor.enum_values

    def render_enum_declaration(self) -> str:
        """
        Render the NS_ENUM typedef for an enumerated property.

        Integer enums assign each member its declared value. String enums
        keep declaration order and record the string only as a comment.

        Raises:
            SchemaAuthoringError: If the property is not an integer or string enumeration
        """
        values = self._validated_enum_values()
        type_name = self.enum_property_type_name()

        members = [
            {"name": enum_member_name(type_name, value), "default": value.default}
            for value in values
        ]
        return self.templates.render_template(
            "enum_declaration.m.j2",
            {
                "type_name": type_name,
                "members": members,
                "integer_backed": isinstance(self.descriptor, IntegerProperty),
                "indent": self.config.indent,
            },
        )

    def render_enum_utility_methods_interface(self) -> str:
        """Declarations of the FromString/ToString helpers for the enum type."""
        self._validated_enum_values()
        return self.templates.render_template(
            "enum_utility_interface.h.j2", {"type_name": self.enum_property_type_name()}
        )

    # Declarations

    def render_interface_declaration(self) -> str:
        return self.render_declaration(False)

    def render_implementation_declaration(self) -> str:
        return self.render_declaration(True)

    def render_declaration(self, is_mutable: bool) -> str:
        """Render the @property line; empty when the type cannot be resolved."""
        if not self.type_mapper.is_resolvable(self.descriptor):
            return ""

        mutability_type = MutabilityType.READWRITE if is_mutable else MutabilityType.READONLY
        attributes = [
            self.atomicity_type.value,
            self.memory_assignment_type().value,
            mutability_type.value,
        ]

        if self.is_scalar_type():
            return f"@property ({', '.join(attributes)}) {self.objc_type_name()} {self.property_name};"

        # There is no notion of required fields, so every reference kind is nullable
        attributes.insert(0, "nullable")
        return f"@property ({', '.join(attributes)}) {self.objc_type_name()} *{self.property_name};"

    # NSCoding

    def render_encode_with_coder_statement(self) -> str:
        """Expression archiving the property under its raw schema name."""
        descriptor = self.descriptor
        if isinstance(descriptor, IntegerProperty):
            selector = "encodeInteger"
        elif isinstance(descriptor, BooleanProperty):
            selector = "encodeBool"
        elif isinstance(descriptor, NumberProperty):
            selector = "encodeCGFloat"
        elif isinstance(descriptor, StringProperty) and self.is_enum_property_type():
            selector = "encodeInteger"
        else:
            selector = "encodeObject"
        return f'[aCoder {selector}:self.{self.property_name} forKey:@"{descriptor.name}"]'

    def render_decode_with_coder_statement(self) -> str:
        """
        Expression unarchiving the property under its raw schema name.

        Object values are decoded with an explicit set of permitted classes.
        Returns an empty string when a reference cannot be resolved.
        """
        descriptor = self.descriptor
        key = descriptor.name

        if isinstance(descriptor, IntegerProperty):
            return f'[aDecoder decodeIntegerForKey:@"{key}"]'
        if isinstance(descriptor, BooleanProperty):
            return f'[aDecoder decodeBoolForKey:@"{key}"]'
        if isinstance(descriptor, NumberProperty):
            return f'[aDecoder decodeCGFloatForKey:@"{key}"]'
        if isinstance(descriptor, StringProperty) and self.is_enum_property_type():
            return f'[aDecoder decodeIntegerForKey:@"{key}"]'

        if not self.type_mapper.is_resolvable(descriptor):
            return ""

        classes = self.type_mapper.archive_classes(descriptor)
        if isinstance(descriptor, (StringProperty, ReferenceProperty)):
            return f'[aDecoder decodeObjectOfClass:[{classes[0]} class] forKey:@"{key}"]'

        class_list = ", ".join(f"[{name} class]" for name in classes)
        return (
            f"[aDecoder decodeObjectOfClasses:[NSSet setWithArray:@[{class_list}]] "
            f'forKey:@"{key}"]'
        )

    # Dictionary construction

    def property_statement_from_dictionary(self, property_variable: str) -> str:
        """
        Expression converting a raw dictionary value to the declared type.

        Args:
            property_variable: Expression holding the raw value

        Returns:
            Conversion expression, or "" for an unresolvable reference
        """
        descriptor = self.descriptor

        if isinstance(descriptor, StringProperty):
            if self.is_enum_property_type():
                return f"{self.enum_property_type_name()}FromString({property_variable})"
            if descriptor.format == StringFormat.URI:
                return f"[NSURL URLWithString:{property_variable}]"
            if descriptor.format == StringFormat.DATE_TIME:
                return (
                    "[[NSValueTransformer valueTransformerForName:"
                    f"{self.config.date_value_transformer_key}] "
                    f"transformedValue:{property_variable}]"
                )
            return property_variable
        if isinstance(descriptor, IntegerProperty):
            if self.is_enum_property_type():
                return f"{self.enum_property_type_name()}FromString({property_variable})"
            return f"[{property_variable} integerValue]"
        if isinstance(descriptor, NumberProperty):
            return f"[{property_variable} floatValue]"
        if isinstance(descriptor, BooleanProperty):
            return f"[{property_variable} boolValue]"
        if isinstance(descriptor, ReferenceProperty):
            class_name = self.type_mapper.reference_class_name(descriptor)
            if not class_name:
                return ""
            return f"[[{class_name} alloc] initWithDictionary:{property_variable}]"
        if isinstance(descriptor, (ArrayProperty, ObjectProperty)):
            return property_variable
        raise TypeError(f"Unknown property descriptor: {type(descriptor).__name__}")

    def _dictionary_lookup(self) -> str:
        return f'valueOrNil({self.config.dictionary_variable}, @"{self.descriptor.name}")'

    def _container_conversion(self, target: str, filter_nulls: bool, merging: bool) -> Optional[List[str]]:
        """
        Loop rebuilding an array or dictionary whose elements need conversion.

        Raises:
            SchemaAuthoringError: If the elements are containers that need conversion
        """
        element = self.type_mapper.element_property(self.descriptor)
        if element is None or not self.type_mapper.requires_assignment_logic(element):
            return None

        # Only one level of loop is generated
        if isinstance(element, (ArrayProperty, ObjectProperty)):
            raise SchemaAuthoringError(
                f"Nested containers cannot be converted from a dictionary: property "
                f"'{self.descriptor.name}' has {element.value_kind.value} elements "
                f"that need conversion"
            )

        context = {
            "element": self._nested(element).property_statement_from_dictionary("obj"),
            "target": target,
            "filter_nulls": filter_nulls,
            "indent": self.config.indent,
        }

        if isinstance(self.descriptor, ArrayProperty):
            return self.templates.render_lines("array_conversion.m.j2", context)

        if isinstance(element, ReferenceProperty):
            context["object_declaration"] = "NSDictionary *obj"
        else:
            context["object_declaration"] = "id obj"
        context["stop_declaration"] = "__unused BOOL *stop" if merging else "BOOL *stop"
        return self.templates.render_lines("dictionary_conversion.m.j2", context)

    def property_assignment_statement_from_dictionary(self) -> List[str]:
        """
        Statements assigning the ivar inside initWithDictionary:.

        Plain values are assigned straight from the dictionary lookup.
        Converted containers skip null entries. Returns no statements when a
        reference inside the property's type cannot be resolved.
        """
        if not self.type_mapper.is_resolvable(self.descriptor):
            logger.debug("Skipping dictionary assignment for %s", self.descriptor.name)
            return []

        target = f"_{self.property_name}"

        if not self.property_requires_assignment_logic():
            # Plain assignment straight from the dictionary
            statement = self.property_statement_from_dictionary(self._dictionary_lookup())
            return [f"{target} = {statement};"]

        loop = self._container_conversion(target, filter_nulls=True, merging=False)
        if loop is not None:
            return loop

        return [f"{target} = {self.property_statement_from_dictionary('value')};"]

    def property_merge_statement_from_dictionary(self, origin_variable: str) -> List[str]:
        """
        Statements merging a raw dictionary value into a builder.

        Args:
            origin_variable: Name of the builder receiving the values

        Containers keep null entries unless ``filter_null_entries_on_merge`` is
        set. Existing nested models are merged rather than replaced.
        """
        if not self.type_mapper.is_resolvable(self.descriptor):
            logger.debug("Skipping dictionary merge for %s", self.descriptor.name)
            return []

        target = f"{origin_variable}.{self.property_name}"

        if not self.property_requires_assignment_logic():
            statement = self.property_statement_from_dictionary(self._dictionary_lookup())
            return [f"{target} = {statement};"]

        loop = self._container_conversion(
            target, filter_nulls=self.config.filter_null_entries_on_merge, merging=True
        )
        if loop is not None:
            return loop

        if isinstance(self.descriptor, ReferenceProperty):
            return self.templates.render_lines(
                "reference_merge.m.j2",
                {
                    "target": target,
                    "construct": self.property_statement_from_dictionary("value"),
                },
            )

        return [f"{target} = {self.property_statement_from_dictionary('value')};"]
