"""
pinmodel Code Generation Module

Generates Objective-C model property code from schema property descriptors.
"""

from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    SchemaAuthoringError,
    UnresolvedReferenceError,
    generate_code,
)
from .core.schema import (
    ArrayProperty,
    BooleanProperty,
    EnumValue,
    IntegerProperty,
    NumberProperty,
    ObjectProperty,
    PropertyDescriptor,
    ReferenceProperty,
    SchemaDefinition,
    StringFormat,
    StringProperty,
    ValueKind,
)
from .core.resolver import CachingSchemaResolver, DictSchemaResolver, SchemaResolver
from .core.config import ConfigError, GeneratorConfig, ConfigManager, load_config
from .languages.objc import ObjCGenerator


def generate_property(descriptor, class_name="", config=None, resolver=None):
    """
    Generate every code fragment for one property.

    Args:
        descriptor: Property descriptor to generate code for
        class_name: Name of the class that owns the property
        config: Generator configuration dict, GeneratorConfig or JSON file path
        resolver: Schema resolver for reference properties

    Returns:
        GenerationResult with generated fragments
    """
    generator = ObjCGenerator(config, resolver)
    return generate_code(generator, descriptor, class_name)


__all__ = [
    "ObjCGenerator",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "SchemaAuthoringError",
    "UnresolvedReferenceError",
    "ArrayProperty",
    "BooleanProperty",
    "EnumValue",
    "IntegerProperty",
    "NumberProperty",
    "ObjectProperty",
    "PropertyDescriptor",
    "ReferenceProperty",
    "SchemaDefinition",
    "StringFormat",
    "StringProperty",
    "ValueKind",
    "CachingSchemaResolver",
    "DictSchemaResolver",
    "SchemaResolver",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_code",
    "generate_property",
]
