"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    SchemaAuthoringError,
    UnresolvedReferenceError,
    generate_code,
)
from .schema import (
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
    collect_references,
    enum_values_from_dicts,
)
from .resolver import CachingSchemaResolver, DictSchemaResolver, SchemaResolver
from .naming import (
    class_name_for_schema,
    enum_member_name,
    enum_type_name,
    snake_case_to_camel_case,
    snake_case_to_property_name,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "SchemaAuthoringError",
    "UnresolvedReferenceError",
    "generate_code",
    # Property descriptors
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
    "collect_references",
    "enum_values_from_dicts",
    # Schema resolution
    "CachingSchemaResolver",
    "DictSchemaResolver",
    "SchemaResolver",
    # Naming utilities
    "class_name_for_schema",
    "enum_member_name",
    "enum_type_name",
    "snake_case_to_camel_case",
    "snake_case_to_property_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
