"""
Objective-C code generator implementation.

Renders every per-property fragment an immutable Objective-C model class
needs. Assembling fragments into .h/.m files is left to the caller.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Any, Tuple, Union

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.resolver import SchemaResolver
from ...core.schema import PropertyDescriptor
from .property import ObjCProperty
from .types import ObjCTypeMapper

logger = get_logger(__name__)


class ObjCGenerator(CodeGenerator):
    """Code generator for Objective-C model properties."""

    def __init__(
        self,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
        resolver: Optional[SchemaResolver] = None,
    ):
        """Initialize Objective-C generator with configuration and resolver."""
        super().__init__(config, resolver)
        self.type_mapper = ObjCTypeMapper(self.config, self.resolver)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "objc"

    @property
    def file_extensions(self) -> Tuple[str, ...]:
        """Interface and implementation file extensions."""
        return (".h", ".m")

    def property_for(self, descriptor: PropertyDescriptor, class_name: str = "") -> ObjCProperty:
        """Create the renderer for one property."""
        return ObjCProperty(descriptor, class_name, self.type_mapper, self.template_engine)

    def render_fragments(
        self, descriptor: PropertyDescriptor, class_name: str
    ) -> Dict[str, Union[str, List[str]]]:
        """
        Render every fragment for one property.

        Enum fragments are only present for enumerated properties.
        """
        prop = self.property_for(descriptor, class_name)
        logger.debug("Rendering fragments for %s.%s", class_name, descriptor.name)

        if not self.type_mapper.is_resolvable(descriptor):
            logger.warning(
                "Property %s.%s references an unknown schema; emitting empty output",
                class_name,
                descriptor.name,
            )

        fragments: Dict[str, Union[str, List[str]]] = {}
        if prop.is_enum_property_type():
            fragments["enum_declaration"] = prop.render_enum_declaration()
            fragments["enum_utility_interface"] = prop.render_enum_utility_methods_interface()

        fragments["interface_declaration"] = prop.render_interface_declaration()
        fragments["implementation_declaration"] = prop.render_implementation_declaration()
        fragments["encode"] = prop.render_encode_with_coder_statement()
        fragments["decode"] = prop.render_decode_with_coder_statement()
        fragments["assignment"] = prop.property_assignment_statement_from_dictionary()
        fragments["merge"] = prop.property_merge_statement_from_dictionary("builder")
        return fragments

    def validate_property(self, descriptor: PropertyDescriptor) -> List[str]:
        """Validate a property for Objective-C generation."""
        warnings = super().validate_property(descriptor)

        prop = self.property_for(descriptor)
        if prop.property_name in OBJC_RESERVED_PROPERTY_NAMES:
            warnings.append(
                f"Property '{descriptor.name}' maps to accessor '{prop.property_name}', "
                f"which clashes with an NSObject method"
            )

        return warnings

    def validate_properties(
        self, descriptors: Iterable[PropertyDescriptor], class_name: str
    ) -> List[str]:
        """
        Validate all properties of one class.

        Runs the per-property checks and reports enumerated properties whose
        enum type names collide: ``content`` and ``content_type`` in ``Pin``
        both map to ``PinContentType``.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings: List[str] = []
        enum_owners: Dict[str, List[str]] = {}

        for descriptor in descriptors:
            warnings.extend(self.validate_property(descriptor))
            if self.type_mapper.is_enumeration(descriptor):
                type_name = self.type_mapper.enum_type_name(descriptor, class_name)
                enum_owners.setdefault(type_name, []).append(descriptor.name)

        for type_name, names in enum_owners.items():
            if len(names) > 1:
                owners = ", ".join(f"'{name}'" for name in names)
                warnings.append(f"Properties {owners} all declare enum type '{type_name}'")

        return warnings


# Accessor names that shadow NSObject API
OBJC_RESERVED_PROPERTY_NAMES = {
    "description",
    "debugDescription",
    "hash",
    "class",
    "superclass",
    "self",
    "copy",
    "mutableCopy",
    "init",
    "new",
    "id",
}


def create_objc_generator(
    config: Optional[Dict[str, Any]] = None,
    resolver: Optional[SchemaResolver] = None,
) -> ObjCGenerator:
    """Create an Objective-C generator with default configuration."""
    default_config = {
        "class_prefix": "PI",
        "strict_references": False,
    }

    merged_config = default_config.copy()
    if config:
        merged_config.update(config)

    return ObjCGenerator(merged_config, resolver)


def create_strict_generator(resolver: Optional[SchemaResolver] = None) -> ObjCGenerator:
    """Create generator that fails on unresolvable references."""
    return create_objc_generator({"strict_references": True}, resolver)
