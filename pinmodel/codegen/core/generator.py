"""
Base generator interface for all code generation targets.

Defines the contract that language property generators implement, the
error taxonomy, and the result container used by ``generate_code``.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Tuple, Union
from pathlib import Path

from ...logging_config import get_logger
from .config import ConfigError, GeneratorConfig, load_config
from .resolver import DictSchemaResolver, SchemaResolver
from .schema import PropertyDescriptor, collect_references
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaAuthoringError(GeneratorError):
    """The schema describes something the data model does not allow.

    Raised for enumerations over kinds other than integer or string, and
    for arrays or dictionaries whose elements are scalar.
    """

    pass


class UnresolvedReferenceError(GeneratorError):
    """A reference could not be resolved while strict references are enabled."""

    def __init__(self, ref: str, property_name: str = ""):
        self.ref = ref
        self.property_name = property_name
        location = f" (property '{property_name}')" if property_name else ""
        super().__init__(f"Unable to resolve schema reference '{ref}'{location}")


class CodeGenerator(ABC):
    """Abstract base class for all property code generators."""

    def __init__(
        self,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
        resolver: Optional[SchemaResolver] = None,
    ):
        """
        Initialize generator.

        Args:
            config: GeneratorConfig instance, dict of overrides or JSON config file path
            resolver: Schema resolver used for reference properties
        """
        if isinstance(config, GeneratorConfig):
            self.config = config
        elif isinstance(config, (str, Path)):
            self.config = load_config(config_file=config)
        elif config is None or isinstance(config, dict):
            self.config = load_config(custom_config=config)
        else:
            raise ConfigError(f"Invalid config type: {type(config)}")
        self.resolver = resolver if resolver is not None else DictSchemaResolver()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'objc')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> Tuple[str, ...]:
        """Return the file extensions of the files fragments end up in."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use the built-in in-memory templates.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def render_fragments(
        self, descriptor: PropertyDescriptor, class_name: str
    ) -> Dict[str, Union[str, List[str]]]:
        """
        Render every source fragment for one property.

        Args:
            descriptor: Property to generate code for
            class_name: Name of the class that owns the property

        Returns:
            Mapping of fragment name to a source line or list of lines
        """
        pass

    def validate_property(self, descriptor: PropertyDescriptor) -> List[str]:
        """
        Check a property for problems that degrade the generated output.

        Language generators can extend this with their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for ref in collect_references(descriptor):
            if self.resolver.resolve(ref) is None:
                warnings.append(
                    f"Property '{descriptor.name}' references unknown schema '{ref}'"
                )

        return warnings


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        fragments: Dict[str, Union[str, List[str]]],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            fragments: Generated fragments keyed by fragment name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.fragments = fragments
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def code(self) -> str:
        """All fragments joined in insertion order, one line per statement."""
        lines: List[str] = []
        for fragment in self.fragments.values():
            if isinstance(fragment, list):
                lines.extend(fragment)
            elif fragment:
                lines.append(fragment)
        return "\n".join(lines)

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(fragments={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, descriptor: PropertyDescriptor, class_name: str = ""
) -> GenerationResult:
    """
    Generate all fragments for one property with error handling.

    Generator errors become a failed result; anything else propagates.

    Args:
        generator: Code generator instance
        descriptor: Property to generate code for
        class_name: Name of the owning class

    Returns:
        GenerationResult with fragments, warnings, and metadata
    """
    try:
        warnings = generator.validate_property(descriptor)
        fragments = generator.render_fragments(descriptor, class_name)
    except GeneratorError as e:
        logger.error("Code generation failed for %s.%s: %s", class_name, descriptor.name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extensions": list(generator.file_extensions),
        "class_name": class_name,
        "property_name": descriptor.name,
        "value_kind": descriptor.value_kind.value,
        "references": collect_references(descriptor),
    }

    logger.debug(
        "Generated %d fragments for %s.%s", len(fragments), class_name, descriptor.name
    )
    return GenerationResult(fragments, warnings, metadata)
