"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering with the
built-in Objective-C fragments the property generators emit.
"""

from typing import Dict, Any, List, Optional
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    DictLoader,
    TemplateError as JinjaTemplateError,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        # Generated Objective-C must never be HTML-escaped
        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def render_lines(self, template_name: str, context: Dict[str, Any]) -> List[str]:
        """Render a template and split the result into source lines."""
        return self.render_template(template_name, context).split("\n")

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            # Convert to DictLoader to support in-memory templates
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return template_name in self._env.list_templates()


# Built-in templates for the Objective-C property fragments

ENUM_DECLARATION_TEMPLATE = """\
typedef NS_ENUM(NSInteger, {{ type_name }}) {
{% for member in members %}
{{ indent }}{{ member.name }}{{ (" = " ~ member.default) if integer_backed else (" /* " ~ member.default ~ " */") }}{{ "," if not loop.last else "" }}
{% endfor %}
};"""

ENUM_UTILITY_INTERFACE_TEMPLATE = """\
extern {{ type_name }} {{ type_name }}FromString(NSString * _Nonnull str);
extern NSString * _Nonnull {{ type_name }}ToString({{ type_name }} enumType);"""

ARRAY_CONVERSION_TEMPLATE = """\
NSArray *items = value;
NSMutableArray *result = [NSMutableArray arrayWithCapacity:items.count];
for (id obj in items) {
{% if filter_nulls %}
{{ indent }}if (obj != nil && [obj isEqual:[NSNull null]] == NO) {
{{ indent }}{{ indent }}[result addObject:{{ element }}];
{{ indent }}}
{% else %}
{{ indent }}[result addObject:{{ element }}];
{% endif %}
}
{{ target }} = result;"""

DICTIONARY_CONVERSION_TEMPLATE = """\
NSDictionary *items = value;
NSMutableDictionary *result = [NSMutableDictionary dictionaryWithCapacity:items.count];
[items enumerateKeysAndObjectsUsingBlock:^(NSString *key, {{ object_declaration }}, {{ stop_declaration }}) {
{% if filter_nulls %}
{{ indent }}if (obj != nil && [obj isEqual:[NSNull null]] == NO) {
{{ indent }}{{ indent }}result[key] = {{ element }};
{{ indent }}}
{% else %}
{{ indent }}result[key] = {{ element }};
{% endif %}
}];
{{ target }} = result;"""

REFERENCE_MERGE_TEMPLATE = """\
if ({{ target }} != nil) {
   {{ target }} = [{{ target }} mergeWithDictionary:value];
} else {
   {{ target }} = {{ construct }};
}"""

BUILTIN_TEMPLATES = {
    "enum_declaration.m.j2": ENUM_DECLARATION_TEMPLATE,
    "enum_utility_interface.h.j2": ENUM_UTILITY_INTERFACE_TEMPLATE,
    "array_conversion.m.j2": ARRAY_CONVERSION_TEMPLATE,
    "dictionary_conversion.m.j2": DICTIONARY_CONVERSION_TEMPLATE,
    "reference_merge.m.j2": REFERENCE_MERGE_TEMPLATE,
}


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """
    Create a template engine preloaded with the built-in templates.

    Args:
        template_dir: Optional directory of template files. When given,
            built-in templates are not registered.

    Returns:
        Configured TemplateEngine
    """
    engine = TemplateEngine(template_dir)
    if template_dir is None or not template_dir.exists():
        for name, content in BUILTIN_TEMPLATES.items():
            engine.add_template(name, content)
    return engine


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = create_template_engine()
    return _default_engine
