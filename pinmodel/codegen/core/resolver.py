"""
Schema resolution for reference properties.

Generators never look schemas up through global state. They receive a
resolver object and treat it as read-only.
"""

from typing import Callable, Dict, Iterable, Optional, Protocol

from ...logging_config import get_logger
from .schema import SchemaDefinition

logger = get_logger(__name__)


class SchemaResolver(Protocol):
    """Anything that can turn a reference name into a schema."""

    def resolve(self, ref: str) -> Optional[SchemaDefinition]:
        """Return the schema for ``ref`` or None when it cannot be found."""
        ...


class DictSchemaResolver:
    """Resolver backed by an in-memory mapping of reference names to schemas."""

    def __init__(self, schemas: Optional[Dict[str, SchemaDefinition]] = None):
        self._schemas: Dict[str, SchemaDefinition] = dict(schemas or {})

    @classmethod
    def from_schemas(cls, schemas: Iterable[SchemaDefinition]) -> "DictSchemaResolver":
        """Index schemas by their own name."""
        return cls({schema.name: schema for schema in schemas})

    def resolve(self, ref: str) -> Optional[SchemaDefinition]:
        return self._schemas.get(ref)

    def __contains__(self, ref: str) -> bool:
        return ref in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


class CachingSchemaResolver:
    """
    Memoizing wrapper around a schema loader callable.

    The cache is filled lazily on first lookup and never invalidated. Misses
    are cached too, so a loader is called at most once per reference name.
    """

    def __init__(self, loader: Callable[[str], Optional[SchemaDefinition]]):
        """
        Initialize caching resolver.

        Args:
            loader: Callable returning the schema for a reference name, or None
        """
        self._loader = loader
        self._cache: Dict[str, Optional[SchemaDefinition]] = {}

    def resolve(self, ref: str) -> Optional[SchemaDefinition]:
        if ref in self._cache:
            return self._cache[ref]

        logger.debug("Loading schema for reference: %s", ref)
        schema = self._loader(ref)
        if schema is None:
            logger.debug("Schema loader returned nothing for reference: %s", ref)
        self._cache[ref] = schema
        return schema

    @property
    def cached_references(self) -> list[str]:
        """Reference names looked up so far."""
        return list(self._cache.keys())
