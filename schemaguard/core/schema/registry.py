# schemaguard/core/schema/registry.py
"""
Schema Registry: selects the schema that governs a node path.

Selection order:
1. A schema registered for the exact path
2. The first-registered pattern schema that fully matches the path
3. The registry's default schema

Design principles:
- Exact beats pattern, always
- Pattern ties are broken by registration order (deterministic)
- Lookup never fails; unmatched paths get the default schema
- Thread-safe (registration and lookup share one lock)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union
import logging
import threading

from schemaguard.core.errors import SchemaDefinitionError, codes
from .builder import SchemaBuilder
from .models import PathPattern, SchemaSet
from .schema import Schema
from .validators import RejectAllDataValidator

logger = logging.getLogger(__name__)

PERMISSIVE = "permissive"
STRICT = "strict"
DEFAULT_MODES = (PERMISSIVE, STRICT)

_CATCH_ALL = ".*"


def permissive_default_schema() -> Schema:
    """Default schema that allows everything"""
    return (
        SchemaBuilder(pattern=_CATCH_ALL)
        .name("default")
        .documentation("Default schema: no constraints")
        .build()
    )


def strict_default_schema() -> Schema:
    """Default schema that rejects data, deletion and watches"""
    return (
        SchemaBuilder(pattern=_CATCH_ALL)
        .name("default")
        .documentation("Default schema: nodes without a registered schema are not writable")
        .data_validator(RejectAllDataValidator())
        .watched("cannot")
        .can_be_deleted(False)
        .build()
    )


def default_schema_for(mode: str) -> Schema:
    if mode == PERMISSIVE:
        return permissive_default_schema()
    if mode == STRICT:
        return strict_default_schema()
    raise SchemaDefinitionError(
        f"Unknown default mode: {mode!r} (expected one of: {', '.join(DEFAULT_MODES)})",
        error_code=codes.INVALID_ARGUMENT,
    )


class SchemaRegistry:
    """
    Registry of schemas

    Usage:
    ```python
    registry = SchemaRegistry(default_mode="strict")
    registry.register(Schema.builder("/config").documentation("Root config").build())
    registry.register(
        SchemaBuilder(pattern="/locks/.*").documentation("Locks").ephemeral("must").build()
    )

    schema = registry.get_schema("/locks/lock-1")
    schema.validate_create(True, False, b"")
    ```
    """

    def __init__(
        self,
        default_schema: Optional[Schema] = None,
        *,
        default_mode: str = PERMISSIVE,
    ):
        """
        Args:
            default_schema: Schema returned when nothing matches
            default_mode: "permissive" or "strict"; used when default_schema is None
        """
        self._default = default_schema or default_schema_for(default_mode)
        self._exact: Dict[str, Schema] = {}
        self._patterns: Dict[PathPattern, Schema] = {}
        self._lock = threading.RLock()

    @property
    def default_schema(self) -> Schema:
        return self._default

    def register(self, schema: Schema) -> None:
        """
        Register a schema.

        A schema for a path that is already registered replaces the old one
        and keeps its position.
        """
        table, key = self._slot(schema)
        with self._lock:
            replaced = key in table
            table[key] = schema
        if replaced:
            logger.info(f"Replaced schema for {schema.raw_path!r}")
        else:
            logger.debug(f"Registered schema {schema.name!r} for {schema.raw_path!r}")

    def register_multiple(self, schemas: List[Schema]) -> None:
        with self._lock:
            for schema in schemas:
                self.register(schema)

    def register_schema_set(self, schema_set: SchemaSet) -> None:
        """Register every schema of a schema set"""
        self.register_multiple(schema_set.schemas)
        logger.info(
            f"Registered schema set {schema_set.name!r} ({len(schema_set.schemas)} schemas)"
        )

    def unregister(self, schema: Union[Schema, str]) -> bool:
        """
        Remove a schema, given the schema or its raw path.

        Returns:
            True if something was removed
        """
        with self._lock:
            if isinstance(schema, Schema):
                table, key = self._slot(schema)
                return table.pop(key, None) is not None
            if self._exact.pop(schema, None) is not None:
                return True
            for selector in list(self._patterns):
                if selector.source == schema:
                    del self._patterns[selector]
                    return True
            return False

    def _slot(self, schema: Schema) -> Tuple[dict, Any]:
        if schema.is_exact:
            return self._exact, schema.raw_path
        return self._patterns, schema.selector

    def get_schema(self, path: str) -> Schema:
        """
        Select the schema for a concrete node path.

        Returns:
            The exact schema, else the first matching pattern schema, else
            the default schema
        """
        with self._lock:
            exact = self._exact.get(path)
            if exact is not None:
                return exact
            for schema in self._patterns.values():
                if schema.matches(path):
                    return schema
        return self._default

    def get_named_schema(self, name: str) -> Optional[Schema]:
        with self._lock:
            for schema in self.schemas():
                if schema.name == name:
                    return schema
        return None

    def schemas(self) -> List[Schema]:
        """All registered schemas: exact first, then patterns, each in registration order"""
        with self._lock:
            return list(self._exact.values()) + list(self._patterns.values())

    def count(self) -> int:
        with self._lock:
            return len(self._exact) + len(self._patterns)

    def clear(self) -> None:
        """Clear all registered schemas (useful for testing)"""
        with self._lock:
            self._exact.clear()
            self._patterns.clear()

    def to_documentation(self) -> str:
        """Listing of every registered schema followed by the default"""
        blocks = [schema.to_documentation() for schema in self.schemas()]
        blocks.append(self._default.to_documentation())
        return "\n".join(blocks)

    def __repr__(self) -> str:
        return (
            f"SchemaRegistry(exact={len(self._exact)}, "
            f"patterns={len(self._patterns)}, "
            f"default={self._default.name!r})"
        )


__all__ = [
    "PERMISSIVE",
    "STRICT",
    "DEFAULT_MODES",
    "permissive_default_schema",
    "strict_default_schema",
    "default_schema_for",
    "SchemaRegistry",
]
