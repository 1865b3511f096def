# schemaguard/core/bootstrap/standard.py

"""
Standard bootstrap for schemaguard.

This defines the canonical way to assemble:
- SchemaSetLoader (from config.schema_paths)
- SchemaRegistry (default schema from config.default_mode)
- SchemaGuard

It is strict and fail-fast: config errors and malformed schema sets raise.
"""

from __future__ import annotations

from typing import Optional
import logging

from schemaguard.config import SchemaGuardConfig, load_config
from schemaguard.core.errors import SchemaDefinitionError, codes
from schemaguard.core.guard import SchemaGuard
from schemaguard.core.schema import CompositeLoader, SchemaRegistry, SchemaSetLoader
from schemaguard.infra.schemasets import FileSystemLoader

logger = logging.getLogger(__name__)


def create_standard_registry(
    config: Optional[SchemaGuardConfig] = None,
    *,
    loader: Optional[SchemaSetLoader] = None,
) -> SchemaRegistry:
    config = config or load_config()

    for issue in config.validate():
        if issue.level == "error":
            raise SchemaDefinitionError(
                f"Invalid configuration: {issue}",
                error_code=codes.INVALID_ARGUMENT,
                details={"path": issue.path},
            )
        logger.warning(f"Configuration: {issue}")

    registry = SchemaRegistry(default_mode=config.default_mode)
    loader = loader or CompositeLoader([FileSystemLoader(p) for p in config.schema_paths])

    names = list(config.schema_sets) or loader.list_available_schema_sets()
    for name in names:
        schema_set = loader.load_schema_set(name)
        if schema_set is None:
            raise SchemaDefinitionError(
                f"Schema set not found: {name!r}",
                error_code=codes.INVALID_SCHEMA_SET,
                details={"name": name},
            )
        registry.register_schema_set(schema_set)

    return registry


def create_standard_guard(
    config: Optional[SchemaGuardConfig] = None,
    *,
    loader: Optional[SchemaSetLoader] = None,
) -> SchemaGuard:
    return SchemaGuard(create_standard_registry(config, loader=loader))
