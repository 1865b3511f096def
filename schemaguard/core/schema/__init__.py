# schemaguard/core/schema/__init__.py
"""
Path Schemas

Per-path policy for a hierarchical coordination namespace: what may be
created, watched and deleted, and what node data must look like.
"""

from .models import (
    Allowance,
    CreateMode,
    ExactPath,
    PathPattern,
    PathSelector,
    SchemaSet,
)

from .validators import (
    DataValidator,
    DefaultDataValidator,
    RejectAllDataValidator,
    JsonDataValidator,
    CallableDataValidator,
    BUILTIN_VALIDATORS,
    resolve_validator,
)

from .schema import Schema
from .builder import SchemaBuilder

from .registry import (
    PERMISSIVE,
    STRICT,
    SchemaRegistry,
    permissive_default_schema,
    strict_default_schema,
)

from .loader import (
    SchemaSetLoader,
    CompositeLoader,
)

__all__ = [
    "Allowance",
    "CreateMode",
    "ExactPath",
    "PathPattern",
    "PathSelector",
    "SchemaSet",
    "DataValidator",
    "DefaultDataValidator",
    "RejectAllDataValidator",
    "JsonDataValidator",
    "CallableDataValidator",
    "BUILTIN_VALIDATORS",
    "resolve_validator",
    "Schema",
    "SchemaBuilder",
    "PERMISSIVE",
    "STRICT",
    "SchemaRegistry",
    "permissive_default_schema",
    "strict_default_schema",
    "SchemaSetLoader",
    "CompositeLoader",
]
