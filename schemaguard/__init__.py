"""
schemaguard - path policy validation for coordination namespaces

Declare, per node path or path pattern, what may happen to nodes: whether
their data is well-formed, whether they can/must/cannot be ephemeral,
sequential or watched, and whether they may be deleted. Validation raises
SchemaViolation before a bad request is ever issued.

Basic usage:
    >>> from schemaguard import Schema, SchemaBuilder, SchemaRegistry, Allowance
    >>> registry = SchemaRegistry()
    >>> registry.register(
    ...     SchemaBuilder(pattern="/locks/.*")
    ...     .documentation("Lock nodes")
    ...     .ephemeral(Allowance.MUST)
    ...     .build()
    ... )
    >>> registry.get_schema("/locks/lock-1").validate_create(True, False, b"")

Guard (registry lookup + validation + logging):
    >>> from schemaguard import SchemaGuard, CreateMode
    >>> guard = SchemaGuard(registry)
    >>> guard.check_create("/locks/lock-1", CreateMode.EPHEMERAL)

Policy files:
    >>> from schemaguard import create_standard_guard, SchemaGuardConfig
    >>> guard = create_standard_guard(SchemaGuardConfig(schema_paths=("./schemas",)))
"""

__version__ = "0.1.0"

from .core.errors import SchemaGuardError, SchemaViolation, SchemaDefinitionError, codes

from .core.schema import (
    Allowance,
    CreateMode,
    ExactPath,
    PathPattern,
    SchemaSet,
    DataValidator,
    DefaultDataValidator,
    RejectAllDataValidator,
    JsonDataValidator,
    CallableDataValidator,
    Schema,
    SchemaBuilder,
    SchemaRegistry,
    SchemaSetLoader,
    CompositeLoader,
)

from .core.guard import SchemaGuard
from .config import SchemaGuardConfig, load_config
from .core.bootstrap import create_standard_registry, create_standard_guard

__all__ = [
    "__version__",
    # Errors
    "SchemaGuardError",
    "SchemaViolation",
    "SchemaDefinitionError",
    "codes",
    # Schema
    "Allowance",
    "CreateMode",
    "ExactPath",
    "PathPattern",
    "SchemaSet",
    "DataValidator",
    "DefaultDataValidator",
    "RejectAllDataValidator",
    "JsonDataValidator",
    "CallableDataValidator",
    "Schema",
    "SchemaBuilder",
    "SchemaRegistry",
    "SchemaSetLoader",
    "CompositeLoader",
    # Guard
    "SchemaGuard",
    # Config
    "SchemaGuardConfig",
    "load_config",
    # Bootstrap
    "create_standard_registry",
    "create_standard_guard",
]
