# schemaguard/core/guard.py
"""
Schema guard: the call sites a coordination client runs before it issues a
request.

Each check selects the governing schema through the registry and runs the
matching validation. Violations are logged and re-raised unchanged; the
caller is expected to abort the request.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Union
import logging

from schemaguard.core.errors import SchemaDefinitionError, SchemaViolation, codes
from schemaguard.core.schema import CreateMode, Schema, SchemaRegistry

logger = logging.getLogger(__name__)


class SchemaGuard:
    """
    Usage:
    ```python
    guard = SchemaGuard(registry)
    guard.check_create("/locks/lock-1", CreateMode.EPHEMERAL, b"")
    guard.check_watch("/locks/lock-1", is_watching=False)
    ```
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None):
        self.registry = registry or SchemaRegistry()

    def schema_for(self, path: str) -> Schema:
        schema = self.registry.get_schema(path)
        logger.debug(f"Schema {schema.name!r} selected for {path!r}")
        return schema

    def check_create(
        self,
        path: str,
        mode: Union[CreateMode, str, bool] = CreateMode.PERSISTENT,
        data: bytes = b"",
        *,
        sequential: bool = False,
    ) -> Schema:
        """
        Validate a create request.

        Args:
            path: Node path
            mode: A CreateMode or its value, or the ephemeral flag as a bool
            data: Initial node data
            sequential: Sequential flag; only read when mode is a bool

        Returns:
            The schema that was applied
        """
        mode = _create_mode(mode, sequential)
        schema = self.schema_for(path)
        with _logged(path, "create"):
            schema.validate_create_mode(mode, data)
        return schema

    def check_delete(self, path: str) -> Schema:
        schema = self.schema_for(path)
        with _logged(path, "delete"):
            schema.validate_deletion()
        return schema

    def check_watch(self, path: str, is_watching: bool = True) -> Schema:
        schema = self.schema_for(path)
        with _logged(path, "watch"):
            schema.validate_watcher(is_watching)
        return schema

    def check_set_data(self, path: str, data: bytes) -> Schema:
        schema = self.schema_for(path)
        with _logged(path, "set_data"):
            schema.validate_data(data)
        return schema


def _create_mode(mode: Union[CreateMode, str, bool], sequential: bool) -> CreateMode:
    """A CreateMode, its value, or the ephemeral flag as a real bool"""
    if isinstance(mode, CreateMode):
        return mode
    if isinstance(mode, bool):
        return CreateMode.from_flags(mode, bool(sequential))
    if isinstance(mode, str):
        try:
            return CreateMode(mode.strip().lower())
        except ValueError:
            pass
    raise SchemaDefinitionError(
        f"Unknown create mode: {mode!r}",
        error_code=codes.INVALID_ARGUMENT,
        details={"available": [m.value for m in CreateMode]},
    )


@contextmanager
def _logged(path: str, operation: str) -> Iterator[None]:
    """Logs a SchemaViolation escaping the block, then lets it propagate"""
    try:
        yield
    except SchemaViolation as e:
        logger.warning(
            f"Rejected {operation} on {path!r}: {e.reason} (schema {e.schema.name!r})"
        )
        raise


__all__ = ["SchemaGuard"]
