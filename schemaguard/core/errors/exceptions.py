# schemaguard/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

from . import codes

if TYPE_CHECKING:
    from schemaguard.core.schema.schema import Schema


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c == codes.SCHEMA_VIOLATION or c in codes.DEFINITION_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class SchemaGuardError(Exception):
    """
    Base exception for everything schemaguard raises.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_violation(self) -> bool:
        return self.error_code == codes.SCHEMA_VIOLATION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class SchemaViolation(SchemaGuardError):
    """
    Raised when an attempted operation contradicts a node's schema.

    Carries the violated schema and one of the fixed reason strings in
    ``codes.VIOLATION_REASONS``.
    """

    def __init__(self, schema: "Schema", reason: str):
        self.schema = schema
        self.reason = reason
        super().__init__(
            message=f"Schema violation: {reason} (path: {schema.raw_path})",
            error_code=codes.SCHEMA_VIOLATION,
            details={
                "path": schema.raw_path,
                "schema": schema.name,
                "reason": reason,
            },
        )


class SchemaDefinitionError(SchemaGuardError):
    """
    Raised while building a schema or loading a schema set.

    A schema that fails here is never constructed, so it can never be
    registered.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str = codes.INVALID_SCHEMA,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details or {},
        )


__all__ = [
    "SchemaGuardError",
    "SchemaViolation",
    "SchemaDefinitionError",
]
