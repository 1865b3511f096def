# schemaguard/core/errors/__init__.py
"""
Core error types for schemaguard.

This package defines the components responsible for:
- Representing schema violations
- Representing schema construction failures

No side effects on import.
"""

from . import codes
from .exceptions import SchemaGuardError, SchemaViolation, SchemaDefinitionError

__all__ = [
    "codes",
    "SchemaGuardError",
    "SchemaViolation",
    "SchemaDefinitionError",
]
