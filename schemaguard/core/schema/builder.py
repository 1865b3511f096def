# schemaguard/core/schema/builder.py
"""
Schema Builder

Fluent construction of Schema with documented defaults:
- ephemeral / sequential / watched: Allowance.CAN
- can_be_deleted: True
- data_validator: DefaultDataValidator (accepts everything)

documentation has no default; build() fails without it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Pattern, Union

from schemaguard.core.errors import SchemaDefinitionError, codes
from .models import Allowance, ExactPath, PathPattern, PathSelector
from .schema import Schema
from .validators import DataValidator, DefaultDataValidator, as_data_validator


class SchemaBuilder:
    """
    Builder for Schema

    Usage:
    ```python
    schema = (
        SchemaBuilder(pattern="/locks/.*")
        .documentation("Lock nodes")
        .ephemeral(Allowance.MUST)
        .sequential(Allowance.CANNOT)
        .build()
    )
    ```
    """

    def __init__(
        self,
        path: Optional[str] = None,
        pattern: Union[str, Pattern[str], PathPattern, None] = None,
    ):
        """
        Args:
            path: Full node path; the schema applies to this path only
            pattern: Regular expression; the schema applies to every path it fully matches

        Raises:
            SchemaDefinitionError: If both or neither are given, or the one given is blank
        """
        if (path is None) == (pattern is None):
            raise SchemaDefinitionError(
                "exactly one of path or pattern must be given",
                error_code=codes.INVALID_ARGUMENT,
                details={"path": path, "pattern": str(pattern) if pattern is not None else None},
            )
        self._selector: PathSelector = ExactPath(path) if path is not None else PathPattern.of(pattern)
        self._name: str = ""
        self._documentation: Optional[str] = None
        self._data_validator: DataValidator = DefaultDataValidator()
        self._ephemeral = Allowance.CAN
        self._sequential = Allowance.CAN
        self._watched = Allowance.CAN
        self._can_be_deleted = True
        self._metadata: Dict[str, Any] = {}

    def name(self, name: str) -> "SchemaBuilder":
        self._name = name
        return self

    def documentation(self, documentation: str) -> "SchemaBuilder":
        self._documentation = documentation
        return self

    def data_validator(self, validator: Union[DataValidator, Callable[[bytes], bool]]) -> "SchemaBuilder":
        self._data_validator = as_data_validator(validator)
        return self

    def ephemeral(self, allowance: Union[Allowance, str]) -> "SchemaBuilder":
        self._ephemeral = Allowance.parse(allowance)
        return self

    def sequential(self, allowance: Union[Allowance, str]) -> "SchemaBuilder":
        self._sequential = Allowance.parse(allowance)
        return self

    def watched(self, allowance: Union[Allowance, str]) -> "SchemaBuilder":
        self._watched = Allowance.parse(allowance)
        return self

    def can_be_deleted(self, can_be_deleted: bool) -> "SchemaBuilder":
        self._can_be_deleted = can_be_deleted
        return self

    def metadata(self, **metadata: Any) -> "SchemaBuilder":
        self._metadata.update(metadata)
        return self

    def build(self) -> Schema:
        """
        Returns:
            A new Schema

        Raises:
            SchemaDefinitionError: If documentation was never set
        """
        if self._documentation is None:
            raise SchemaDefinitionError(
                "documentation cannot be None",
                details={"path": self._selector.raw},
            )
        return Schema(
            selector=self._selector,
            documentation=self._documentation,
            data_validator=self._data_validator,
            ephemeral=self._ephemeral,
            sequential=self._sequential,
            watched=self._watched,
            can_be_deleted=self._can_be_deleted,
            name=self._name,
            metadata=self._metadata,
        )


__all__ = ["SchemaBuilder"]
