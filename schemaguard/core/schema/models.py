# schemaguard/core/schema/models.py
"""
Schema Models

Value types shared by schemas, the builder and the registry:
- Allowance: tri-state permission for one node property
- CreateMode: the four node creation modes of a coordination service
- ExactPath / PathPattern: the path selector a schema is bound to
- SchemaSet: a named, loadable collection of schemas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Pattern, Union, TYPE_CHECKING
import re

from schemaguard.core.errors import SchemaDefinitionError, codes

if TYPE_CHECKING:
    from .schema import Schema


class Allowance(str, Enum):
    """Permission state for ephemeral, sequential and watched"""
    CAN = "can"          # No constraint
    MUST = "must"        # Property is required
    CANNOT = "cannot"    # Property is forbidden

    @classmethod
    def parse(cls, value: Union["Allowance", str]) -> "Allowance":
        """Accept an Allowance or its name/value in any case"""
        if isinstance(value, Allowance):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise SchemaDefinitionError(
            f"Unknown allowance: {value!r} (expected one of: can, must, cannot)",
            error_code=codes.INVALID_ARGUMENT,
            details={"value": str(value)},
        )


class CreateMode(str, Enum):
    """Node creation modes"""
    PERSISTENT = "persistent"
    PERSISTENT_SEQUENTIAL = "persistent_sequential"
    EPHEMERAL = "ephemeral"
    EPHEMERAL_SEQUENTIAL = "ephemeral_sequential"

    @property
    def is_ephemeral(self) -> bool:
        return self in (CreateMode.EPHEMERAL, CreateMode.EPHEMERAL_SEQUENTIAL)

    @property
    def is_sequential(self) -> bool:
        return self in (CreateMode.PERSISTENT_SEQUENTIAL, CreateMode.EPHEMERAL_SEQUENTIAL)

    @classmethod
    def from_flags(cls, ephemeral: bool, sequential: bool) -> "CreateMode":
        if ephemeral:
            return cls.EPHEMERAL_SEQUENTIAL if sequential else cls.EPHEMERAL
        return cls.PERSISTENT_SEQUENTIAL if sequential else cls.PERSISTENT


def _require_text(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SchemaDefinitionError(
            f"{what} cannot be empty",
            error_code=codes.INVALID_ARGUMENT,
            details={"value": repr(value)},
        )
    return value


@dataclass(frozen=True)
class ExactPath:
    """Selector that applies to one full node path only"""
    path: str

    def __post_init__(self) -> None:
        _require_text(self.path, "path")

    @property
    def is_exact(self) -> bool:
        return True

    @property
    def raw(self) -> str:
        return self.path

    def matches(self, path: str) -> bool:
        return path == self.path


@dataclass(frozen=True)
class PathPattern:
    """
    Selector that applies to every path the expression fully matches

    Identity is the expression source plus its flags; the compiled form is
    derived and not compared.
    """
    source: str
    flags: int = 0
    compiled: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_text(self.source, "path pattern")
        try:
            compiled = re.compile(self.source, self.flags)
        except re.error as e:
            raise SchemaDefinitionError(
                f"Invalid path pattern {self.source!r}: {e}",
                error_code=codes.INVALID_ARGUMENT,
                details={"pattern": self.source},
            ) from e
        object.__setattr__(self, "compiled", compiled)

    @classmethod
    def of(cls, pattern: Union[str, Pattern[str], "PathPattern"]) -> "PathPattern":
        if isinstance(pattern, PathPattern):
            return pattern
        if isinstance(pattern, re.Pattern):
            return cls(pattern.pattern, pattern.flags & ~re.UNICODE)
        return cls(pattern)

    @property
    def is_exact(self) -> bool:
        return False

    @property
    def raw(self) -> str:
        return self.source

    def matches(self, path: str) -> bool:
        return self.compiled.fullmatch(path) is not None


PathSelector = Union[ExactPath, PathPattern]


@dataclass
class SchemaSet:
    """
    Collection of schemas

    Represents a loadable policy file (e.g., coordination.yml)
    """
    name: str
    description: str
    schemas: List["Schema"]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def get_schema(self, name: str) -> "Schema | None":
        """Get schema by name"""
        for schema in self.schemas:
            if schema.name == name:
                return schema
        return None


__all__ = [
    "Allowance",
    "CreateMode",
    "ExactPath",
    "PathPattern",
    "PathSelector",
    "SchemaSet",
]
