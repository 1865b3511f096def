# schemaguard/core/schema/schema.py
"""
Schema: the policy record for one path or path pattern.

A schema documents and enforces what may happen to the nodes it selects:
- whether node data is well-formed (via its DataValidator)
- whether nodes can/must/cannot be ephemeral, sequential or watched
- whether nodes may be deleted

Every validate_* method is a pure read. A failed check raises
SchemaViolation carrying this schema and a fixed reason string.

Identity: two schemas are equal, and hash alike, when their path selectors
are equal. Documentation, validator and allowances are ignored. Registries
key schemas by path, so a second schema for the same path is the same entry
rather than a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Pattern, Union, TYPE_CHECKING

from schemaguard.core.errors import SchemaDefinitionError, SchemaViolation, codes
from .models import Allowance, CreateMode, ExactPath, PathPattern, PathSelector
from .validators import DataValidator, validator_name

if TYPE_CHECKING:
    from .builder import SchemaBuilder


@dataclass(frozen=True, eq=False)
class Schema:
    """
    Immutable policy record

    Build through Schema.builder() so unset fields get their defaults.
    """
    selector: PathSelector
    documentation: str
    data_validator: DataValidator
    ephemeral: Allowance
    sequential: Allowance
    watched: Allowance
    can_be_deleted: bool
    name: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.selector, (ExactPath, PathPattern)):
            raise SchemaDefinitionError(
                "a schema needs exactly one of an exact path or a path pattern",
                details={"selector": repr(self.selector)},
            )
        if not isinstance(self.documentation, str) or not self.documentation.strip():
            raise SchemaDefinitionError(
                "documentation cannot be empty",
                details={"path": self.selector.raw},
            )
        if self.data_validator is None:
            raise SchemaDefinitionError(
                "data_validator cannot be None",
                details={"path": self.selector.raw},
            )
        for attr in ("ephemeral", "sequential", "watched"):
            if not isinstance(getattr(self, attr), Allowance):
                raise SchemaDefinitionError(
                    f"{attr} must be an Allowance, got {getattr(self, attr)!r}",
                    details={"path": self.selector.raw},
                )
        object.__setattr__(self, "can_be_deleted", bool(self.can_be_deleted))
        object.__setattr__(self, "name", self.name or self.selector.raw)
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    # -------- construction --------

    @staticmethod
    def builder(path: Union[str, Pattern[str]]) -> "SchemaBuilder":
        """
        Start a builder.

        A str is a full node path and the schema applies to that path only.
        A compiled pattern applies to every path it fully matches. Exact
        path schemas take precedence over pattern schemas.
        """
        from .builder import SchemaBuilder
        if isinstance(path, str):
            return SchemaBuilder(path=path)
        return SchemaBuilder(pattern=path)

    # -------- identity --------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Schema):
            return NotImplemented
        return self.selector == other.selector

    def __hash__(self) -> int:
        return hash(self.selector)

    # -------- selection --------

    @property
    def is_exact(self) -> bool:
        return self.selector.is_exact

    @property
    def raw_path(self) -> str:
        """The exact path if one was used, otherwise the pattern source"""
        return self.selector.raw

    def matches(self, path: str) -> bool:
        return self.selector.matches(path)

    # -------- validation --------

    def validate_deletion(self) -> None:
        """
        Validate that this schema allows node deletion

        Raises:
            SchemaViolation: if the schema does not allow deletion
        """
        if not self.can_be_deleted:
            raise SchemaViolation(self, codes.CANNOT_BE_DELETED)

    def validate_watcher(self, is_watching: bool) -> None:
        """
        Validate that this schema's watched setting matches

        Args:
            is_watching: True if a watch is being set on the node

        Raises:
            SchemaViolation: if the watched setting does not match
        """
        if is_watching and self.watched == Allowance.CANNOT:
            raise SchemaViolation(self, codes.CANNOT_BE_WATCHED)

        if not is_watching and self.watched == Allowance.MUST:
            raise SchemaViolation(self, codes.MUST_BE_WATCHED)

    def validate_create(self, is_ephemeral: bool, is_sequential: bool, data: bytes) -> None:
        """
        Validate the create flags against this schema, then the data

        Checks run ephemeral, then sequential, then data; the first failure
        is the one reported.

        Raises:
            SchemaViolation: if a flag does not match or the data is invalid
        """
        if is_ephemeral and self.ephemeral == Allowance.CANNOT:
            raise SchemaViolation(self, codes.CANNOT_BE_EPHEMERAL)

        if not is_ephemeral and self.ephemeral == Allowance.MUST:
            raise SchemaViolation(self, codes.MUST_BE_EPHEMERAL)

        if is_sequential and self.sequential == Allowance.CANNOT:
            raise SchemaViolation(self, codes.CANNOT_BE_SEQUENTIAL)

        if not is_sequential and self.sequential == Allowance.MUST:
            raise SchemaViolation(self, codes.MUST_BE_SEQUENTIAL)

        self.validate_data(data)

    def validate_create_mode(self, mode: CreateMode, data: bytes) -> None:
        """Same as validate_create, with the flags taken from a CreateMode"""
        self.validate_create(mode.is_ephemeral, mode.is_sequential, data)

    def validate_data(self, data: bytes) -> None:
        """
        Raises:
            SchemaViolation: if the data validator rejects the data
        """
        if not self.data_validator.is_valid(data):
            raise SchemaViolation(self, codes.DATA_NOT_VALID)

    # -------- rendering --------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.raw_path,
            "is_regex": not self.is_exact,
            "documentation": self.documentation,
            "data_validator": validator_name(self.data_validator),
            "ephemeral": self.ephemeral.value,
            "sequential": self.sequential.value,
            "watched": self.watched.value,
            "can_be_deleted": self.can_be_deleted,
            "metadata": dict(self.metadata),
        }

    def to_documentation(self) -> str:
        """Multi-line description for operator-facing policy listings"""
        return (
            f"Name: {self.name}\n"
            f"Path: {self.raw_path}\n"
            f"Documentation: {self.documentation}\n"
            f"Validator: {validator_name(self.data_validator)}\n"
            f"ephemeral: {self.ephemeral.name} | sequential: {self.sequential.name} | "
            f"watched: {self.watched.name} | canBeDeleted: {self.can_be_deleted}\n"
        )

    def __repr__(self) -> str:
        return (
            f"Schema(path={self.raw_path!r}, exact={self.is_exact}, "
            f"ephemeral={self.ephemeral.name}, sequential={self.sequential.name}, "
            f"watched={self.watched.name}, can_be_deleted={self.can_be_deleted})"
        )


__all__ = ["Schema"]
