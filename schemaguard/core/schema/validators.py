# schemaguard/core/schema/validators.py
"""
Data validators: the capability a schema invokes to check node content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, runtime_checkable
import json

from schemaguard.core.errors import SchemaDefinitionError, codes


@runtime_checkable
class DataValidator(Protocol):
    """Data validator protocol"""

    def is_valid(self, data: bytes) -> bool:
        """
        Check node data.

        Args:
            data: Raw node content (may be empty)

        Returns:
            True if the content is acceptable
        """
        ...


class DefaultDataValidator:
    """Accepts any data"""

    def is_valid(self, data: bytes) -> bool:
        return True

    def __repr__(self) -> str:
        return "DefaultDataValidator()"


class RejectAllDataValidator:
    """Rejects any data"""

    def is_valid(self, data: bytes) -> bool:
        return False

    def __repr__(self) -> str:
        return "RejectAllDataValidator()"


@dataclass(frozen=True)
class JsonDataValidator:
    """Accepts UTF-8 encoded JSON documents"""
    allow_empty: bool = True

    def is_valid(self, data: bytes) -> bool:
        if not data:
            return self.allow_empty
        try:
            json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            return False
        return True


@dataclass(frozen=True)
class CallableDataValidator:
    """Adapts a plain function to the DataValidator protocol"""
    func: Callable[[bytes], bool]
    name: str = ""

    def is_valid(self, data: bytes) -> bool:
        return bool(self.func(data))

    def __repr__(self) -> str:
        label = self.name or getattr(self.func, "__name__", "callable")
        return f"CallableDataValidator({label})"


def as_data_validator(value: "DataValidator | Callable[[bytes], bool]") -> DataValidator:
    """Accept a DataValidator or a bare predicate"""
    if isinstance(value, DataValidator):
        return value
    if callable(value):
        return CallableDataValidator(value)
    raise SchemaDefinitionError(
        f"Not a data validator: {value!r}",
        error_code=codes.INVALID_ARGUMENT,
    )


def validator_name(validator: DataValidator) -> str:
    """Short identity used in documentation listings"""
    if isinstance(validator, CallableDataValidator):
        return validator.name or getattr(validator.func, "__name__", "CallableDataValidator")
    return type(validator).__name__


# Names usable from policy files
BUILTIN_VALIDATORS: Dict[str, DataValidator] = {
    "default": DefaultDataValidator(),
    "json": JsonDataValidator(),
    "reject": RejectAllDataValidator(),
}


def resolve_validator(
    name: Optional[str],
    extra: Optional[Dict[str, DataValidator]] = None,
) -> DataValidator:
    """
    Look up a validator by name.

    Args:
        name: Validator name; None or empty means "default"
        extra: Additional named validators, checked before the builtins

    Raises:
        SchemaDefinitionError: If the name is unknown
    """
    if name is not None and not isinstance(name, str):
        raise SchemaDefinitionError(
            f"Data validator name must be a string, got {name!r}",
            error_code=codes.INVALID_ARGUMENT,
        )
    key = (name or "default").strip().lower()
    table = {**BUILTIN_VALIDATORS, **{k.lower(): v for k, v in (extra or {}).items()}}
    try:
        return table[key]
    except KeyError:
        raise SchemaDefinitionError(
            f"Unknown data validator: {name!r}",
            error_code=codes.INVALID_ARGUMENT,
            details={"available": sorted(table)},
        ) from None


__all__ = [
    "DataValidator",
    "DefaultDataValidator",
    "RejectAllDataValidator",
    "JsonDataValidator",
    "CallableDataValidator",
    "as_data_validator",
    "validator_name",
    "BUILTIN_VALIDATORS",
    "resolve_validator",
]
