# schemaguard/infra/schemasets/filesystem.py
"""
FileSystem Schema Set Loader

Loads schema sets from YAML files on disk
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from pathlib import Path
import logging
import re

import yaml

from schemaguard.core.errors import SchemaDefinitionError, codes
from schemaguard.core.schema.builder import SchemaBuilder
from schemaguard.core.schema.loader import SchemaSetLoader
from schemaguard.core.schema.models import PathPattern, SchemaSet
from schemaguard.core.schema.schema import Schema
from schemaguard.core.schema.validators import DataValidator, resolve_validator

logger = logging.getLogger(__name__)

_SCHEMA_KEYS = {
    "name",
    "path",
    "is_regex",
    "flags",
    "documentation",
    "data_validator",
    "ephemeral",
    "sequential",
    "watched",
    "can_be_deleted",
    "metadata",
}


class FileSystemLoader(SchemaSetLoader):
    """
    Load schema sets from YAML files

    Directory structure:
        {base_path}/
            coordination.yml
            services.yaml

    File format:
        name: coordination
        description: "Coordination nodes"
        schemas:
          - name: locks
            path: "/locks/.*"
            is_regex: true
            documentation: "Lock nodes"
            ephemeral: must
            sequential: cannot
            watched: cannot
            can_be_deleted: true
    """

    def __init__(
        self,
        base_path: str | Path,
        validators: Optional[Dict[str, DataValidator]] = None,
    ):
        """
        Args:
            base_path: Base directory containing schema set YAML files
            validators: Extra named data validators usable from the files
        """
        self.base_path = Path(base_path).expanduser().resolve()
        self.validators = dict(validators or {})
        self._cache: Dict[str, SchemaSet] = {}

    def load_schema_set(self, name: str) -> Optional[SchemaSet]:
        """
        Load a schema set by name

        Returns:
            SchemaSet if a file exists, None otherwise

        Raises:
            SchemaDefinitionError: If the file exists but does not describe a valid schema set
        """
        if name in self._cache:
            return self._cache[name]

        file_path = None
        for suffix in (".yml", ".yaml"):
            candidate = self.base_path / f"{name}{suffix}"
            if candidate.exists():
                file_path = candidate
                break

        if not file_path:
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaDefinitionError(
                f"Cannot parse schema set file {file_path}: {e}",
                error_code=codes.INVALID_SCHEMA_SET,
                details={"file": str(file_path)},
            ) from e

        schema_set = parse_schema_set(data, default_name=name, validators=self.validators)
        logger.debug(f"Loaded schema set {schema_set.name!r} from {file_path}")
        self._cache[name] = schema_set
        return schema_set

    def list_available_schema_sets(self) -> List[str]:
        if not self.base_path.exists():
            return []

        names = set()
        for pattern in ("*.yml", "*.yaml"):
            names.update(p.stem for p in self.base_path.glob(pattern))
        return sorted(names)

    def reload(self) -> None:
        """Reload all schema sets from disk"""
        self._cache.clear()


def parse_schema_set(
    data: Any,
    *,
    default_name: str = "unknown",
    validators: Optional[Dict[str, DataValidator]] = None,
) -> SchemaSet:
    """
    Build a SchemaSet from decoded YAML/JSON data

    Raises:
        SchemaDefinitionError: On any malformed entry; nothing is partially built
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaDefinitionError(
            f"Schema set {default_name!r} must be a mapping",
            error_code=codes.INVALID_SCHEMA_SET,
        )

    entries = data.get("schemas") or []
    if not isinstance(entries, list):
        raise SchemaDefinitionError(
            f"Schema set {default_name!r}: 'schemas' must be a list",
            error_code=codes.INVALID_SCHEMA_SET,
        )

    schemas: List[Schema] = []
    for index, entry in enumerate(entries):
        try:
            schemas.append(_parse_schema(entry, validators))
        except SchemaDefinitionError as e:
            raise SchemaDefinitionError(
                f"Schema set {default_name!r}, entry {index}: {e.message}",
                error_code=codes.INVALID_SCHEMA_SET,
                details={**e.details, "entry": index},
            ) from e

    return SchemaSet(
        name=data.get("name", default_name),
        description=data.get("description", ""),
        schemas=schemas,
        metadata=data.get("metadata", {}),
    )


def _parse_schema(data: Any, validators: Optional[Dict[str, DataValidator]]) -> Schema:
    """Parse one schema entry"""
    if not isinstance(data, dict):
        raise SchemaDefinitionError("schema entry must be a mapping")

    unknown = set(data) - _SCHEMA_KEYS
    if unknown:
        raise SchemaDefinitionError(
            f"unknown keys: {', '.join(sorted(unknown))}",
            details={"keys": sorted(unknown)},
        )

    path = data.get("path")
    if _parse_bool(data.get("is_regex", False), "is_regex"):
        builder = SchemaBuilder(pattern=PathPattern(path, _parse_flags(data.get("flags", 0))))
    else:
        builder = SchemaBuilder(path=path)

    builder.data_validator(resolve_validator(data.get("data_validator"), validators))
    for attr in ("ephemeral", "sequential", "watched"):
        if attr in data:
            getattr(builder, attr)(data[attr])
    if "can_be_deleted" in data:
        builder.can_be_deleted(_parse_bool(data["can_be_deleted"], "can_be_deleted"))
    if data.get("name"):
        builder.name(str(data["name"]))
    if data.get("metadata"):
        builder.metadata(**_parse_metadata(data["metadata"]))
    if "documentation" in data:
        builder.documentation(data["documentation"])

    return builder.build()


def _parse_bool(value: Any, key: str) -> bool:
    """YAML booleans only; quoted strings and numbers are rejected"""
    if not isinstance(value, bool):
        raise SchemaDefinitionError(
            f"{key} must be true or false, got {value!r}",
            error_code=codes.INVALID_ARGUMENT,
            details={"key": key},
        )
    return value


def _parse_metadata(value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
        raise SchemaDefinitionError(
            "metadata must be a mapping with string keys",
            error_code=codes.INVALID_ARGUMENT,
        )
    return value


_FLAG_LETTERS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


def _parse_flags(flags: Any) -> int:
    """Parse regex flags given as an int or a letter string ("i", "ms")"""
    if isinstance(flags, int) and not isinstance(flags, bool):
        return flags
    if not isinstance(flags, str):
        raise SchemaDefinitionError(
            f"flags must be an int or a string of letters, got {flags!r}",
            error_code=codes.INVALID_ARGUMENT,
        )
    value = 0
    for letter in flags.lower():
        if letter not in _FLAG_LETTERS:
            raise SchemaDefinitionError(
                f"unknown regex flag {letter!r} (expected any of: {''.join(_FLAG_LETTERS)})",
                error_code=codes.INVALID_ARGUMENT,
                details={"flags": flags},
            )
        value |= _FLAG_LETTERS[letter]
    return value


__all__ = ["FileSystemLoader", "parse_schema_set"]
