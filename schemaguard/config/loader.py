# schemaguard/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import logging

import yaml

from schemaguard.core.errors import SchemaDefinitionError, codes
from schemaguard.core.schema.registry import PERMISSIVE
from .validator import validate_config, ConfigIssue

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".schemaguard" / "config.yml"


@dataclass(frozen=True)
class SchemaGuardConfig:
    """
    schemaguard configuration.

    Fields:
    - default_mode: "permissive" or "strict"; governs paths no schema matches
    - schema_paths: directories searched for schema set YAML files, in order
    - schema_sets: schema set names to load; empty means all available
    """
    default_mode: str = PERMISSIVE
    schema_paths: Tuple[str, ...] = field(default_factory=tuple)
    schema_sets: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def default(cls) -> "SchemaGuardConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaGuardConfig":
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
                continue
            if key in ("schema_paths", "schema_sets"):
                value = _as_names(key, value)
            values[key] = value
        return cls(**values)

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "SchemaGuardConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.schemaguard/config.yml

        Returns:
            SchemaGuardConfig instance (always has code defaults as fallback)
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()
        return cls.from_dict(yaml_data)

    def validate(self) -> list[ConfigIssue]:
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_mode": self.default_mode,
            "schema_paths": list(self.schema_paths),
            "schema_sets": list(self.schema_sets),
        }


def _as_names(key: str, value: Any) -> Tuple[str, ...]:
    """A single string or a list of strings"""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise SchemaDefinitionError(
        f"{key} must be a string or a list of strings, got {value!r}",
        error_code=codes.INVALID_ARGUMENT,
        details={"key": key},
    )


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Cannot read config {path}, using defaults: {e}")
        return None
    if not isinstance(data, dict):
        logger.warning(f"Config {path} is not a mapping, using defaults")
        return None
    return data


def load_config(config_path: Optional[Path] = None) -> SchemaGuardConfig:
    """
    Load schemaguard configuration.

    Note:
        If YAML is not found or invalid, returns code defaults
    """
    return SchemaGuardConfig.from_yaml(config_path)


__all__ = [
    "SchemaGuardConfig",
    "load_config",
]
