# schemaguard/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, TYPE_CHECKING

from schemaguard.core.schema.registry import DEFAULT_MODES

if TYPE_CHECKING:
    from .loader import SchemaGuardConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "default_mode"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: "SchemaGuardConfig") -> List[ConfigIssue]:
    """
    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if config.default_mode not in DEFAULT_MODES:
        issues.append(ConfigIssue(
            level="error",
            path="default_mode",
            message=f"unknown default_mode {config.default_mode!r}",
            hint=f"Use one of: {', '.join(DEFAULT_MODES)}",
        ))

    for i, raw in enumerate(config.schema_paths):
        if not Path(raw).expanduser().is_dir():
            issues.append(ConfigIssue(
                level="warn",
                path=f"schema_paths[{i}]",
                message=f"directory {raw!r} does not exist",
                hint="Schema sets in this directory will not be loaded",
            ))

    if config.schema_sets and not config.schema_paths:
        issues.append(ConfigIssue(
            level="warn",
            path="schema_sets",
            message="schema_sets has no effect when schema_paths is empty",
            hint="Add the directories holding the schema set files to schema_paths",
        ))

    return issues


__all__ = ["ConfigIssue", "validate_config"]
