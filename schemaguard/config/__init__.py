"""
schemaguard Configuration

Design principles:
1. Code has defaults; YAML is optional input
2. A missing or unreadable YAML file yields the defaults
"""

from .loader import SchemaGuardConfig, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "SchemaGuardConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
