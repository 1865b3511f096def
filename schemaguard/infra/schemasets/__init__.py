"""
Schema Set Loaders

Infrastructure layer implementations for loading schema sets
"""

from .filesystem import FileSystemLoader, parse_schema_set
from .memory import MemoryLoader

__all__ = [
    "FileSystemLoader",
    "MemoryLoader",
    "parse_schema_set",
]
