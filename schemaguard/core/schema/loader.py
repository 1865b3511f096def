# schemaguard/core/schema/loader.py
"""
Where schema sets come from. FileSystemLoader and MemoryLoader live in
schemaguard.infra.schemasets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import SchemaSet


class SchemaSetLoader(ABC):

    @abstractmethod
    def load_schema_set(self, name: str) -> Optional[SchemaSet]:
        """Return the named schema set, or None if this source does not have it"""

    @abstractmethod
    def list_available_schema_sets(self) -> List[str]:
        ...

    @abstractmethod
    def reload(self) -> None:
        """Drop anything cached so the next load reads the source again"""


class CompositeLoader(SchemaSetLoader):
    """
    First loader that knows a name wins; listing is the sorted union.

    Example:
        loader = CompositeLoader([
            FileSystemLoader("~/.schemaguard/schemas"),
            FileSystemLoader("/etc/schemaguard/schemas"),
        ])
    """

    def __init__(self, loaders: List[SchemaSetLoader]):
        self.loaders = loaders

    def load_schema_set(self, name: str) -> Optional[SchemaSet]:
        for loader in self.loaders:
            schema_set = loader.load_schema_set(name)
            if schema_set is not None:
                return schema_set
        return None

    def list_available_schema_sets(self) -> List[str]:
        return sorted({name for loader in self.loaders for name in loader.list_available_schema_sets()})

    def reload(self) -> None:
        for loader in self.loaders:
            loader.reload()


__all__ = [
    "SchemaSetLoader",
    "CompositeLoader",
]
