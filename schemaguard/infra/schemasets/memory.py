# schemaguard/infra/schemasets/memory.py
"""Schema sets held in a dict; for tests and policies assembled in code."""

from __future__ import annotations

from typing import Dict, List, Optional

from schemaguard.core.schema.loader import SchemaSetLoader
from schemaguard.core.schema.models import SchemaSet


class MemoryLoader(SchemaSetLoader):

    def __init__(self, schema_sets: Optional[Dict[str, SchemaSet]] = None):
        self._schema_sets: Dict[str, SchemaSet] = dict(schema_sets or {})

    def load_schema_set(self, name: str) -> Optional[SchemaSet]:
        return self._schema_sets.get(name)

    def list_available_schema_sets(self) -> List[str]:
        return sorted(self._schema_sets)

    def reload(self) -> None:
        # nothing cached
        return None

    def add_schema_set(self, schema_set: SchemaSet) -> None:
        self._schema_sets[schema_set.name] = schema_set

    def remove_schema_set(self, name: str) -> bool:
        return self._schema_sets.pop(name, None) is not None


__all__ = ["MemoryLoader"]
