# schemaguard/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# construction
INVALID_SCHEMA: Final[str] = "INVALID_SCHEMA"
INVALID_SCHEMA_SET: Final[str] = "INVALID_SCHEMA_SET"

# validation
SCHEMA_VIOLATION: Final[str] = "SCHEMA_VIOLATION"


# ---- violation reasons (fixed, enumerable) ----
CANNOT_BE_DELETED: Final[str] = "cannot be deleted"
MUST_BE_WATCHED: Final[str] = "must be watched"
CANNOT_BE_WATCHED: Final[str] = "cannot be watched"
CANNOT_BE_EPHEMERAL: Final[str] = "cannot be ephemeral"
MUST_BE_EPHEMERAL: Final[str] = "must be ephemeral"
CANNOT_BE_SEQUENTIAL: Final[str] = "cannot be sequential"
MUST_BE_SEQUENTIAL: Final[str] = "must be sequential"
DATA_NOT_VALID: Final[str] = "data is not valid"

VIOLATION_REASONS: Final[frozenset[str]] = frozenset({
    CANNOT_BE_DELETED,
    MUST_BE_WATCHED,
    CANNOT_BE_WATCHED,
    CANNOT_BE_EPHEMERAL,
    MUST_BE_EPHEMERAL,
    CANNOT_BE_SEQUENTIAL,
    MUST_BE_SEQUENTIAL,
    DATA_NOT_VALID,
})

# Construction-stage failures. These never reach a registry.
DEFINITION_CODES: Final[frozenset[str]] = frozenset({
    INVALID_ARGUMENT,
    INVALID_SCHEMA,
    INVALID_SCHEMA_SET,
})
