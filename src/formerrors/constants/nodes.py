"""Key names recognized on raw error payloads."""

from __future__ import annotations

MESSAGE_KEY: str = "message"
TYPE_KEY: str = "type"
REF_KEY: str = "ref"
TYPES_KEY: str = "types"

GLOBAL_ERROR_KEYS: frozenset[str] = frozenset({TYPE_KEY, MESSAGE_KEY})
FIELD_ERROR_KEYS: frozenset[str] = frozenset({TYPE_KEY, MESSAGE_KEY, REF_KEY, TYPES_KEY})
