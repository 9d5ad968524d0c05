"""Registry names and option keys for the shipped extract orders."""

from __future__ import annotations

MESSAGE_EXIST_ORDER: str = "message_exist"
DOM_PLACE_ORDER: str = "dom_place"
MATCHED_NAME_ORDER: str = "matched_name"

MESSAGE_EXIST_OPTIONS: frozenset[str] = frozenset({"trim"})
DOM_PLACE_OPTIONS: frozenset[str] = frozenset()
MATCHED_NAME_OPTIONS: frozenset[str] = frozenset({"names", "exact"})
