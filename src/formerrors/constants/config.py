"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "formerrors.yaml"
ORDERS_KEY: str = "orders"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({ORDERS_KEY})
