"""Config loading and normalization for extract order chains."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from formerrors.config.model import OrderConfig, OrderSpec
from formerrors.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, ORDERS_KEY
from formerrors.exceptions import ConfigError
from formerrors.orders.base import ExtractOrder
from formerrors.orders.registry import ORDER_REGISTRY, create_order
from formerrors.utils.naming import with_hint

logger = logging.getLogger(__name__)


def load_order_config(root: Path, config_path: Path | None = None) -> OrderConfig:
    """Load the order chain from ``formerrors.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using an empty order chain", path)
        return OrderConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    config = parse_order_config(raw)
    logger.debug("Loaded %d extract order(s) from %s", len(config.orders), path)
    return config


def parse_order_config(raw: Any) -> OrderConfig:
    """Validate already-parsed config data and return an ``OrderConfig``."""
    if raw is None:
        return OrderConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError("Config root must be a mapping")

    for key in raw:
        if key not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(with_hint(f"Unknown config key: {key!r}", str(key), ALLOWED_CONFIG_KEYS))

    orders_raw = raw.get(ORDERS_KEY)
    if orders_raw is None:
        return OrderConfig()
    if not isinstance(orders_raw, list):
        raise ConfigError(f"{ORDERS_KEY} must be a list")

    return OrderConfig(orders=tuple(_parse_order_entry(entry, index) for index, entry in enumerate(orders_raw)))


def build_orders(config: OrderConfig) -> list[ExtractOrder]:
    """Instantiate the configured orders, highest priority first."""
    return [create_order(spec.name, spec.options) for spec in config.orders]


def _parse_order_entry(entry: Any, index: int) -> OrderSpec:
    """Accept ``name`` or ``{name: options}`` entries."""
    if isinstance(entry, str):
        name, options = entry, None
    elif isinstance(entry, Mapping) and len(entry) == 1:
        ((name, options),) = entry.items()
    else:
        raise ConfigError(f"{ORDERS_KEY}[{index}] must be an order name or a single-key mapping")

    if not isinstance(name, str) or name not in ORDER_REGISTRY:
        message = f"{ORDERS_KEY}[{index}]: unknown extract order {name!r}"
        raise ConfigError(with_hint(message, str(name), ORDER_REGISTRY))
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise ConfigError(f"{ORDERS_KEY}[{index}]: options for {name} must be a mapping")
    return OrderSpec(name=name, options=dict(options))
