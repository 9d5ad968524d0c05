"""Configuration loading for extract order chains."""

from __future__ import annotations

from formerrors.config.loader import build_orders, load_order_config, parse_order_config
from formerrors.config.model import OrderConfig, OrderSpec

__all__ = [
    "OrderConfig",
    "OrderSpec",
    "build_orders",
    "load_order_config",
    "parse_order_config",
]
