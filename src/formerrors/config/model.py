"""Config data model for extract order chains."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OrderSpec:
    """One configured extract order and its options."""

    name: str
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OrderConfig:
    """Resolved extract order chain, highest priority first."""

    orders: tuple[OrderSpec, ...] = ()

    @property
    def order_names(self) -> tuple[str, ...]:
        """Names of the configured orders in chain order."""
        return tuple(spec.name for spec in self.orders)
