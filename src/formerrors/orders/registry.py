"""Central registry of extract orders that configuration may reference.

Maps order names to their implementation classes. Only registered orders
can be built from ``formerrors.yaml``.
"""

from __future__ import annotations

from formerrors.exceptions import ConfigError
from formerrors.orders.base import ExtractOrder
from formerrors.orders.dom import DomPlaceExtractOrder
from formerrors.orders.message import MessageExistExtractOrder
from formerrors.orders.name import MatchedNameExtractOrder
from formerrors.types import OrderOptions
from formerrors.utils.naming import with_hint

ORDER_REGISTRY: dict[str, type[ExtractOrder]] = {
    MessageExistExtractOrder.order_name: MessageExistExtractOrder,
    DomPlaceExtractOrder.order_name: DomPlaceExtractOrder,
    MatchedNameExtractOrder.order_name: MatchedNameExtractOrder,
}


def create_order(name: str, options: OrderOptions | None = None) -> ExtractOrder:
    """Instantiate the registered order *name* with *options*."""
    order_cls = ORDER_REGISTRY.get(name)
    if order_cls is None:
        raise ConfigError(with_hint(f"Unknown extract order: {name!r}", name, ORDER_REGISTRY))
    return order_cls.from_options(options or {})
