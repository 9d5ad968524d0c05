"""Extract orders used to rank candidate errors."""

from .base import CompareResult, ExtractOrder
from .dom import DomPlaceExtractOrder
from .message import MessageExistExtractOrder
from .name import MatchedNameExtractOrder
from .registry import ORDER_REGISTRY, create_order

__all__ = [
    "ORDER_REGISTRY",
    "CompareResult",
    "DomPlaceExtractOrder",
    "ExtractOrder",
    "MatchedNameExtractOrder",
    "MessageExistExtractOrder",
    "create_order",
]
