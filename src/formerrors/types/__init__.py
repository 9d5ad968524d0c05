"""Shared type aliases for formerrors."""

from .common import OrderOptions, RawErrorTree

__all__ = [
    "OrderOptions",
    "RawErrorTree",
]
