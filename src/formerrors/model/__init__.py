"""Core data models for formerrors."""

from .entities import EMPTY_NODE, ElementHandle, ErrorNode, ErrorRecord, Internal, Leaf

__all__ = [
    "EMPTY_NODE",
    "ElementHandle",
    "ErrorNode",
    "ErrorRecord",
    "Internal",
    "Leaf",
]
