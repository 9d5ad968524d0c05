"""Order-free extraction of the first message in declaration order."""

from __future__ import annotations

from formerrors.model import ErrorNode, Internal, Leaf
from formerrors.tree.normalize import normalize_error_tree
from formerrors.types import RawErrorTree


def first_message(field_errors: RawErrorTree | ErrorNode) -> str | None:
    """Return the first defined message found depth-first, or ``None``.

    A group's own message is visited before its children.
    """
    return _first_in_node(normalize_error_tree(field_errors))


def _first_in_node(node: ErrorNode) -> str | None:
    if isinstance(node, Leaf):
        return node.message
    if node.own is not None and node.own.message is not None:
        return node.own.message
    for child in node.children.values():
        message = _first_in_node(child)
        if message is not None:
            return message
    return None
