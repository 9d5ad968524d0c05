"""Recursive reduction of an error tree to a single winning record."""

from __future__ import annotations

from collections.abc import Sequence

from formerrors.constants.paths import ROOT_PATH
from formerrors.model import ErrorNode, ErrorRecord, Internal, Leaf
from formerrors.orders.base import CompareResult, ExtractOrder
from formerrors.utils.paths import join_path


def merge_records(
    current: ErrorRecord,
    candidate: ErrorRecord,
    orders: Sequence[ExtractOrder] = (),
) -> ErrorRecord:
    """Pick the record to keep between *current* and *candidate*.

    The first order with a non-equal verdict decides. When every order ties,
    a non-empty record beats an empty one and *current* wins otherwise, so
    earlier siblings keep priority over later ones.
    """
    for order in orders:
        result = order.compare(current, candidate)
        if result is CompareResult.FIRST:
            return current
        if result is CompareResult.SECOND:
            return candidate

    if current.is_empty() and not candidate.is_empty():
        return candidate
    return current


def extract_record(
    node: ErrorNode,
    orders: Sequence[ExtractOrder] = (),
    path: str = ROOT_PATH,
) -> ErrorRecord:
    """Reduce *node* bottom-up to its highest-priority record.

    An internal node's own error competes first, followed by its children in
    declaration order. Anything that is not a node yields an empty record.
    """
    if isinstance(node, Leaf):
        return ErrorRecord.from_node(path, node)
    if not isinstance(node, Internal):
        return ErrorRecord.empty(path)

    winner = ErrorRecord.from_node(path, node.own)
    for segment, child in node.children.items():
        candidate = extract_record(child, orders, join_path(path, segment))
        winner = merge_records(winner, candidate, orders)
    return winner
