"""Tests for error records built from tree nodes."""

from __future__ import annotations

import pytest

from formerrors.model import EMPTY_NODE, ErrorRecord, Internal, Leaf
from formerrors.tree import DocumentElement


def test_from_leaf_copies_fields() -> None:
    element = DocumentElement("input")

    record = ErrorRecord.from_node("user.name", Leaf(message="Required", element=element, type="required"))

    assert record.path == "user.name"
    assert record.message == "Required"
    assert record.element is element
    assert record.type == "required"
    assert not record.is_empty()


@pytest.mark.parametrize(
    "node",
    [EMPTY_NODE, Internal(own=Leaf(message="own")), None, "junk"],
    ids=["empty-group", "group-with-own", "none", "string"],
)
def test_from_non_leaf_is_empty(node: object) -> None:
    assert ErrorRecord.from_node("grp", node) == ErrorRecord.empty("grp")


@pytest.mark.parametrize(
    ("record", "expected"),
    [
        (ErrorRecord(), True),
        (ErrorRecord(path="a", type="required"), True),
        (ErrorRecord(message=""), False),
        (ErrorRecord(element=DocumentElement("input")), False),
    ],
    ids=["blank", "type-only", "empty-message", "element-only"],
)
def test_is_empty(record: ErrorRecord, expected: bool) -> None:
    assert record.is_empty() is expected


def test_records_compare_elements_by_identity() -> None:
    first = DocumentElement("input")
    second = DocumentElement("input")

    assert ErrorRecord(element=first) == ErrorRecord(element=first)
    assert ErrorRecord(element=first) != ErrorRecord(element=second)
