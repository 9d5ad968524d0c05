"""Tests for the field-name matching extract order."""

from __future__ import annotations

import logging

import pytest

from formerrors.exceptions import ConfigError
from formerrors.model import ErrorRecord
from formerrors.orders import CompareResult, MatchedNameExtractOrder


def _record(path: str, message: str | None = "error") -> ErrorRecord:
    return ErrorRecord(path=path, message=message)


@pytest.mark.parametrize(
    ("path", "exact", "expected"),
    [
        ("fruit", False, 0),
        ("fruit.apple", False, 0),
        ("fruits.apple", False, None),
        ("animal.dog", False, 1),
        ("animal.dog.name", False, 1),
        ("animal.cat", False, 2),
        ("animal.bird", False, None),
        ("fruit", True, 0),
        ("fruit.apple", True, None),
        ("animal.dog", True, 1),
        ("animal.dog.name", True, None),
    ],
    ids=[
        "prefix-self",
        "prefix-child",
        "prefix-needs-separator",
        "prefix-exact-entry",
        "prefix-grandchild",
        "prefix-later-entry",
        "prefix-no-match",
        "exact-self",
        "exact-rejects-child",
        "exact-entry",
        "exact-rejects-grandchild",
    ],
)
def test_match_index(path: str, exact: bool, expected: int | None) -> None:
    order = MatchedNameExtractOrder(("fruit", "animal.dog", "animal.cat"), exact=exact)

    assert order.match_index(_record(path)) == expected


def test_empty_record_never_matches() -> None:
    order = MatchedNameExtractOrder(("fruit",))

    assert order.match_index(_record("fruit", message=None)) is None


def test_empty_name_matches_only_root() -> None:
    order = MatchedNameExtractOrder(("",))

    assert order.match_index(_record("")) == 0
    assert order.match_index(_record("fruit")) is None


def test_compare_prefers_earlier_name() -> None:
    order = MatchedNameExtractOrder(("animal.dog", "animal.cat"))

    assert order.compare(_record("animal.cat"), _record("animal.dog")) is CompareResult.SECOND
    assert order.compare(_record("animal.dog"), _record("animal.cat")) is CompareResult.FIRST


def test_compare_prefers_any_match_over_none() -> None:
    order = MatchedNameExtractOrder(("animal.cat",))

    assert order.compare(_record("fruit.apple"), _record("animal.cat")) is CompareResult.SECOND
    assert order.compare(_record("animal.cat"), _record("fruit.apple")) is CompareResult.FIRST


def test_compare_same_or_no_match_is_equal() -> None:
    order = MatchedNameExtractOrder(("animal",))

    assert order.compare(_record("animal.cat"), _record("animal.dog")) is CompareResult.EQUAL
    assert order.compare(_record("fruit.apple"), _record("plant")) is CompareResult.EQUAL


def test_duplicate_names_are_dropped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="formerrors.orders.name"):
        order = MatchedNameExtractOrder(("a", "b", "a", "c", "b"))

    assert order.names == ("a", "b", "c")
    assert "duplicate" in caplog.text


def test_from_options_builds_tuple_names() -> None:
    order = MatchedNameExtractOrder.from_options({"names": ["a", "b"], "exact": True})

    assert order == MatchedNameExtractOrder(("a", "b"), exact=True)


@pytest.mark.parametrize(
    ("options", "expected_match"),
    [
        ({"names": "fruit"}, "names must be a list of strings"),
        ({"names": ["fruit", 3]}, "names must be a list of strings"),
        ({"names": [], "exact": 1}, "exact must be a boolean"),
        ({"names": [], "prefix": True}, "does not accept option"),
    ],
    ids=["string-names", "non-string-entry", "non-bool-exact", "unknown-option"],
)
def test_from_options_rejects_invalid(options: dict[str, object], expected_match: str) -> None:
    with pytest.raises(ConfigError, match=expected_match):
        MatchedNameExtractOrder.from_options(options)


def test_bare_string_is_a_single_name() -> None:
    order = MatchedNameExtractOrder("fruit")

    assert order.names == ("fruit",)
    assert order.match_index(_record("fruit.apple")) == 0
