"""Tests for the extract order registry and base class contract."""

from __future__ import annotations

import pytest

from formerrors.exceptions import ConfigError
from formerrors.model import ErrorRecord
from formerrors.orders import (
    ORDER_REGISTRY,
    CompareResult,
    DomPlaceExtractOrder,
    ExtractOrder,
    MatchedNameExtractOrder,
    MessageExistExtractOrder,
    create_order,
)


def test_registry_lists_shipped_orders() -> None:
    assert ORDER_REGISTRY == {
        "message_exist": MessageExistExtractOrder,
        "dom_place": DomPlaceExtractOrder,
        "matched_name": MatchedNameExtractOrder,
    }


def test_create_order_passes_options() -> None:
    order = create_order("matched_name", {"names": ["a"], "exact": True})

    assert isinstance(order, MatchedNameExtractOrder)
    assert order.names == ("a",)
    assert order.exact is True


def test_create_order_defaults_without_options() -> None:
    assert create_order("message_exist") == MessageExistExtractOrder(trim=False)


def test_create_order_suggests_close_name() -> None:
    with pytest.raises(ConfigError, match="did you mean `message_exist`"):
        create_order("mesage_exist")


def test_create_order_rejects_options_for_dom_place() -> None:
    with pytest.raises(ConfigError, match="dom_place does not accept option"):
        create_order("dom_place", {"trim": True})


def test_subclass_requires_snake_case_name() -> None:
    with pytest.raises(TypeError, match="order_name"):

        class BadOrder(ExtractOrder):
            order_name = "BadOrder"

            def compare(self, first: ErrorRecord, second: ErrorRecord) -> CompareResult:
                return CompareResult.EQUAL


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        create_order("unknown")
