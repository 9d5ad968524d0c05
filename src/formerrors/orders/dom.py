"""Order preferring records whose element appears earlier in the document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from formerrors.constants.dom import (
    DOCUMENT_POSITION_CONTAINED_BY,
    DOCUMENT_POSITION_CONTAINS,
    DOCUMENT_POSITION_FOLLOWING,
    DOCUMENT_POSITION_PRECEDING,
)
from formerrors.constants.orders import DOM_PLACE_OPTIONS, DOM_PLACE_ORDER
from formerrors.model import ErrorRecord
from formerrors.orders.base import CompareResult, ExtractOrder


@dataclass(frozen=True)
class DomPlaceExtractOrder(ExtractOrder):
    """Prefer the record whose element comes first in document order.

    A record with an element beats one without. An element that contains the
    other one is treated as coming first.
    """

    order_name: ClassVar[str] = DOM_PLACE_ORDER
    allowed_options: ClassVar[frozenset[str]] = DOM_PLACE_OPTIONS

    def compare(self, first: ErrorRecord, second: ErrorRecord) -> CompareResult:
        first_element = first.element
        second_element = second.element

        if first_element is None and second_element is None:
            return CompareResult.EQUAL
        if first_element is None:
            return CompareResult.SECOND
        if second_element is None:
            return CompareResult.FIRST

        position = first_element.compare_document_position(second_element)
        if position & DOCUMENT_POSITION_FOLLOWING:
            return CompareResult.FIRST
        if position & DOCUMENT_POSITION_PRECEDING:
            return CompareResult.SECOND
        if position & DOCUMENT_POSITION_CONTAINED_BY:
            return CompareResult.FIRST
        if position & DOCUMENT_POSITION_CONTAINS:
            return CompareResult.SECOND
        return CompareResult.EQUAL
