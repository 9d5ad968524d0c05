"""Order preferring records that carry a usable message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from formerrors.constants.orders import MESSAGE_EXIST_OPTIONS, MESSAGE_EXIST_ORDER
from formerrors.exceptions import ConfigError
from formerrors.model import ErrorRecord
from formerrors.orders.base import CompareResult, ExtractOrder
from formerrors.types import OrderOptions


@dataclass(frozen=True)
class MessageExistExtractOrder(ExtractOrder):
    """Prefer a defined, non-blank message over a missing or blank one.

    A missing message always loses to a defined one, even an empty string.
    Between two defined messages, an empty one loses to a non-empty one; with
    ``trim`` enabled, whitespace-only messages count as empty.
    """

    order_name: ClassVar[str] = MESSAGE_EXIST_ORDER
    allowed_options: ClassVar[frozenset[str]] = MESSAGE_EXIST_OPTIONS

    trim: bool = False

    def compare(self, first: ErrorRecord, second: ErrorRecord) -> CompareResult:
        if first.message is None and second.message is None:
            return CompareResult.EQUAL
        if first.message is None:
            return CompareResult.SECOND
        if second.message is None:
            return CompareResult.FIRST

        first_blank = self._is_blank(first.message)
        second_blank = self._is_blank(second.message)
        if first_blank == second_blank:
            return CompareResult.EQUAL
        return CompareResult.SECOND if first_blank else CompareResult.FIRST

    def _is_blank(self, message: str) -> bool:
        if self.trim:
            return not message.strip()
        return not message

    @classmethod
    def from_options(cls, options: OrderOptions) -> Self:
        trim = options.get("trim", False)
        if not isinstance(trim, bool):
            raise ConfigError(f"{cls.order_name}.trim must be a boolean")
        return super().from_options(options)
