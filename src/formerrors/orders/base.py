"""Extract order interface shared by every ranking strategy."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Self

from formerrors.exceptions import ConfigError
from formerrors.model import ErrorRecord
from formerrors.types import OrderOptions

_ORDER_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9_]+$")


class CompareResult(Enum):
    """Verdict of comparing two candidate records."""

    FIRST = "first"
    SECOND = "second"
    EQUAL = "equal"


class ExtractOrder(ABC):
    """A priority rule deciding which of two records should be reported.

    Implementations must be pure: ``compare(a, a)`` is ``EQUAL`` and no call
    may depend on state outside the two records.
    """

    order_name: ClassVar[str]
    allowed_options: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate concrete orders define a snake_case `order_name`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        order_name = getattr(cls, "order_name", None)
        if not isinstance(order_name, str) or not _ORDER_NAME_PATTERN.match(order_name):
            raise TypeError(f"{cls.__name__} must define a snake_case class attribute `order_name`")

    @abstractmethod
    def compare(self, first: ErrorRecord, second: ErrorRecord) -> CompareResult:
        """Return which of *first* and *second* takes priority."""

    @classmethod
    def from_options(cls, options: OrderOptions) -> Self:
        """Build an order from configuration options."""
        unknown = sorted(set(options) - cls.allowed_options)
        if unknown:
            raise ConfigError(f"{cls.order_name} does not accept option(s): {', '.join(unknown)}")
        return cls(**options)
