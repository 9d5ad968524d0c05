"""Order preferring records whose field path matches a priority list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Self

from formerrors.constants.orders import MATCHED_NAME_OPTIONS, MATCHED_NAME_ORDER
from formerrors.exceptions import ConfigError
from formerrors.model import ErrorRecord
from formerrors.orders.base import CompareResult, ExtractOrder
from formerrors.types import OrderOptions
from formerrors.utils.paths import path_has_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchedNameExtractOrder(ExtractOrder):
    """Prefer records whose path matches an earlier entry of ``names``.

    With ``exact`` disabled an entry also matches every field nested under
    it, so ``"animal"`` matches ``"animal.cat"``. A record matching any entry
    beats one matching none. Records without an error never match.
    """

    order_name: ClassVar[str] = MATCHED_NAME_ORDER
    allowed_options: ClassVar[frozenset[str]] = MATCHED_NAME_OPTIONS

    names: tuple[str, ...] = ()
    exact: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.names, str):
            object.__setattr__(self, "names", (self.names,))
        unique = tuple(dict.fromkeys(self.names))
        if len(unique) != len(self.names):
            logger.warning("Dropping duplicate field names from %s: %s", self.order_name, list(self.names))
        object.__setattr__(self, "names", unique)

    def compare(self, first: ErrorRecord, second: ErrorRecord) -> CompareResult:
        first_index = self.match_index(first)
        second_index = self.match_index(second)

        if first_index == second_index:
            return CompareResult.EQUAL
        if first_index is None:
            return CompareResult.SECOND
        if second_index is None:
            return CompareResult.FIRST
        return CompareResult.FIRST if first_index < second_index else CompareResult.SECOND

    def match_index(self, record: ErrorRecord) -> int | None:
        """Return the index of the first name matching *record*, if any."""
        if record.is_empty():
            return None
        for index, name in enumerate(self.names):
            if self.exact:
                if record.path == name:
                    return index
            elif path_has_prefix(record.path, name):
                return index
        return None

    @classmethod
    def from_options(cls, options: OrderOptions) -> Self:
        names = options.get("names", [])
        if not isinstance(names, (list, tuple)) or not all(isinstance(name, str) for name in names):
            raise ConfigError(f"{cls.order_name}.names must be a list of strings")
        exact = options.get("exact", False)
        if not isinstance(exact, bool):
            raise ConfigError(f"{cls.order_name}.exact must be a boolean")
        return super().from_options({**options, "names": tuple(names)})
