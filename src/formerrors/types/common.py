"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

# Field errors as handed over by a form layer, before normalization.
RawErrorTree: TypeAlias = Mapping[Any, Any] | Sequence[Any] | None
OrderOptions: TypeAlias = Mapping[str, Any]
